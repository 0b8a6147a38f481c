"""Reference rendering sinks.

:class:`RecordingSink` keeps every call it receives, which is what headless
hosts and the test-suite need.  :class:`LoggingSink` reports calls through
structlog and is what ``main.py`` uses for dry runs.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, List, Tuple

import structlog

from .models import FireworkEffect

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SinkCall:
    """One call made on a sink."""

    method: str
    location: Any
    args: Tuple[Any, ...] = ()


class RecordingSink:
    """Sink that records calls instead of rendering them."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._calls: List[SinkCall] = []

    @property
    def calls(self) -> List[SinkCall]:
        with self._lock:
            return list(self._calls)

    def clear(self) -> None:
        with self._lock:
            self._calls.clear()

    def _record(self, method: str, location: Any, *args: Any) -> None:
        with self._lock:
            self._calls.append(SinkCall(method, location, args))

    def strike_lightning(self, location: Any) -> None:
        self._record("strike_lightning", location)

    def strike_lightning_cosmetic(self, location: Any) -> None:
        self._record("strike_lightning_cosmetic", location)

    def create_explosion(self, location: Any, power: float, fire: bool) -> None:
        self._record("create_explosion", location, power, fire)

    def play_generic_effect(self, location: Any, effect_id: str, data: int, radius: int) -> None:
        self._record("play_generic_effect", location, effect_id, data, radius)

    def play_sound(self, location: Any, sound_id: str, volume: float, pitch: float) -> None:
        self._record("play_sound", location, sound_id, volume, pitch)

    def play_firework(self, location: Any, firework: FireworkEffect) -> None:
        self._record("play_firework", location, firework)


class LoggingSink:
    """Sink that logs each effect at info level."""

    def strike_lightning(self, location: Any) -> None:
        log.info("Lightning strike", location=location)

    def strike_lightning_cosmetic(self, location: Any) -> None:
        log.info("Lightning strike (cosmetic)", location=location)

    def create_explosion(self, location: Any, power: float, fire: bool) -> None:
        log.info("Explosion", location=location, power=power, fire=fire)

    def play_generic_effect(self, location: Any, effect_id: str, data: int, radius: int) -> None:
        log.info("World effect", location=location, effect=effect_id, data=data, radius=radius)

    def play_sound(self, location: Any, sound_id: str, volume: float, pitch: float) -> None:
        log.info("Sound", location=location, sound=sound_id, volume=volume, pitch=pitch)

    def play_firework(self, location: Any, firework: FireworkEffect) -> None:
        log.info(
            "Firework",
            location=location,
            shape=firework.shape.value,
            colors=[f"{c.as_rgb():06x}" for c in firework.colors],
            fade=[f"{c.as_rgb():06x}" for c in firework.fade_colors],
            flicker=firework.flicker,
            trail=firework.trail,
        )
