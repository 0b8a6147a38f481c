"""Turning effect descriptors into calls on a rendering sink.

Each :class:`~specialfx.kinds.EffectKind` has a handler in
``KIND_HANDLERS``.  A handler derives the concrete values for its kind
(defaults, numeric coercion, colour decoding, volume scaling), validates any
vocabulary names and finally calls the sink.  Everything except the sink call
runs even when no location is given, so ``render(descriptor, None)`` is a
full validation pass.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Protocol

import structlog

from .colors import parse_colors
from .errors import InvalidSpecSyntax
from .kinds import EffectKind, FireworkType
from .models import EffectDescriptor, FireworkEffect
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary

log = structlog.get_logger(__name__)

Location = Any


class EffectSink(Protocol):
    """Rendering capabilities an environment exposes."""

    def strike_lightning(self, location: Location) -> None: ...

    def strike_lightning_cosmetic(self, location: Location) -> None: ...

    def create_explosion(self, location: Location, power: float, fire: bool) -> None: ...

    def play_generic_effect(
        self, location: Location, effect_id: str, data: int, radius: int
    ) -> None: ...

    def play_sound(
        self, location: Location, sound_id: str, volume: float, pitch: float
    ) -> None: ...

    def play_firework(self, location: Location, firework: FireworkEffect) -> None: ...


KindHandler = Callable[["EffectRenderer", EffectDescriptor, Optional[Location]], None]


class EffectRenderer:
    """Renders descriptors through ``sink``.

    With no sink the renderer still validates every descriptor it is given
    but never produces output.
    """

    def __init__(
        self,
        sink: Optional[EffectSink] = None,
        vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    ) -> None:
        self.sink = sink
        self.vocabulary = vocabulary

    def render(self, descriptor: EffectDescriptor, location: Optional[Location]) -> None:
        KIND_HANDLERS[descriptor.kind](self, descriptor, location)

    def target(self, location: Optional[Location]) -> Optional[EffectSink]:
        """Return the sink to call, or ``None`` if nothing should be output."""
        if location is None:
            return None
        return self.sink


def _render_lightning(
    renderer: EffectRenderer, descriptor: EffectDescriptor, location: Optional[Location]
) -> None:
    power = descriptor.params.get_int("power", 0)
    sink = renderer.target(location)
    if sink is None:
        return
    if power > 0:
        sink.strike_lightning(location)
    else:
        sink.strike_lightning_cosmetic(location)


def _render_explosion(
    renderer: EffectRenderer, descriptor: EffectDescriptor, location: Optional[Location]
) -> None:
    power = descriptor.params.get_float("power", 0.0)
    fire = descriptor.params.get_bool("fire", False)
    sink = renderer.target(location)
    if sink is not None:
        sink.create_explosion(location, power, fire)


def _render_world_effect(
    renderer: EffectRenderer, descriptor: EffectDescriptor, location: Optional[Location]
) -> None:
    name = descriptor.params.get_str("name")
    if not name:
        return
    effect_id = renderer.vocabulary.resolve_effect(name)
    data = descriptor.params.get_int("data", 0)
    radius = descriptor.params.get_int("radius", 64)
    sink = renderer.target(location)
    if sink is not None:
        sink.play_generic_effect(location, effect_id, data, radius)


def _render_sound(
    renderer: EffectRenderer, descriptor: EffectDescriptor, location: Optional[Location]
) -> None:
    name = descriptor.params.get_str("name")
    if not name:
        return
    sound_id = renderer.vocabulary.resolve_sound(name)
    volume = descriptor.params.get_float("volume", 1.0) * descriptor.volume_multiplier
    pitch = descriptor.params.get_float("pitch", 1.0)
    sink = renderer.target(location)
    if sink is not None:
        sink.play_sound(location, sound_id, volume, pitch)


def build_firework(descriptor: EffectDescriptor) -> FireworkEffect:
    """Resolve the parameters of a ``firework`` descriptor into a value."""
    params = descriptor.params
    if "type" not in params:
        raise InvalidSpecSyntax("firework effect must have a 'type' parameter")
    return FireworkEffect(
        shape=FireworkType.from_name(params["type"]),
        colors=parse_colors(params.get_str("color", "")),
        fade_colors=parse_colors(params.get_str("fade", "")),
        flicker=params.get_bool("flicker", False),
        trail=params.get_bool("trail", False),
    )


def _render_firework(
    renderer: EffectRenderer, descriptor: EffectDescriptor, location: Optional[Location]
) -> None:
    firework = build_firework(descriptor)
    sink = renderer.target(location)
    if sink is None:
        return
    try:
        sink.play_firework(location, firework)
    except Exception as err:
        log.warning("Can't play firework effect", error=str(err), shape=firework.shape.value)


KIND_HANDLERS: Dict[EffectKind, KindHandler] = {
    EffectKind.LIGHTNING: _render_lightning,
    EffectKind.EXPLOSION: _render_explosion,
    EffectKind.EFFECT: _render_world_effect,
    EffectKind.SOUND: _render_sound,
    EffectKind.FIREWORK: _render_firework,
}

_unhandled = set(EffectKind) - set(KIND_HANDLERS)
if _unhandled:
    raise ImportError(f"no render handler for effect kinds: {sorted(k.value for k in _unhandled)}")
