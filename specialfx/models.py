"""Value types for parsed effect specifications.

- :class:`ParameterBag` holds the raw ``key=value`` pairs of one spec and
  converts them to typed values on demand.
- :class:`EffectDescriptor` is the validated, immutable result of parsing a
  spec: the effect kind, its parameters and the volume multiplier inherited
  from the owning catalog.
- :class:`Color` and :class:`FireworkEffect` are the concrete values handed
  to a rendering sink for firework bursts.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple

import structlog

from .errors import InvalidParameterName
from .kinds import EffectKind, FireworkType
from .registry import is_valid

log = structlog.get_logger(__name__)

_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})
_FALSE_WORDS = frozenset({"false", "no", "off", "0"})


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit components."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for component in (self.red, self.green, self.blue):
            if not 0 <= component <= 0xFF:
                raise ValueError(f"colour component out of range: {component}")

    @classmethod
    def from_rgb(cls, rgb: int) -> "Color":
        """Build a colour from a packed ``0xRRGGBB`` integer."""
        if not 0 <= rgb <= 0xFFFFFF:
            raise ValueError(f"RGB value out of range: {rgb:#x}")
        return cls((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF)

    def as_rgb(self) -> int:
        return (self.red << 16) | (self.green << 8) | self.blue


@dataclass(frozen=True)
class FireworkEffect:
    """A fully resolved firework burst."""

    shape: FireworkType
    colors: Tuple[Color, ...] = ()
    fade_colors: Tuple[Color, ...] = ()
    flicker: bool = False
    trail: bool = False


class ParameterBag(Mapping[str, str]):
    """Read-only ``name -> raw value`` mapping for a single effect spec.

    Keys are checked against the parameter registry for ``kind`` when the bag
    is built; keys and values are stored lowercase.  The ``get_*`` helpers
    coerce the raw string and fall back to the given default (with a warning)
    when the stored value cannot be converted.
    """

    def __init__(self, kind: EffectKind, values: Optional[Mapping[str, str]] = None):
        normalised = {}
        for key, value in (values or {}).items():
            key = key.lower()
            if not is_valid(kind, key):
                raise InvalidParameterName(key)
            normalised[key] = value.lower()
        self._kind = kind
        self._values = MappingProxyType(normalised)

    @property
    def kind(self) -> EffectKind:
        return self._kind

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterBag):
            return NotImplemented
        return self._kind is other._kind and dict(self._values) == dict(other._values)

    def __hash__(self) -> int:
        return hash((self._kind, frozenset(self._values.items())))

    def __repr__(self) -> str:
        return f"ParameterBag({self._kind.value}, {dict(self._values)!r})"

    def get_str(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._values.get(key, default)

    def get_int(self, key: str, default: int = 0) -> int:
        """Return ``key`` as an int; decimal values are truncated toward zero."""
        raw = self._values.get(key)
        if raw is None:
            return default
        try:
            return int(raw)
        except ValueError:
            pass
        try:
            return int(float(raw))
        except (ValueError, OverflowError):
            log.warning("Invalid integer parameter - using default",
                        key=key, value=raw, default=default)
            return default

    def get_float(self, key: str, default: float = 0.0) -> float:
        raw = self._values.get(key)
        if raw is None:
            return default
        try:
            return float(raw)
        except ValueError:
            log.warning("Invalid numeric parameter - using default",
                        key=key, value=raw, default=default)
            return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        raw = self._values.get(key)
        if raw is None:
            return default
        if raw in _TRUE_WORDS:
            return True
        if raw in _FALSE_WORDS:
            return False
        log.warning("Invalid boolean parameter - using default",
                    key=key, value=raw, default=default)
        return default


@dataclass(frozen=True)
class EffectDescriptor:
    """A parsed and validated effect specification."""

    kind: EffectKind
    params: ParameterBag
    volume_multiplier: float = 1.0

    def __post_init__(self) -> None:
        if self.params.kind is not self.kind:
            raise ValueError(
                f"parameter bag for '{self.params.kind.value}' "
                f"used with '{self.kind.value}' effect"
            )
