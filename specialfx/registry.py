"""Allowed parameter names for each effect kind."""

from __future__ import annotations

from types import MappingProxyType
from typing import FrozenSet, Mapping

from .kinds import EffectKind

PARAMETER_REGISTRY: Mapping[EffectKind, FrozenSet[str]] = MappingProxyType(
    {
        EffectKind.EXPLOSION: frozenset({"power", "fire"}),
        EffectKind.LIGHTNING: frozenset({"power"}),
        EffectKind.EFFECT: frozenset({"name", "data", "radius"}),
        EffectKind.SOUND: frozenset({"name", "volume", "pitch"}),
        EffectKind.FIREWORK: frozenset({"type", "color", "fade", "flicker", "trail"}),
    }
)


def allowed_params(kind: EffectKind) -> FrozenSet[str]:
    """Return the parameter names accepted by ``kind``."""
    return PARAMETER_REGISTRY[kind]


def is_valid(kind: EffectKind, name: str) -> bool:
    return name in PARAMETER_REGISTRY[kind]
