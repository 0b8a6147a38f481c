"""Closed enumerations used by effect specifications."""

from __future__ import annotations

from enum import Enum

from .errors import InvalidSpecSyntax, UnknownEnumValue


class EffectKind(Enum):
    """The five kinds of effect a specification can describe.

    Values are the lowercase tokens used as the first field of a spec.
    """

    EXPLOSION = "explosion"
    LIGHTNING = "lightning"
    EFFECT = "effect"
    SOUND = "sound"
    FIREWORK = "firework"

    @classmethod
    def from_token(cls, token: str) -> "EffectKind":
        """Return the kind named by ``token`` (case-insensitive)."""
        try:
            return cls(token.lower())
        except ValueError:
            raise InvalidSpecSyntax(f"unknown effect type: '{token}'") from None


class FireworkType(Enum):
    """Burst shapes a firework can take."""

    BALL = "ball"
    BALL_LARGE = "ball_large"
    STAR = "star"
    BURST = "burst"
    CREEPER = "creeper"

    @classmethod
    def from_name(cls, name: str) -> "FireworkType":
        try:
            return cls(name.lower())
        except ValueError:
            raise UnknownEnumValue("firework type", name) from None
