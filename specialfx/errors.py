"""Exception types raised by the special effects subsystem.

Everything that is wrong with an effect *specification* derives from
:class:`InvalidSpec`, which is also a ``ValueError`` so callers that only care
about "bad input" can catch that.  :class:`UnknownOrInvalidEffect` is what the
catalog raises; it carries the logical effect name alongside the underlying
:class:`InvalidSpec`.
"""

from __future__ import annotations


class SpecialFXError(Exception):
    """Base class for all special effects errors."""


class InvalidSpec(SpecialFXError, ValueError):
    """An effect specification could not be parsed or validated."""


class UnknownLogicalName(InvalidSpec):
    """No specification exists for the requested effect name."""


class InvalidSpecSyntax(InvalidSpec):
    """Unrecognised effect kind, or a required parameter is missing."""


class InvalidParameterName(InvalidSpec):
    """A parameter key is not allowed for the effect kind."""

    def __init__(self, key: str) -> None:
        super().__init__(f"invalid parameter: {key}")
        self.key = key


class InvalidColorToken(InvalidSpec):
    """A colour list contains a token that is not hexadecimal RGB."""

    def __init__(self, token: str) -> None:
        super().__init__(f"invalid colour value: '{token}'")
        self.token = token


class UnknownEnumValue(InvalidSpec):
    """A name is not part of the renderer's closed vocabulary."""

    def __init__(self, vocabulary: str, value: str) -> None:
        super().__init__(f"unknown {vocabulary}: '{value}'")
        self.vocabulary = vocabulary
        self.value = value


class UnknownOrInvalidEffect(SpecialFXError, ValueError):
    """Wraps an :class:`InvalidSpec` with the logical effect name."""

    def __init__(self, name: str, cause: InvalidSpec) -> None:
        super().__init__(f"for effect name '{name}': {cause}")
        self.name = name
        self.cause = cause


class SinkFailure(SpecialFXError, RuntimeError):
    """Raised by a rendering sink when the environment refuses an effect."""
