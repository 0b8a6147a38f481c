"""Named special effects for host-defined events.

Effects are described by compact specs such as
``"firework,type=ball,color=ff0000 00ff00,flicker=true"``.  An
:class:`EffectCatalog` maps logical names to specs, parses them on first use
and plays them through an :class:`EffectRenderer` bound to a rendering sink.
"""

from .catalog import EffectCatalog, load_effects_config
from .colors import parse_colors
from .errors import (
    InvalidColorToken,
    InvalidParameterName,
    InvalidSpec,
    InvalidSpecSyntax,
    SinkFailure,
    SpecialFXError,
    UnknownEnumValue,
    UnknownLogicalName,
    UnknownOrInvalidEffect,
)
from .kinds import EffectKind, FireworkType
from .models import Color, EffectDescriptor, FireworkEffect, ParameterBag
from .parser import parse
from .registry import PARAMETER_REGISTRY, allowed_params, is_valid
from .renderer import EffectRenderer, EffectSink
from .sinks import LoggingSink, RecordingSink, SinkCall
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary

__all__ = [
    "EffectCatalog",
    "load_effects_config",
    "parse_colors",
    "InvalidColorToken",
    "InvalidParameterName",
    "InvalidSpec",
    "InvalidSpecSyntax",
    "SinkFailure",
    "SpecialFXError",
    "UnknownEnumValue",
    "UnknownLogicalName",
    "UnknownOrInvalidEffect",
    "EffectKind",
    "FireworkType",
    "Color",
    "EffectDescriptor",
    "FireworkEffect",
    "ParameterBag",
    "parse",
    "PARAMETER_REGISTRY",
    "allowed_params",
    "is_valid",
    "EffectRenderer",
    "EffectSink",
    "LoggingSink",
    "RecordingSink",
    "SinkCall",
    "DEFAULT_VOCABULARY",
    "Vocabulary",
]
