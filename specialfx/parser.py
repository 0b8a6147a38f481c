from __future__ import annotations

from typing import Dict, List, Optional

import structlog

from .errors import InvalidParameterName, UnknownLogicalName
from .kinds import EffectKind
from .models import EffectDescriptor, ParameterBag
from .registry import is_valid

log = structlog.get_logger(__name__)


def split_fields(spec: str) -> List[str]:
    """Lowercase ``spec`` and split it into its comma-delimited fields.

    Trailing empty fields (``"lightning,"``) are discarded; empty fields in
    the middle are kept and fail validation.
    """
    fields = spec.lower().split(",")
    while len(fields) > 1 and not fields[-1]:
        fields.pop()
    return fields


def parse(spec: Optional[str], volume_multiplier: float = 1.0) -> EffectDescriptor:
    """Parse an effect specification into an :class:`EffectDescriptor`.

    The first field names the effect kind; every other field is a
    ``key=value`` parameter.  Keys must be allowed for the kind.  A key given
    without a value is dropped with a warning.

    Parameters
    ----------
    spec:
        Specification text such as ``"sound,name=click,volume=0.5"``.  ``None``
        or an empty string means no specification was configured.
    volume_multiplier:
        Scale applied to sound volume when the descriptor is rendered.

    Raises
    ------
    UnknownLogicalName
        ``spec`` is ``None`` or empty.
    InvalidSpecSyntax
        The kind token is not recognised.
    InvalidParameterName
        A key is not valid for the kind.
    """

    if not spec:
        raise UnknownLogicalName("no spec given (unknown effect name?)")

    fields = split_fields(spec)
    kind = EffectKind.from_token(fields[0])

    values: Dict[str, str] = {}
    for field in fields[1:]:
        key, sep, value = field.partition("=")
        if not is_valid(kind, key):
            raise InvalidParameterName(key)
        if not sep:
            log.warning("Missing value for parameter - ignored",
                        parameter=field, kind=kind.value)
            continue
        values[key] = value

    return EffectDescriptor(
        kind=kind,
        params=ParameterBag(kind, values),
        volume_multiplier=volume_multiplier,
    )
