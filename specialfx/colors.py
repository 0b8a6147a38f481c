"""Decoding of space-separated hex RGB colour lists (``ff0000 00ff00``)."""

from __future__ import annotations

import re
from typing import Tuple

from .errors import InvalidColorToken
from .models import Color

HEX_TOKEN_RE = re.compile(r"[0-9a-fA-F]{1,6}")


def parse_colors(source: str) -> Tuple[Color, ...]:
    """Parse ``source`` into colours, preserving token order.

    Tokens are separated by single spaces, so doubled spaces yield an empty
    (and therefore invalid) token.
    """
    if not source:
        return ()
    colors = []
    for token in source.split(" "):
        if not HEX_TOKEN_RE.fullmatch(token):
            raise InvalidColorToken(token)
        colors.append(Color.from_rgb(int(token, 16)))
    return tuple(colors)
