"""Parsing of texture and colour element lines."""

from __future__ import annotations

import re

from cubmap.mapdata import ParseError

WHITESPACE = " \t\n\v\f\r"

_WS = r"[ \t\n\v\f\r]*"
_NUM = r"([+-]?[0-9]+)"
_COLOR_RE = re.compile(
    _WS + _NUM + _WS + "," + _WS + _NUM + _WS + "," + _WS + _NUM + _WS
)


def _strip_identifier(line: str, identifier: str) -> str:
    if not line.startswith(identifier):
        raise ParseError(f"expected identifier {identifier!r}")
    return line[len(identifier):]


def fetch_texture_file(line: str, identifier: str) -> str:
    """Return the texture path named on an element line such as ``NO path``."""
    rest = _strip_identifier(line, identifier).lstrip(WHITESPACE)
    if not rest:
        raise ParseError(f"missing texture path for {identifier}")
    end = 0
    while end < len(rest) and rest[end] not in WHITESPACE:
        end += 1
    if rest[end:].strip(WHITESPACE):
        raise ParseError(f"trailing data after texture path for {identifier}")
    return rest[:end]


def to_hex_color(r: int, g: int, b: int) -> int:
    """Pack three 0-255 channels into a 0xRRGGBB integer."""
    if any(c < 0 or c > 255 for c in (r, g, b)):
        raise ParseError("colour channel out of range 0-255")
    return (r << 16) | (g << 8) | b


def fetch_color(line: str, identifier: str) -> int:
    """Return the packed colour of an element line such as ``F 220,100,0``."""
    rest = _strip_identifier(line, identifier)
    match = _COLOR_RE.fullmatch(rest)
    if match is None:
        raise ParseError(f"malformed colour for {identifier}")
    r, g, b = (int(group) for group in match.groups())
    return to_hex_color(r, g, b)