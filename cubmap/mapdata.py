"""Data model for a parsed scene description (.cub) file."""

from __future__ import annotations

from dataclasses import dataclass, field

NORTH_ID = "NO"
SOUTH_ID = "SO"
WEST_ID = "WE"
EAST_ID = "EA"
FLOOR_ID = "F"
CEILING_ID = "C"

TEXTURE_IDS = (NORTH_ID, SOUTH_ID, WEST_ID, EAST_ID)
ELEMENT_ORDER = (*TEXTURE_IDS, FLOOR_ID, CEILING_ID)


class ParseError(Exception):
    """Raised when a scene file or one of its parts is invalid."""


@dataclass(frozen=True)
class Point:
    """A cell position in the map grid: column ``x``, row ``y``."""

    x: int
    y: int


@dataclass
class MapData:
    """Everything read from a scene file."""

    textures: dict[str, str] = field(default_factory=dict)
    floor_color: int | None = None
    ceiling_color: int | None = None
    grid: list[str] = field(default_factory=list)
    spawn_orientation: str = ""
    spawn: Point | None = None
    width: int = 0
    height: int = 0