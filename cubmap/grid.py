"""Reading and validating the map grid of a scene file."""

from __future__ import annotations

from collections.abc import Iterable

from cubmap.elements import WHITESPACE
from cubmap.mapdata import MapData, ParseError, Point

SPAWN_CHARS = frozenset("NSEW")
MAP_CHARS = SPAWN_CHARS | frozenset("01")
WALL = "1"
FLOOR = "0"


def _check_row(row: str) -> int:
    """Validate the characters of one row and return its spawn count."""
    for ch in row:
        if ch not in MAP_CHARS and ch not in WHITESPACE:
            raise ParseError("invalid map char")
    return sum(ch in SPAWN_CHARS for ch in row)


def validate_map(lines: Iterable[str]) -> list[str]:
    """Read grid rows from ``lines`` up to the next blank line.

    Leading blank lines are skipped. Rows are returned without their
    line terminator. Exactly one spawn point must be present.
    """
    rows: list[str] = []
    spawns = 0
    started = False
    for line in lines:
        if line.startswith("\n"):
            if started:
                break
            continue
        started = True
        row = line[:-1] if line.endswith("\n") else line
        spawns += _check_row(row)
        rows.append(row)
    if spawns != 1:
        raise ParseError("not one spawn point")
    return rows


def _cell(rows: list[str], x: int, y: int) -> str:
    if y < 0 or y >= len(rows) or x < 0 or x >= len(rows[y]):
        return ""
    return rows[y][x]


def _find_spawn(rows: list[str]) -> Point:
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch in SPAWN_CHARS:
                return Point(x, y)
    raise ParseError("no spawn point")


def flood_map(mapdata: MapData) -> None:
    """Check that the spawn area is closed by walls and record the spawn.

    Sets the spawn orientation and coordinates on ``mapdata`` and
    replaces the spawn cell in the grid with floor.
    """
    rows = mapdata.grid
    spawn = _find_spawn(rows)
    mapdata.spawn_orientation = rows[spawn.y][spawn.x]
    mapdata.spawn = spawn

    seen = {(spawn.x, spawn.y)}
    stack = [(spawn.x, spawn.y)]
    while stack:
        x, y = stack.pop()
        cell = _cell(rows, x, y)
        if x == 0 or y == 0 or not cell or cell in WHITESPACE:
            raise ParseError("failed floodfill")
        for dx, dy in ((0, -1), (-1, 0), (0, 1), (1, 0)):
            nxt = (x + dx, y + dy)
            if nxt in seen or _cell(rows, *nxt) == WALL:
                continue
            seen.add(nxt)
            stack.append(nxt)

    row = rows[spawn.y]
    rows[spawn.y] = row[: spawn.x] + FLOOR + row[spawn.x + 1:]


def map_size(rows: list[str]) -> tuple[int, int]:
    """Return ``(width, height)``: the longest row and the number of rows."""
    if not rows:
        raise ParseError("failed to get map size")
    return max(len(row) for row in rows), len(rows)