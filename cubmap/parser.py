"""Reading a complete scene description (.cub) file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from os import PathLike

from cubmap.elements import fetch_color, fetch_texture_file
from cubmap.grid import flood_map, map_size, validate_map
from cubmap.mapdata import (
    CEILING_ID,
    ELEMENT_ORDER,
    FLOOR_ID,
    TEXTURE_IDS,
    MapData,
    ParseError,
)

EXTENSION = ".cub"


def _next_element_line(lines) -> str:
    for line in lines:
        if not line.startswith("\n"):
            return line
    raise ParseError("unexpected end of file")


def validate_format(lines: Iterable[str], mapdata: MapData) -> None:
    """Read the six elements (NO, SO, WE, EA, F, C) in order into ``mapdata``.

    Blank lines between them are skipped. Consumes lines from ``lines``
    only up to the last element.
    """
    lines = iter(lines)
    for ident in ELEMENT_ORDER:
        line = _next_element_line(lines)
        if not line.startswith(ident):
            raise ParseError(f"wrong format: expected {ident}")
        if ident in TEXTURE_IDS:
            mapdata.textures[ident] = fetch_texture_file(line, ident)
        elif ident == FLOOR_ID:
            mapdata.floor_color = fetch_color(line, ident)
        elif ident == CEILING_ID:
            mapdata.ceiling_color = fetch_color(line, ident)


def parse(path: str | PathLike[str]) -> MapData:
    """Parse and validate the scene file at ``path``."""
    name = str(path)
    if not name.endswith(EXTENSION):
        raise ParseError("wrong file extension")
    try:
        handle = open(name, encoding="utf-8")
    except OSError as exc:
        raise ParseError(f"cannot open {name}: {exc.strerror}") from exc
    mapdata = MapData()
    with handle:
        lines = iter(handle)
        validate_format(lines, mapdata)
        mapdata.grid = validate_map(lines)
    flood_map(mapdata)
    mapdata.width, mapdata.height = map_size(mapdata.grid)
    return mapdata


def _summary(md: MapData) -> str:
    parts = [f"{ident} {md.textures[ident]}" for ident in TEXTURE_IDS]
    parts.append(f"F #{md.floor_color:06X}")
    parts.append(f"C #{md.ceiling_color:06X}")
    parts.append(f"spawn {md.spawn_orientation} at ({md.spawn.x}, {md.spawn.y})")
    parts.append(f"size {md.width}x{md.height}")
    parts.extend(md.grid)
    return "\n".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Parse a scene file given on the command line and print a summary."""
    ap = argparse.ArgumentParser(prog="cubmap", description="Validate a .cub scene file.")
    ap.add_argument("file", help="path to the .cub file")
    args = ap.parse_args(argv)
    try:
        mapdata = parse(args.file)
    except ParseError as exc:
        print(f"Error\n{exc}", file=sys.stderr)
        return 1
    print(_summary(mapdata))
    return 0


if __name__ == "__main__":
    sys.exit(main())