# cubmap

Reads and validates `.cub` scene files for a grid-based raycaster.

## File format

A `.cub` file starts with six element lines in this exact order. Blank lines
may appear between them:

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 220,100,0
C 225,30,0
```

- A texture line holds its identifier, whitespace, and one path with no
  whitespace in it. Nothing else may follow the path.
- A colour line holds its identifier and three comma-separated integers, each
  in the range 0-255. Whitespace is allowed around the numbers.

The map follows, after any number of blank lines, and ends at the next blank
line or at the end of the file. It may use only `0` (floor), `1` (wall),
whitespace, and exactly one spawn marker, which is one of `N`, `S`, `E` or `W`.

The map must be closed: every cell reachable from the spawn point without
crossing a wall must be inside the map, must not be whitespace, and must not
lie in the first row or the first column.

## Install

```
pip install .
```

## Command line

```
cubmap maps/level.cub
```

On success the command prints a summary: the four texture paths, the floor
and ceiling colours as `#RRGGBB`, the spawn orientation and position, the map
size, and the map rows. If the file is rejected, it prints `Error` and the
reason to standard error and exits with status 1.

## Library use

```python
from cubmap.parser import parse
from cubmap.mapdata import ParseError

try:
    scene = parse("maps/level.cub")
except ParseError as err:
    print("bad map:", err)
else:
    print(scene.textures["NO"])       # texture paths keyed by NO, SO, WE, EA
    print(hex(scene.floor_color))     # 0xRRGGBB
    print(hex(scene.ceiling_color))
    print(scene.spawn_orientation)    # "N", "S", "E" or "W"
    print(scene.spawn.x, scene.spawn.y)
    print(scene.width, scene.height)  # longest row, number of rows
    print(scene.grid)                 # rows without line terminators
```

`parse` returns a `MapData` (from `cubmap.mapdata`). In its `grid`, the spawn
cell has been replaced by `0`. Every problem with the file, including a wrong
extension or a file that cannot be opened, raises `ParseError`.

The functions that handle single elements can also be called on their own;
they raise `ParseError` on bad input:

```python
from cubmap.elements import fetch_color, fetch_texture_file, to_hex_color

fetch_texture_file("NO ./north.png\n", "NO")   # "./north.png"
fetch_color("F 220,100,0\n", "F")              # 0xDC6400
to_hex_color(255, 255, 255)                    # 0xFFFFFF
```

`cubmap.parser.validate_format(lines, mapdata)` reads the six element lines
from an iterable of lines into a `MapData`.

`cubmap.grid` has the map checks:

- `validate_map(lines)` returns the map rows and checks their characters and
  the single spawn point.
- `flood_map(mapdata)` checks that the map is closed and records the spawn
  point on `mapdata`.
- `map_size(rows)` returns `(width, height)`.

## What it does not do

This package only reads and checks scene files. It does not render a scene,
open a window, or handle player input, and it does not check that the texture
paths point to existing or valid image files.