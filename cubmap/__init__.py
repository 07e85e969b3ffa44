"""Parsing and validation of .cub raycaster scene files."""

__version__ = "0.1.0"
__all__ = ["elements", "grid", "mapdata", "parser"]