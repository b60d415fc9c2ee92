from __future__ import annotations

import re
from typing import Sequence

from wordhunt.errors import InvalidGridError
from wordhunt.models import Grid

_ROW_SPLIT = re.compile(r"[\n/;]+")
_TILE_SPLIT = re.compile(r"[\s,]+")


def normalize_tile(raw: str | None) -> str:
    """Canonical search token for a raw tile: lowercase, with a lone "q" read as "qu"."""
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise InvalidGridError(f"Tile must be a string, got {type(raw).__name__}")
    token = raw.strip().lower()
    return "qu" if token == "q" else token


def normalize(raw_grid: Sequence[Sequence[str | None]]) -> Grid:
    """Validate a raw grid and convert each tile to its canonical token.

    Blank tiles are kept as empty tokens; they never extend a prefix so they
    end any path that reaches them.
    """
    if not raw_grid:
        raise InvalidGridError("Grid has no rows")

    rows = [list(row) for row in raw_grid]
    width = len(rows[0])
    if width == 0:
        raise InvalidGridError("Grid has no columns")
    for r, row in enumerate(rows):
        if len(row) != width:
            raise InvalidGridError(
                f"Grid is not rectangular: row {r} has {len(row)} tiles, expected {width}"
            )

    return tuple(tuple(normalize_tile(tile) for tile in row) for row in rows)


def parse_grid(text: str) -> list[list[str]]:
    """Parse a textual board into a raw grid.

    Rows are separated by newlines, "/" or ";". Within a row, tiles are
    separated by whitespace or commas; a row given as one run of letters
    ("cats") is split into single-letter tiles. A "." marks a blank tile.
    """
    grid = []
    for line in _ROW_SPLIT.split(text.strip()):
        line = line.strip()
        if not line:
            continue
        tiles = [t for t in _TILE_SPLIT.split(line) if t]
        if len(tiles) == 1:
            tiles = list(tiles[0])
        grid.append(["" if t == "." else t for t in tiles])
    if not grid:
        raise InvalidGridError("No tiles found in board text")
    return grid


def grid_dimensions(grid: Grid) -> tuple[int, int]:
    return len(grid), len(grid[0]) if grid else 0
