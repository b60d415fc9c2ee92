from __future__ import annotations

from typing import Sequence

ARROWS = {
    (0, 1): "→",
    (0, -1): "←",
    (1, 0): "↓",
    (-1, 0): "↑",
    (1, 1): "↘",
    (1, -1): "↙",
    (-1, 1): "↗",
    (-1, -1): "↖",
}
UNKNOWN_ARROW = "·"


def column_letters(col: int) -> str:
    """Spreadsheet column name: 0 -> "A", 25 -> "Z", 26 -> "AA"."""
    letters = ""
    n = col + 1
    while n > 0:
        n, rem = divmod(n - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return letters


def coordinate_label(row: int, col: int) -> str:
    """Spreadsheet-style label: column letters from "A", 1-based row ((0, 0) -> "A1")."""
    return f"{column_letters(col)}{row + 1}"


def encode_path(path: Sequence[tuple[int, int]]) -> tuple[list[str], list[str]]:
    """Return (coordinate labels, arrows) for a path.

    There is one label per step and one arrow between each pair of steps.
    """
    coords = [coordinate_label(r, c) for r, c in path]
    arrows = []
    for (r0, c0), (r1, c1) in zip(path, path[1:]):
        arrows.append(ARROWS.get((r1 - r0, c1 - c0), UNKNOWN_ARROW))
    return coords, arrows


def format_path(path: Sequence[tuple[int, int]]) -> str:
    """Display string such as "A1 → B1 ↘ C2"."""
    coords, arrows = encode_path(path)
    if not coords:
        return ""
    parts = [coords[0]]
    for arrow, coord in zip(arrows, coords[1:]):
        parts.append(f"{arrow} {coord}")
    return " ".join(parts)
