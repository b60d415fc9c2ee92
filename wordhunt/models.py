from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class Position(NamedTuple):
    row: int
    col: int


Grid = tuple[tuple[str, ...], ...]
Path = tuple[Position, ...]


@dataclass(frozen=True)
class SolveResult:
    word: str
    path: Path
    score: int

    def to_dict(self) -> dict:
        from wordhunt.paths import encode_path

        coords, arrows = encode_path(self.path)
        return {
            "word": self.word,
            "score": self.score,
            "path": [[p.row, p.col] for p in self.path],
            "coords": coords,
            "arrows": arrows,
        }
