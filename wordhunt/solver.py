from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from wordhunt.board import normalize
from wordhunt.dictionary import Dictionary
from wordhunt.models import Grid, Position, SolveResult
from wordhunt.results import ResultAggregator
from wordhunt.scoring import score

logger = logging.getLogger("wordhunt")

DEFAULT_MIN_LENGTH = 3

# Neighbour enumeration order; it decides which path is found first for a word
NEIGHBOR_OFFSETS = [
    (dr, dc)
    for dr in (-1, 0, 1)
    for dc in (-1, 0, 1)
    if not (dr == 0 and dc == 0)
]


class WordHuntSolver:
    """Depth-first search with prefix pruning over a normalized grid.

    Each cell is the root of an independent search whose visited set is a
    bitmask local to that search, so roots can run on separate threads.
    """

    def __init__(self, grid: Sequence[Sequence[str | None]], dictionary: Dictionary):
        self.grid: Grid = normalize(grid)
        self.dictionary = dictionary
        self.num_rows = len(self.grid)
        self.num_cols = len(self.grid[0])

        # Flattened row-major tiles and precomputed adjacency lists
        self._tokens: list[str] = [tok for row in self.grid for tok in row]
        self._neighbors: list[list[int]] = []
        for idx in range(len(self._tokens)):
            r, c = divmod(idx, self.num_cols)
            adj = []
            for dr, dc in NEIGHBOR_OFFSETS:
                nr, nc = r + dr, c + dc
                if 0 <= nr < self.num_rows and 0 <= nc < self.num_cols:
                    adj.append(nr * self.num_cols + nc)
            self._neighbors.append(adj)

    def _position(self, idx: int) -> Position:
        return Position(*divmod(idx, self.num_cols))

    def search_from(self, start: int, min_length: int = DEFAULT_MIN_LENGTH) -> list[SolveResult]:
        """Every word reachable from one root cell, in discovery order."""
        found: list[SolveResult] = []
        tokens = self._tokens
        neighbors = self._neighbors
        words = self.dictionary
        path: list[int] = []

        def dfs(idx: int, current: str, visited: int):
            token = tokens[idx]
            if not token:
                # blank tile
                return

            candidate = current + token
            is_word = words.contains_word(candidate)
            if not is_word and not words.is_prefix(candidate):
                return

            visited |= 1 << idx
            path.append(idx)
            try:
                if is_word and len(candidate) >= min_length:
                    found.append(SolveResult(
                        word=candidate,
                        path=tuple(self._position(i) for i in path),
                        score=score(candidate),
                    ))

                for nidx in neighbors[idx]:
                    if not (visited & (1 << nidx)):
                        dfs(nidx, candidate, visited)
            finally:
                path.pop()

        dfs(start, "", 0)
        return found

    def solve(self, min_length: int = DEFAULT_MIN_LENGTH, workers: int = 1) -> list[SolveResult]:
        """Find, deduplicate and order every word on the board.

        With ``workers > 1`` root searches run on a thread pool; their results
        are still merged in row-major root order so the output does not
        depend on the worker count.
        """
        roots = range(len(self._tokens))
        aggregator = ResultAggregator()

        if workers > 1 and len(roots) > 1:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                per_root = list(executor.map(lambda s: self.search_from(s, min_length), roots))
        else:
            per_root = [self.search_from(s, min_length) for s in roots]

        for candidates in per_root:
            aggregator.merge(candidates)

        results = aggregator.results()
        logger.debug(
            "Solved %dx%d board: %d candidates, %d distinct words",
            self.num_rows, self.num_cols, sum(len(c) for c in per_root), len(results),
        )
        return results


def solve(
    grid: Sequence[Sequence[str | None]],
    dictionary: Dictionary,
    min_length: int = DEFAULT_MIN_LENGTH,
    workers: int = 1,
) -> list[SolveResult]:
    """Solve a raw grid against a dictionary. Raises InvalidGridError for malformed grids."""
    return WordHuntSolver(grid, dictionary).solve(min_length=min_length, workers=workers)
