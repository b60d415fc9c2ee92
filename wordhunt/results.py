from __future__ import annotations

from typing import Iterable

from wordhunt.models import SolveResult


def result_sort_key(result: SolveResult) -> tuple[int, int, str]:
    # Highest score first, then longest word, then alphabetical
    return (-result.score, -len(result.word), result.word)


class ResultAggregator:
    """Keeps one SolveResult per word.

    A later result replaces the stored one only when it scores strictly
    higher, so the first-discovered path wins ties.
    """

    def __init__(self):
        self._by_word: dict[str, SolveResult] = {}

    def add(self, result: SolveResult) -> bool:
        existing = self._by_word.get(result.word)
        if existing is None or result.score > existing.score:
            self._by_word[result.word] = result
            return True
        return False

    def merge(self, results: Iterable[SolveResult]):
        for result in results:
            self.add(result)

    def results(self) -> list[SolveResult]:
        return sorted(self._by_word.values(), key=result_sort_key)

    def __len__(self) -> int:
        return len(self._by_word)

    def __contains__(self, word: object) -> bool:
        return word in self._by_word
