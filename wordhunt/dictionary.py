from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from wordhunt.errors import DictionaryUnavailableError

logger = logging.getLogger("wordhunt")

MIN_DICTIONARY_WORD = 3
_WORD_RE = re.compile(r"^[a-z]+$")


def filter_words(candidates: Iterable[str]) -> list[str]:
    """Keep usable words: trimmed, lowercase, a-z only, 3+ letters."""
    words = []
    for candidate in candidates:
        word = candidate.strip().lower()
        if len(word) >= MIN_DICTIONARY_WORD and _WORD_RE.match(word):
            words.append(word)
    return words


def parse_words(text: str) -> list[str]:
    """Split raw word-list text into usable words."""
    return filter_words(text.splitlines())


class Dictionary:
    """Immutable word set plus the set of every proper prefix of those words.

    Entries are filtered on construction, so the index never holds anything
    shorter than three letters. Built once and shared read-only by every solve.
    """

    __slots__ = ("_words", "_prefixes")

    def __init__(self, words: Iterable[str]):
        word_set = frozenset(filter_words(words))
        if not word_set:
            raise DictionaryUnavailableError("Dictionary contains no usable words")

        prefixes = set()
        for word in word_set:
            for i in range(1, len(word)):
                prefixes.add(word[:i])

        self._words = word_set
        self._prefixes = frozenset(prefixes)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Dictionary:
        return cls(words)

    @classmethod
    def from_text(cls, text: str) -> Dictionary:
        words = parse_words(text)
        if not words:
            raise DictionaryUnavailableError("No usable words parsed from dictionary text")
        dictionary = cls(words)
        logger.info("Dictionary built: %d words, %d prefixes", len(dictionary), dictionary.prefix_count)
        return dictionary

    @classmethod
    def from_file(cls, path: str | Path) -> Dictionary:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise DictionaryUnavailableError(f"Could not read dictionary {path}: {e}") from e
        return cls.from_text(text)

    def contains_word(self, token: str) -> bool:
        return token in self._words

    def is_prefix(self, token: str) -> bool:
        """True if some longer dictionary word starts with ``token``."""
        return token in self._prefixes

    @property
    def prefix_count(self) -> int:
        return len(self._prefixes)

    def __contains__(self, token: object) -> bool:
        return token in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self):
        return iter(self._words)
