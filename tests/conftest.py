import pytest

from wordhunt.dictionary import Dictionary

SAMPLE_BOARD = [
    ["c", "a", "t", "s"],
    ["o", "r", "e", "x"],
    ["d", "p", "q", "m"],
    ["e", "n", "t", "i"],
]

SAMPLE_WORDS = ["cat", "cats", "car", "cart", "care", "tax", "ox", "rod", "pen", "ten", "tent", "rope", "core"]


@pytest.fixture
def sample_dictionary() -> Dictionary:
    return Dictionary.from_words(SAMPLE_WORDS)


@pytest.fixture
def dictionary_file(tmp_path):
    path = tmp_path / "dictionary.txt"
    path.write_text("\n".join(SAMPLE_WORDS) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def sample_board() -> list[list[str]]:
    return [row[:] for row in SAMPLE_BOARD]
