# Points by word length; 8 letters and longer score the top value.
SCORE_TABLE = {
    3: 100,
    4: 400,
    5: 800,
    6: 1400,
    7: 1800,
}
MAX_SCORE = 2200


def score(word: str) -> int:
    """Point value of a word, from its character length alone."""
    n = len(word)
    if n <= 2:
        return 0
    return SCORE_TABLE.get(n, MAX_SCORE)
