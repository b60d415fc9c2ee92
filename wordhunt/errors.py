class WordHuntError(Exception):
    """Base class for solver failures."""


class InvalidGridError(WordHuntError, ValueError):
    """Raised for an empty or non-rectangular grid. The search is not attempted."""


class DictionaryUnavailableError(WordHuntError):
    """Raised when no usable words could be obtained for the dictionary."""
