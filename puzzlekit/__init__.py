"""Solutions to classic array, number and string puzzles."""

__version__ = "0.1.0"

__all__ = [
    "advanced",
    "aggregates",
    "construction",
    "hashing",
    "inplace",
    "numbers",
    "scanning",
    "text",
    "transforms",
]