from .wordset import (
    BreathalyzerError,
    EmptyDictionaryError,
    InvalidLengthError,
    WordSet,
    load_wordset,
)

__all__ = [
    "BreathalyzerError",
    "EmptyDictionaryError",
    "InvalidLengthError",
    "WordSet",
    "load_wordset",
]
