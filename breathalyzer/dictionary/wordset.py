import logging
from pathlib import Path
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)


class BreathalyzerError(Exception):
    pass


class InvalidLengthError(BreathalyzerError, ValueError):
    def __init__(self, length: int) -> None:
        super().__init__(f"word length must be positive, got {length}")
        self.length = length


class EmptyDictionaryError(BreathalyzerError, LookupError):
    def __init__(self) -> None:
        super().__init__("dictionary has no words")


_EMPTY: frozenset[str] = frozenset()


class WordSet:
    """Dictionary words grouped by length.

        +---+
        | 2 | -> {AA, AB, ...}
        | 3 | -> {AAH, AAL, ...}
        | 4 | -> {AAHS, AALS, ...}
        +---+

    Lengths without words have no bucket at all. A bucket emptied by
    ``remove`` stays in place.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._buckets: dict[int, set[str]] = {}
        for word in words:
            self.add(word)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "WordSet":
        wordset = cls()
        skipped = 0
        for line in lines:
            word = line.strip()
            if not word:
                skipped += 1
                continue
            wordset.add(word)

        if skipped:
            logger.debug("skipped %s blank dictionary lines", skipped)
        return wordset

    def contains(self, word: str | None) -> bool:
        if not word:
            return False
        return word in self._buckets.get(len(word), _EMPTY)

    def add(self, word: str) -> "WordSet":
        self._bucket_for_update(len(word)).add(word)
        return self

    def remove(self, word: str | None) -> str | None:
        if not word:
            return None
        bucket = self._buckets.get(len(word))
        if bucket is None or word not in bucket:
            return None
        bucket.remove(word)
        return word

    def words_of_length(self, length: int) -> frozenset[str]:
        if length <= 0:
            raise InvalidLengthError(length)
        return frozenset(self._buckets.get(length, _EMPTY))

    def words_of_length_offset(self, length: int, offset: int) -> frozenset[str]:
        """Words exactly ``offset`` characters shorter or longer than ``length``.

        For ``length = 5`` and ``offset = 1``::

            +---------------------------+
            | 2 | 3 | 4 | 5 | 6 | 7 | 8 |
            +---------^-------^---------+

        Non-positive lengths reached by the offset are skipped.
        """
        if offset == 0:
            return self.words_of_length(length)

        result: set[str] = set()
        if length - offset > 0:
            result.update(self._buckets.get(length - offset, _EMPTY))
        if length + offset > 0:
            result.update(self._buckets.get(length + offset, _EMPTY))
        return frozenset(result)

    def min_word_length(self) -> int:
        if not self._buckets:
            raise EmptyDictionaryError()
        return min(self._buckets)

    def max_word_length(self) -> int:
        if not self._buckets:
            raise EmptyDictionaryError()
        return max(self._buckets)

    def lengths(self) -> list[int]:
        return sorted(self._buckets)

    def populated_lengths(self) -> list[int]:
        return sorted(length for length, bucket in self._buckets.items() if bucket)

    def is_empty(self) -> bool:
        return not any(self._buckets.values())

    def _bucket_for_update(self, length: int) -> set[str]:
        if length <= 0:
            raise InvalidLengthError(length)
        bucket = self._buckets.get(length)
        if bucket is None:
            bucket = set()
            self._buckets[length] = bucket
        return bucket

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())

    def __iter__(self) -> Iterator[str]:
        for length in sorted(self._buckets):
            yield from self._buckets[length]

    def __repr__(self) -> str:
        return f"WordSet(words={len(self)}, lengths={self.lengths()})"


def load_wordset(path: str | Path) -> WordSet:
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        wordset = WordSet.from_lines(fh)

    if wordset.is_empty():
        logger.warning("dictionary %s has no words", path)
    else:
        logger.info(
            "loaded %s dictionary words from %s (lengths %s-%s)",
            len(wordset),
            path,
            wordset.min_word_length(),
            wordset.max_word_length(),
        )
    return wordset
