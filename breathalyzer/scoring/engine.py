import logging
import sys
import threading
from concurrent.futures import ThreadPoolExecutor

from breathalyzer.dictionary.wordset import WordSet

logger = logging.getLogger(__name__)

NO_DISTANCE = sys.maxsize


class DistanceEngine:
    """Levenshtein distance with a scratch matrix kept between calls.

    The matrix only grows. Each call writes the active ``(m + 1) x (n + 1)``
    corner before reading it, so cells left over from larger inputs are
    never used. An engine must not be shared between threads.
    """

    def __init__(self) -> None:
        self.rows = 0
        self.cols = 0
        self._matrix: list[list[int]] = []

    def _ensure_capacity(self, rows: int, cols: int) -> list[list[int]]:
        if rows > self.rows or cols > self.cols:
            self.rows = max(rows, self.rows)
            self.cols = max(cols, self.cols)
            self._matrix = [[0] * self.cols for _ in range(self.rows)]
        return self._matrix

    def distance(self, source: str, target: str) -> int:
        if source == target:
            return 0

        rows = len(source) + 1
        cols = len(target) + 1
        dp = self._ensure_capacity(rows, cols)

        # d[i][j] holds the distance between source[:i] and target[:j]
        for i in range(rows):
            dp[i][0] = i
        first = dp[0]
        for j in range(cols):
            first[j] = j

        for i in range(1, rows):
            prev = dp[i - 1]
            current = dp[i]
            char = source[i - 1]
            for j in range(1, cols):
                if char == target[j - 1]:
                    current[j] = prev[j - 1]
                else:
                    current[j] = 1 + min(
                        prev[j],  # deletion
                        current[j - 1],  # insertion
                        prev[j - 1],  # substitution
                    )

        return dp[rows - 1][cols - 1]

    def distance_to_nearest(self, word: str, wordset: WordSet) -> int:
        """Smallest distance between ``word`` and any word in ``wordset``.

        Buckets are visited outwards from ``len(word)``. Edit distance is at
        least the difference in length, so once the best distance is no
        larger than ``offset + 1`` the remaining buckets cannot improve it.
        """
        if wordset.contains(word):
            return 0

        length = len(word)
        populated = wordset.populated_lengths()
        if not populated:
            return length
        if length == 0:
            return populated[0]

        # past this offset both length - offset and length + offset fall
        # outside the populated lengths
        last_offset = max(length - populated[0], populated[-1] - length)

        min_distance = NO_DISTANCE
        compared = 0
        offset = 0
        for offset in range(last_offset + 1):
            for candidate in wordset.words_of_length_offset(length, offset):
                compared += 1
                dist = self.distance(word, candidate)
                if dist < min_distance:
                    min_distance = dist
                    if min_distance <= offset:
                        break

            if min_distance <= offset + 1:
                break

        logger.debug(
            "nearest distance for %r is %s (offset=%s, compared=%s)",
            word,
            min_distance,
            offset,
            compared,
        )
        if min_distance == NO_DISTANCE:
            return length
        return min_distance


class SentenceScorer:
    """Sums nearest-word distances over the whitespace-separated words of a sentence.

    With ``workers > 1`` the words are searched on a thread pool. Every worker
    thread gets its own ``DistanceEngine``; the word set is only read.
    """

    def __init__(self, wordset: WordSet, *, workers: int = 1, engine: DistanceEngine | None = None) -> None:
        self.wordset = wordset
        self.workers = max(1, workers)
        self.engine = engine or DistanceEngine()
        self._local = threading.local()

    def _worker_engine(self) -> DistanceEngine:
        engine = getattr(self._local, "engine", None)
        if engine is None:
            engine = DistanceEngine()
            self._local.engine = engine
        return engine

    def _worker_distance(self, word: str) -> int:
        return self._worker_engine().distance_to_nearest(word, self.wordset)

    def word_distances(self, sentence: str) -> list[tuple[str, int]]:
        words = sentence.split()
        if self.workers == 1 or len(words) < 2:
            return [(word, self.engine.distance_to_nearest(word, self.wordset)) for word in words]

        with ThreadPoolExecutor(max_workers=min(self.workers, len(words))) as executor:
            distances = list(executor.map(self._worker_distance, words))
        return list(zip(words, distances))

    def score(self, sentence: str) -> int:
        return sum(dist for _, dist in self.word_distances(sentence))


def distance(source: str, target: str) -> int:
    return DistanceEngine().distance(source, target)


def distance_to_nearest(word: str, wordset: WordSet, engine: DistanceEngine | None = None) -> int:
    return (engine or DistanceEngine()).distance_to_nearest(word, wordset)


def score_sentence(sentence: str, wordset: WordSet, *, workers: int = 1) -> int:
    return SentenceScorer(wordset, workers=workers).score(sentence)
