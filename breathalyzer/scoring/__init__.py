from .engine import (
    NO_DISTANCE,
    DistanceEngine,
    SentenceScorer,
    distance,
    distance_to_nearest,
    score_sentence,
)

__all__ = [
    "NO_DISTANCE",
    "DistanceEngine",
    "SentenceScorer",
    "distance",
    "distance_to_nearest",
    "score_sentence",
]
