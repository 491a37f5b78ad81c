import logging
import threading
from pathlib import Path

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from breathalyzer.common.config import settings
from breathalyzer.dictionary import WordSet, load_wordset
from breathalyzer.scoring import SentenceScorer

logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))
logger = logging.getLogger(__name__)

app = FastAPI(title="Breathalyzer API")


class WordDistance(BaseModel):
    word: str
    distance: int


class ScoreResponse(BaseModel):
    sentence: str
    score: int
    words: list[WordDistance]


class DictionaryResponse(BaseModel):
    words: int
    min_length: int | None
    max_length: int | None


class ScoringService:
    def __init__(self, *, dictionary_path: Path | None = None, workers: int | None = None) -> None:
        self.dictionary_path = dictionary_path or Path(settings.dictionary_path)
        self.workers = workers or settings.scorer_workers
        self._wordset: WordSet | None = None
        self._lock = threading.Lock()

    def wordset(self) -> WordSet:
        with self._lock:
            if self._wordset is None:
                self._wordset = load_wordset(self.dictionary_path)
            return self._wordset

    def _scorer(self) -> SentenceScorer:
        wordset = self.wordset()
        if wordset.is_empty():
            raise HTTPException(status_code=503, detail="dictionary is empty")
        # scorers are cheap and each owns its own distance matrix
        return SentenceScorer(wordset, workers=self.workers)

    def score(self, sentence: str) -> ScoreResponse:
        normalized = sentence.strip().upper()
        word_distances = self._scorer().word_distances(normalized)
        return ScoreResponse(
            sentence=normalized,
            score=sum(dist for _, dist in word_distances),
            words=[WordDistance(word=word, distance=dist) for word, dist in word_distances],
        )

    def distance(self, word: str) -> WordDistance:
        normalized = word.strip().upper()
        scorer = self._scorer()
        return WordDistance(word=normalized, distance=scorer.engine.distance_to_nearest(normalized, scorer.wordset))

    def describe(self) -> DictionaryResponse:
        wordset = self.wordset()
        populated = wordset.populated_lengths()
        if not populated:
            return DictionaryResponse(words=0, min_length=None, max_length=None)
        return DictionaryResponse(words=len(wordset), min_length=populated[0], max_length=populated[-1])


scoring_service = ScoringService()


@app.get("/score", response_model=ScoreResponse)
def score(sentence: str = Query("")) -> ScoreResponse:
    return scoring_service.score(sentence)


@app.get("/distance", response_model=WordDistance)
def distance(word: str = Query(..., min_length=1)) -> WordDistance:
    return scoring_service.distance(word)


@app.get("/dictionary", response_model=DictionaryResponse)
def dictionary() -> DictionaryResponse:
    return scoring_service.describe()
