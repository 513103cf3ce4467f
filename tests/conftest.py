import itertools

import pytest

from guessword.errors import ScoringUnavailableError
from guessword.persistence import HistoryRepository
from guessword.schema import ScoreResult
from guessword.session_store import SessionStore
from guessword.storage import MemoryKeyValueStore


class FakeScorer:
    """Scores from a fixed table; words listed in `failing` raise like a dead upstream."""

    def __init__(self, scores=None, failing=()):
        self.scores = dict(scores or {})
        self.failing = set(failing)
        self.calls = []

    async def score(self, word, date_key):
        self.calls.append((word, date_key))
        if word in self.failing:
            raise ScoringUnavailableError("upstream down")
        sim = self.scores.get(word, 0.0)
        return ScoreResult(similarity=sim, correct=sim == 1.0)


@pytest.fixture
def kv():
    return MemoryKeyValueStore()


@pytest.fixture
def repo(kv):
    return HistoryRepository(kv)


@pytest.fixture
def scorer():
    return FakeScorer({"apple": 0.3, "bread": 1.0, "stone": 0.05, "toast": 0.3, "crumb": 0.72})


@pytest.fixture
def store(repo, scorer):
    ticks = itertools.count(1_700_000_000_000, 1000)
    return SessionStore(repo, scorer, clock=lambda: next(ticks))
