# guessword/schema.py
from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field, TypeAdapter, computed_field

Tier = Literal["exact", "hot", "warm", "cold"]


class GuessRecord(BaseModel):
    word: str = Field(min_length=1)
    similarity: float = Field(ge=0.0, le=1.0)
    timestamp: int                      # epoch ms, unique within a day


class ScoreResult(BaseModel):
    similarity: float = 0.0
    correct: bool = False


def rank(records: List[GuessRecord]) -> List[GuessRecord]:
    # sorted() stays stable with reverse=True, so ties keep insertion order
    return sorted(records, key=lambda r: r.similarity, reverse=True)


class DaySession(BaseModel):
    date_key: str
    records: List[GuessRecord] = []

    @computed_field
    @property
    def solved(self) -> bool:
        return any(r.similarity == 1.0 for r in self.records)

    @computed_field
    @property
    def attempt_count(self) -> int:
        return len(self.records)

    def has_word(self, word: str) -> bool:
        return any(r.word == word for r in self.records)

    def last_timestamp(self) -> int:
        return max((r.timestamp for r in self.records), default=0)

    def with_guess(self, record: GuessRecord) -> "DaySession":
        """Return a new session with `record` appended and the list re-ranked."""
        return DaySession(date_key=self.date_key, records=rank([*self.records, record]))


GuessList = TypeAdapter(List[GuessRecord])


def similarity_tier(score: float) -> Tier:
    if score == 1.0:
        return "exact"
    if score >= 0.7:
        return "hot"
    if score >= 0.4:
        return "warm"
    return "cold"


# ───────── HTTP payloads ─────────
class GuessIn(BaseModel):
    word: str


class DateIn(BaseModel):
    date: str                            # YYYY-MM-DD


class RecordView(BaseModel):
    word: str
    similarity: float
    timestamp: int
    tier: Tier


class SessionView(BaseModel):
    date: str
    date_key: str
    is_today: bool
    attempt_count: int
    solved: bool
    records: List[RecordView]


class GuessOut(BaseModel):
    record: RecordView
    session: SessionView


class HistorySummary(BaseModel):
    date: str
    date_key: str
    attempt_count: int
    solved: bool
    best_similarity: float | None = None
    records: List[RecordView]
