# guessword/session_store.py
from __future__ import annotations

import logging
import time
from typing import Awaitable, Callable, Optional, Protocol, Set, Tuple

from .dates import DateLike, date_key, today
from .errors import DuplicateGuessError, InvalidInputError, ScoringUnavailableError
from .persistence import HistoryRepository
from .schema import DaySession, GuessRecord, ScoreResult, rank

logger = logging.getLogger(__name__)


class Scorer(Protocol):
    def score(self, word: str, date_key: str) -> Awaitable[ScoreResult]: ...


def _epoch_ms() -> int:
    return int(time.time() * 1000)


class SessionStore:
    """
    Holds the guess list for the selected day.

    Records are only ever appended and the list is re-ranked after every
    append. A word is scored at most once per day: recorded words and words
    whose score is still in flight are both rejected as duplicates.
    """

    def __init__(
        self,
        repository: HistoryRepository,
        scorer: Scorer,
        clock: Callable[[], int] = _epoch_ms,
    ):
        self.repository = repository
        self.scorer = scorer
        self._clock = clock
        self._session: Optional[DaySession] = None
        self._pending: Set[Tuple[str, str]] = set()

    # ───────── reads ─────────
    def _load(self, key: str) -> DaySession:
        records = self.repository.load(key)
        return DaySession(date_key=key, records=rank(records or []))

    def _active(self) -> DaySession:
        if self._session is None:
            self.select_date(today())
        return self._session

    def get_session(self) -> DaySession:
        """
        Copy of the active session. Once a day is selected this never touches
        storage; a store that has never had a day selected starts on today.
        """
        return self._active().model_copy(deep=True)

    # ───────── transitions ─────────
    def select_date(self, day: DateLike) -> DaySession:
        """
        Make `day` the active session, restored from storage or empty.
        Dates and datetimes always succeed; only a malformed string
        ('YYYY-MM-DD' or 'YYYYMMDD' expected) raises ValueError.
        """
        key = date_key(day)
        self._session = self._load(key)
        logger.info("Selected %s (%d guesses)", key, self._session.attempt_count)
        return self.get_session()

    async def submit_guess(self, word: str) -> GuessRecord:
        if word is None or not word.strip():
            raise InvalidInputError()

        session = self._active()
        key = session.date_key
        if session.has_word(word):
            logger.warning("Duplicate guess %r for %s", word, key)
            raise DuplicateGuessError(word)
        if (key, word) in self._pending:
            logger.warning("Guess %r for %s is already pending", word, key)
            raise DuplicateGuessError(word, pending=True)

        self._pending.add((key, word))
        try:
            result = await self.scorer.score(word, key)
        except ScoringUnavailableError:
            logger.error("Error scoring %r for %s", word, key, exc_info=True)
            raise
        finally:
            self._pending.discard((key, word))

        return self._fold(key, word, result)

    def _fold(self, key: str, word: str, result: ScoreResult) -> GuessRecord:
        # The active day may have changed while the score was pending
        active = self._session is not None and self._session.date_key == key
        session = self._session if active else self._load(key)

        record = GuessRecord(
            word=word,
            similarity=result.similarity,
            timestamp=max(self._clock(), session.last_timestamp() + 1),
        )
        updated = session.with_guess(record)
        self.repository.save(key, updated.records)
        if active:
            self._session = updated

        logger.info(
            "Guess %r for %s scored %.4f (%d attempts%s)",
            word, key, record.similarity, updated.attempt_count, ", solved" if updated.solved else "",
        )
        return record
