# guessword/errors.py
from __future__ import annotations


class GuessWordError(Exception):
    """Base class for every recoverable guess-session error."""


class InvalidInputError(GuessWordError):
    def __init__(self, message: str = "Guess must not be empty"):
        super().__init__(message)


class DuplicateGuessError(GuessWordError):
    """The word is already recorded for the day, or its score is still pending."""

    def __init__(self, word: str, pending: bool = False):
        self.word = word
        self.pending = pending
        if pending:
            msg = f"'{word}' is already being scored"
        else:
            msg = f"'{word}' has already been guessed today"
        super().__init__(msg)


class ScoringUnavailableError(GuessWordError):
    """Scoring upstream failed; nothing was recorded, so the guess can be retried."""


class PersistenceCorruptError(GuessWordError):
    def __init__(self, key: str, reason: str = ""):
        self.key = key
        super().__init__(f"Stored history under {key!r} is unreadable{': ' + reason if reason else ''}")
