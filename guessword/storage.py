# guessword/storage.py
from __future__ import annotations

from typing import Dict, Optional, Protocol

from sqlalchemy.orm import Session, sessionmaker

from .models import StoredHistory


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...
    def set(self, key: str, value: str) -> None: ...


class MemoryKeyValueStore:
    """Dict-backed store; contents vanish with the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def keys(self):
        return sorted(self._data)


class SqlKeyValueStore:
    """Key/value rows in the guess_history table. Each set() is its own transaction."""

    def __init__(self, session_factory: sessionmaker[Session]):
        self._sessions = session_factory

    def get(self, key: str) -> Optional[str]:
        with self._sessions() as db:
            row = db.get(StoredHistory, key)
            return row.payload if row else None

    def set(self, key: str, value: str) -> None:
        with self._sessions.begin() as db:
            row = db.get(StoredHistory, key)
            if row is None:
                db.add(StoredHistory(storage_key=key, payload=value))
            else:
                row.payload = value
