# guessword/persistence.py
from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import ValidationError

from .config import HISTORY_KEY_PREFIX
from .errors import PersistenceCorruptError
from .schema import GuessList, GuessRecord
from .storage import KeyValueStore

logger = logging.getLogger(__name__)


class HistoryRepository:
    """
    Maps a date key to the ordered guess list stored for that day.
    No ranking or dedup happens here; the list is written and read back as-is.
    """

    def __init__(self, store: KeyValueStore, prefix: str = HISTORY_KEY_PREFIX):
        self.store = store
        self.prefix = prefix

    def storage_key(self, date_key: str) -> str:
        return f"{self.prefix}{date_key}"

    def save(self, date_key: str, records: List[GuessRecord]) -> None:
        self.store.set(self.storage_key(date_key), GuessList.dump_json(list(records)).decode("utf-8"))

    def load(self, date_key: str) -> Optional[List[GuessRecord]]:
        key = self.storage_key(date_key)
        raw = self.store.get(key)
        if raw is None:
            return None
        try:
            return self._decode(key, raw)
        except PersistenceCorruptError as e:
            logger.warning("%s; treating as no history", e)
            return None

    def _decode(self, key: str, raw: str) -> List[GuessRecord]:
        try:
            return GuessList.validate_json(raw)
        except ValidationError as e:
            raise PersistenceCorruptError(key, f"{e.error_count()} validation error(s)") from e
