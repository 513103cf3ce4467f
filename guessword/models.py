# guessword/models.py
from __future__ import annotations
from datetime import datetime, timezone

from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Text, DateTime
from .db import Base

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

# One row per day: serialized, ranked guess list under "<prefix><YYYYMMDD>"
class StoredHistory(Base):
    __tablename__ = "guess_history"
    storage_key: Mapped[str] = mapped_column(String(128), primary_key=True)
    payload: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, onupdate=utcnow)
