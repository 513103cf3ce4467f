# guessword/dates.py
from __future__ import annotations

import re
from datetime import date, datetime
from typing import Union

from .config import TZ

DateLike = Union[date, datetime, str]

_KEY_RE = re.compile(r"^\d{8}$")
_ISO_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def today() -> date:
    return datetime.now(TZ).date()


def to_date(value: DateLike) -> date:
    """
    Normalize to a calendar day, dropping time of day.
    Accepts a date, a datetime (aware values are converted to TZ first),
    'YYYY-MM-DD' or 'YYYYMMDD'.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(TZ)
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        s = value.strip()
        if _KEY_RE.match(s):
            return datetime.strptime(s, "%Y%m%d").date()
        if _ISO_RE.match(s):
            return datetime.strptime(s, "%Y-%m-%d").date()
    raise ValueError(f"Unrecognized date: {value!r}")


def date_key(value: DateLike) -> str:
    return to_date(value).strftime("%Y%m%d")


def key_to_date(key: str) -> date:
    if not _KEY_RE.match(key or ""):
        raise ValueError(f"Not a date key: {key!r}")
    return datetime.strptime(key, "%Y%m%d").date()
