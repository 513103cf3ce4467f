# guessword/main.py
from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware

from .config import LOG_LEVEL
from .dates import date_key, key_to_date, to_date, today
from .db import SessionLocal, init_db
from .errors import DuplicateGuessError, InvalidInputError, ScoringUnavailableError
from .persistence import HistoryRepository
from .schema import (
    DateIn, DaySession, GuessIn, GuessOut, GuessRecord, HistorySummary,
    RecordView, SessionView, rank, similarity_tier,
)
from .scoring_client import ScoringClient
from .session_store import SessionStore
from .storage import SqlKeyValueStore

# ───────── App ─────────
app = FastAPI(title="GuessWord API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],      # single local client
    allow_methods=["GET","POST","OPTIONS"],
    allow_headers=["*"],
)

# ───────── Dependencies ─────────
@lru_cache(maxsize=1)
def get_repository() -> HistoryRepository:
    return HistoryRepository(SqlKeyValueStore(SessionLocal))

@lru_cache(maxsize=1)
def get_store() -> SessionStore:
    store = SessionStore(get_repository(), ScoringClient())
    store.select_date(today())
    return store

# ───────── Views ─────────
def record_view(r: GuessRecord) -> RecordView:
    return RecordView(word=r.word, similarity=r.similarity, timestamp=r.timestamp, tier=similarity_tier(r.similarity))

def session_view(s: DaySession) -> SessionView:
    d = key_to_date(s.date_key)
    return SessionView(
        date=d.isoformat(),
        date_key=s.date_key,
        is_today=(d == today()),
        attempt_count=s.attempt_count,
        solved=s.solved,
        records=[record_view(r) for r in s.records],
    )

def _parse_day(value: str):
    try:
        return to_date(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid date: {value!r}; expected YYYY-MM-DD")

# ───────── Lifecycle ─────────
@app.on_event("startup")
def on_startup():
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    init_db()

@app.get("/healthz")
async def healthz():
    return {"ok": True}

# ───────── Active session ─────────
@app.get("/session", response_model=SessionView)
async def get_session(store: SessionStore = Depends(get_store)):
    return session_view(store.get_session())

@app.post("/session/date", response_model=SessionView)
async def select_date(body: DateIn, store: SessionStore = Depends(get_store)):
    day = _parse_day(body.date)
    if day > today():
        raise HTTPException(status_code=400, detail="Cannot select a future date")
    return session_view(store.select_date(day))

@app.post("/guess", response_model=GuessOut)
async def guess(body: GuessIn, store: SessionStore = Depends(get_store)):
    try:
        record = await store.submit_guess(body.word)
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except DuplicateGuessError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ScoringUnavailableError:
        raise HTTPException(status_code=503, detail="Scoring failed, please try again later")
    return GuessOut(record=record_view(record), session=session_view(store.get_session()))

# ───────── Stored history (read-only; active session untouched) ─────────
@app.get("/history/{day}", response_model=HistorySummary)
async def history(day: str, repo: HistoryRepository = Depends(get_repository)):
    d = _parse_day(day)
    key = date_key(d)
    s = DaySession(date_key=key, records=rank(repo.load(key) or []))
    return HistorySummary(
        date=d.isoformat(),
        date_key=key,
        attempt_count=s.attempt_count,
        solved=s.solved,
        best_similarity=s.records[0].similarity if s.records else None,
        records=[record_view(r) for r in s.records],
    )

# For local running: uvicorn guessword.main:app --reload
