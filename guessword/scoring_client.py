# guessword/scoring_client.py
from __future__ import annotations

import math
from typing import Any, Dict, Optional

import httpx

from .config import SCORING_API_BASE, SCORING_GUESS_PATH, SCORING_TIMEOUT
from .errors import ScoringUnavailableError
from .schema import ScoreResult

HEADERS = {"accept": "*/*", "cache-control": "no-cache", "pragma": "no-cache"}


def _as_similarity(v: Any) -> float:
    # bool is an int subclass; a stray True must not become a perfect score
    if isinstance(v, bool) or v is None:
        return 0.0
    try:
        f = float(v)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if math.isnan(f) or math.isinf(f):
        return 0.0
    return min(1.0, max(0.0, f))


def _as_bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, str):
        return v.strip().lower() in ("true", "1", "yes")
    if isinstance(v, (int, float)):
        return v == 1
    return False


def parse_score(data: Any) -> ScoreResult:
    """Sanitize an untrusted scoring payload. Raises ScoringUnavailableError if it is not an object."""
    if not isinstance(data, dict):
        raise ScoringUnavailableError(f"Unexpected scoring payload: {type(data).__name__}")
    raw = data.get("doubleScore")
    if raw is None:
        raw = data.get("similarity")
    similarity = _as_similarity(raw)
    correct = _as_bool(data.get("correct"))
    if correct:
        similarity = 1.0
    return ScoreResult(similarity=similarity, correct=correct)


class ScoringClient:
    def __init__(
        self,
        base_url: str = SCORING_API_BASE,
        path: str = SCORING_GUESS_PATH,
        timeout: float = SCORING_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.path = path
        self.timeout = timeout
        self._transport = transport

    async def _http_get(self, params: Dict[str, Any]):
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            r = await client.get(f"{self.base_url}{self.path}", headers=HEADERS, params=params)
            r.raise_for_status()
            return r.json()

    async def score(self, word: str, date_key: str) -> ScoreResult:
        try:
            data = await self._http_get({"date": date_key, "word": word})
        except httpx.HTTPStatusError as e:
            raise ScoringUnavailableError(f"Scoring upstream returned {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise ScoringUnavailableError(f"Scoring upstream unreachable: {e}") from e
        except ValueError as e:
            # r.json() on a non-JSON body
            raise ScoringUnavailableError("Scoring upstream returned malformed JSON") from e
        return parse_score(data)
