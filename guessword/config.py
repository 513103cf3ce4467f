# guessword/config.py
import os

import pytz

# ───────── Day boundaries ─────────
TZ = pytz.timezone(os.getenv("GUESSWORD_TZ", "Asia/Shanghai"))

# ───────── Storage ─────────
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///guess_history.db")
HISTORY_KEY_PREFIX = os.getenv("HISTORY_KEY_PREFIX", "guessHistory_")

# ───────── Scoring upstream ─────────
SCORING_API_BASE = os.getenv("SCORING_API_BASE", "https://xiaoce.fun/api/v0/quiz/daily")
SCORING_GUESS_PATH = os.getenv("SCORING_GUESS_PATH", "/GuessWord/guess")
SCORING_TIMEOUT = float(os.getenv("SCORING_TIMEOUT", "30"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
