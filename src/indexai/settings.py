from __future__ import annotations

import os


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
GEMINI_BASE_URL = os.getenv(
    "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
)

SEARCH_URL = os.getenv("SEARCH_URL", "https://www.google.com/search")
SEARCH_USER_AGENT = os.getenv(
    "SEARCH_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
)
SEARCH_TITLE_SUFFIX = os.getenv("SEARCH_TITLE_SUFFIX", " - Google Search")
SEARCH_DELAY_SECONDS = min(max(_float_env("SEARCH_DELAY_SECONDS", 1.2), 1.2), 1.5)

HTTP_TIMEOUT_SECONDS = _float_env("HTTP_TIMEOUT_SECONDS", 30.0)
AI_ITEM_LIMIT = _int_env("AI_ITEM_LIMIT", 30)

CONTEXT_KEYWORDS_PATH = os.getenv("CONTEXT_KEYWORDS_PATH", "")
EXCLUDED_NAMES = tuple(
    name.strip() for name in os.getenv("EXCLUDED_NAMES", "").split(",") if name.strip()
)

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
