"""Centralized configuration — every tunable in one place.

Environment variables override defaults. Import anywhere:

    from quickgpt.settings import settings

All values are frozen at startup.  Per-client knobs (model, format,
token budget) start from these defaults and are changed on the client
itself with ``set_model`` / ``set_format`` / ``set_max_token``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root (one level above quickgpt/)
_project_root = Path(__file__).resolve().parent.parent
load_dotenv(_project_root / ".env")


# ── Helpers ───────────────────────────────────────────────────────────────

def _env(key: str, default: str = "") -> str:
    return os.getenv(key, default)


def _env_int(key: str, default: int = 0) -> int:
    return int(os.getenv(key, str(default)))


def _env_float(key: str, default: float = 0.0) -> float:
    return float(os.getenv(key, str(default)))


def _env_bool(key: str, default: bool = False) -> bool:
    return os.getenv(key, str(default)).lower() in ("true", "1", "yes")


# ── Settings ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Settings:
    """Application settings.  Immutable after creation."""

    # ── OpenAI credentials ────────────────────────────────────────
    # An explicit api_key passed to QuickGPT() wins over this.
    OPENAI_API_KEY: str = _env("OPENAI_API_KEY")
    # Optional: override API endpoint (Azure OpenAI, vLLM, gateways, etc.)
    OPENAI_BASE_URL: str = _env("OPENAI_BASE_URL")

    # ── Client defaults ───────────────────────────────────────────
    DEFAULT_MODEL: str = _env("QUICKGPT_MODEL", "gpt-4o")
    # False → the system prompt forbids LaTeX, Markdown and HTML.
    DEFAULT_FORMAT: bool = _env_bool("QUICKGPT_FORMAT", False)
    DEFAULT_MAX_TOKENS: int = _env_int("QUICKGPT_MAX_TOKENS", 1000)

    # ── Transport ─────────────────────────────────────────────────
    # Seconds.  0 → leave the SDK's own default in place.
    REQUEST_TIMEOUT: float = _env_float("QUICKGPT_TIMEOUT", 0.0)

    # ── Logging ───────────────────────────────────────────────────
    LOG_LEVEL: str = _env("LOG_LEVEL", "WARNING")


settings = Settings()
