"""Configuration loading from environment variables and defaults."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)


def _optional_int(name: str) -> Optional[int]:
    value = os.getenv(name, "").strip()
    return int(value) if value else None


def _log_level(name: str, default: str = "WARNING") -> str:
    value = os.getenv(name, "").strip().upper()
    if value not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
        return default
    return value


# Equity simulation
DEFAULT_EQUITY_ITERATIONS = int(os.getenv("POKER_EQUITY_ITERATIONS", "10000"))
DEFAULT_EQUITY_WORKERS = int(os.getenv("POKER_EQUITY_WORKERS", "1"))
# Unset means a fresh, unseeded generator per call
EQUITY_SEED = _optional_int("POKER_EQUITY_SEED")

# Logging
# Unknown names fall back to WARNING
LOG_LEVEL = _log_level("POKER_LOG_LEVEL")
