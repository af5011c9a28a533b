"""Settings from the environment, with an optional .env file (python-dotenv)."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Repo root: from src/roster/config.py go up three levels.
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT


def load_env_file() -> Path | None:
    """Load .env from repo root or current dir. Returns the file loaded, if any."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            return path
    return None


def load_settings() -> Settings:
    load_env_file()
    level = os.environ.get("ROSTER_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"
    fmt = os.environ.get("ROSTER_LOG_FORMAT", "").strip() or DEFAULT_LOG_FORMAT
    return Settings(log_level=level, log_format=fmt)
