from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv


def load_env_file(path: Path | None = None) -> bool:
    """Load ``.env`` from the working directory (or ``path``) if present.

    Only the command line calls this; importing slugkit never touches the
    caller's environment.
    """
    env_path = path if path is not None else Path.cwd() / ".env"
    if env_path.exists():
        return load_dotenv(env_path)
    return False


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Settings read from the environment when instantiated."""

    def __init__(self) -> None:
        # Defaults for the slug instance built from this config
        self.DEFAULT_MODE: str = os.getenv("SLUGKIT_MODE", "pretty")
        self.FALLBACK: bool = _env_bool("SLUGKIT_FALLBACK", True)
        self.LOCALE: str | None = os.getenv("SLUGKIT_LOCALE") or None

        # Logging (applied by the CLI; the library never configures logging itself)
        self.LOG_LEVEL: str = os.getenv("SLUGKIT_LOG_LEVEL", "WARNING").upper()
        self.LOG_JSON: bool = _env_bool("SLUGKIT_LOG_JSON", True)
