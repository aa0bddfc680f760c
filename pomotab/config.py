"""Application settings and logging setup."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from pomotab.models import AppConfig

_CONFIG_DIR = Path.home() / ".config" / "pomotab"
_CONFIG_FILE = _CONFIG_DIR / "config.json"

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

log = logging.getLogger(__name__)


def load_config() -> AppConfig:
    """Load config from disk, returning defaults if none exists."""
    if _CONFIG_FILE.exists():
        try:
            data = json.loads(_CONFIG_FILE.read_text())
            return AppConfig(**data)
        except (OSError, json.JSONDecodeError, TypeError, ValidationError) as exc:
            log.warning("Ignoring unreadable config %s: %s", _CONFIG_FILE, exc)
    return AppConfig()


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> logging.Logger:
    """Configure the ``pomotab`` logger.

    The terminal belongs to the full-screen UI, so records only ever go to
    ``log_file``. Without one they are dropped.
    """
    logger = logging.getLogger("pomotab")
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handler: logging.Handler
    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    else:
        handler = logging.NullHandler()

    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False
    return logger
