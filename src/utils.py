"""
utils.py
--------
Shared helpers: defensive nested lookups and logging setup.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from src.config import LOG_FILE

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def safe_get(obj: Any, *keys: str, default: Any = None) -> Any:
    """Walk nested dicts/attributes; return default as soon as a link is missing."""
    cur = obj
    for key in keys:
        if cur is None:
            return default
        if isinstance(cur, dict):
            cur = cur.get(key)
        else:
            cur = getattr(cur, key, None)
    return default if cur is None else cur


def setup_logging(log_file: Optional[str] = LOG_FILE, level: int = logging.INFO) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
