"""
Process-wide logging setup.

Modules only call `logging.getLogger(__name__)`; `configure_logging()` runs
once from `main.py`.
"""

from __future__ import annotations

import logging
import os
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False


def configure_logging() -> None:
    global _initialized
    if _initialized:
        return
    level = os.environ.get("LOG_LEVEL", "").strip().upper() or "INFO"
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.INFO))
    root.addHandler(handler)
    _initialized = True
