"""Logging setup for scrabcore.

- Rich console handler plus a rotating file handler.
- Installed once; repeated calls leave existing handlers alone.
- `TRACE_ID_VAR` carries a per-move trace id into every record.
"""
from __future__ import annotations

import logging
import os
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.logging import RichHandler

TRACE_ID_VAR: ContextVar[str] = ContextVar("trace_id", default="-")


class _TraceIdFilter(logging.Filter):
    """Copies the current `TRACE_ID_VAR` value onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = TRACE_ID_VAR.get()
        return True


def default_log_path() -> str:
    """`SCRABCORE_LOG_PATH` if set, else `scrabcore.log` in the repository root."""

    env = os.getenv("SCRABCORE_LOG_PATH")
    if env:
        return env
    root_dir = Path(__file__).resolve().parents[1]
    return str(root_dir / "scrabcore.log")


def configure_logging(*, log_path: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """Initialise logging once and return the project logger."""

    root = logging.getLogger()
    if root.handlers:
        return logging.getLogger("scrabcore")

    root.setLevel(level)
    trace_filter = _TraceIdFilter()

    console = RichHandler(rich_tracebacks=True)
    console.setLevel(level)
    console.addFilter(trace_filter)
    console.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(console)

    path = log_path or default_log_path()
    try:
        fh = RotatingFileHandler(path, maxBytes=1_000_000, backupCount=5, encoding="utf-8")
    except OSError as exc:
        # Keep the console handler when the log file cannot be opened.
        logging.getLogger("scrabcore").warning("File logging disabled (%s): %s", path, exc)
    else:
        fh.setLevel(logging.DEBUG)
        fh.addFilter(trace_filter)
        fh.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s %(name)s [trace=%(trace_id)s] %(message)s"
            )
        )
        root.addHandler(fh)

    return logging.getLogger("scrabcore")
