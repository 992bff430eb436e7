"""
Logging configuration for the application.

``setup_logging`` attaches a single console handler (and optionally a
file handler) to the root logger.  Uvicorn is started with
``log_config=None`` so its ``uvicorn.error`` and ``uvicorn.access``
loggers propagate to the root logger and share the same format.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file that should receive a copy of every record.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    for name in _SERVER_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        # Already configured (pytest, or create_app() called twice).
        return
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
