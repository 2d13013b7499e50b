"""
Logging setup for the Employee API.

``setup_logging`` attaches console (and optionally file) handlers to
the root logger once per process, and keeps uvicorn's own loggers at
the same level as the service so one ``LOG_LEVEL`` setting governs
both request logs and service logs.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure service and uvicorn logging.

    The uvicorn loggers always take ``level``.  Root handlers are only
    added when the root logger has none yet, e.g. not under pytest or
    on a second ``create_app`` call.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of an extra log file, resolved against the working
        directory.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    for name in UVICORN_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
