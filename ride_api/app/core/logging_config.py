"""
Logging setup for the Ride API.

Everything logs through module loggers (``logging.getLogger(__name__)``)
and propagates to the root logger configured here.  Request and
service traces are emitted at DEBUG, so run with ``LOG_LEVEL=DEBUG`` to
follow individual calls.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach console (and optionally file) output to the root logger.

    Unknown level names fall back to ``INFO``.  Does nothing when the
    root logger already has handlers, e.g. under pytest or when the
    app factory runs twice.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=_handlers(logfile),
    )
