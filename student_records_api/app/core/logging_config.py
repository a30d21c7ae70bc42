"""
Logging setup for the Student Records API.

Records are logged through module loggers under ``student_records_api``;
``setup_logging`` attaches the handlers to the root logger so uvicorn's
own loggers share the same output.  A log file, when configured, is
created together with any missing parent directories.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> bool:
    """Configure the root logger unless something already has.

    ``level`` is a level name in any case; unknown names mean ``INFO``.
    ``logfile`` adds a file handler next to the console one.

    Returns True if handlers were attached, False if the root logger
    already had some (pytest, a second ``create_app`` call) and was
    left alone.
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return True
