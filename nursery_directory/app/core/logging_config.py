"""
Logging configuration for the API process.

The service logs through the root logger only.  ``setup_logging``
installs one console handler (plus a file handler when ``LOG_FILE`` is
set) and routes uvicorn's own loggers into it, so server start-up,
request access lines and application messages such as
``Blocked by CORS`` or ``Invalid endDate`` share one format and one
destination.  ``run.py`` starts uvicorn with ``log_config=None`` for
this reason; uvicorn's default dictConfig would otherwise attach its
own handlers again.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Handler names mark the handlers this module owns, so repeated calls
# (tests, several create_app calls) do not stack duplicates while
# foreign handlers such as pytest's capture handler are left alone.
CONSOLE_HANDLER = "nursery_directory.console"
FILE_HANDLER = "nursery_directory.file"

SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def route_server_logs(level: int) -> None:
    """Send uvicorn's loggers through the root handlers at ``level``."""
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
        server_logger.setLevel(level)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logging for the service.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file that receives a copy of every log line.  If
        omitted or empty, no file handler is added.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(numeric_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_handler(root, CONSOLE_HANDLER):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile and not _has_handler(root, FILE_HANDLER):
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    route_server_logs(numeric_level)
