"""
Logging configuration for the application.

``setup_logging`` configures the root logger with a console handler and
an optional file handler, exactly once.  Every record carries a
``request_id`` attribute: records logged through the adapter returned by
``get_request_logger`` get the id of the request being served, all
other records get ``"-"``.

Request scoped loggers are created per request by a FastAPI dependency
and handed to the service call, so no logging state is kept on the
services or controllers themselves.
"""

import logging
import uuid
from pathlib import Path
from typing import Optional

from fastapi import Request

REQUEST_ID_HEADER = "X-Request-ID"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s"


class RequestContextFilter(logging.Filter):
    """Make sure every record has a ``request_id`` for the formatter."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = "-"
        return True


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logger.

    If no handlers are attached to the root logger, attach a console
    handler and optionally a file handler.  The root logger's level is
    set based on the provided ``level``.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    """
    logger = logging.getLogger()
    if logger.handlers:
        # Already configured, e.g. when ``create_app`` runs several times
        # in the same test session.
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    context_filter = RequestContextFilter()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.addFilter(context_filter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.addFilter(context_filter)
        logger.addHandler(file_handler)


def bind_logger(name: str, request_id: str) -> logging.LoggerAdapter:
    """Return an adapter of logger ``name`` that tags records with ``request_id``."""
    return logging.LoggerAdapter(logging.getLogger(name), {"request_id": request_id})


def get_request_logger(request: Request) -> logging.LoggerAdapter:
    """FastAPI dependency returning a logger bound to the current request.

    The request id is taken from the ``X-Request-ID`` header when the
    client sends one, otherwise a random id is generated.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
    return bind_logger("resource_api.request", request_id)
