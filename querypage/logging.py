"""
Logging configuration.

Every line carries the request context set through ``set_log_context``:
the HTTP middleware adds ``endpoint`` and ``method``, the member search
route adds ``offset``, ``limit`` and ``sort``. The console shows that
context inline, while ERROR records also go to a JSON file with the
context merged into the object.
"""

import json
import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from querypage.constants import MAX_LOG_LINE_BYTES
from querypage.settings import app_settings

log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})

# Everything a bare LogRecord carries; other attributes came in via `extra`
_RESERVED = frozenset(vars(logging.makeLogRecord({}))) | {
    "message",
    "asctime",
    "context",
}

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def set_log_context(**fields: Any) -> None:
    """
    Add fields to the context of the current request.

    Example:
        >>> set_log_context(endpoint="/members", limit=20)
        >>> logger.warning("Page rejected")  # logged with endpoint and limit
    """
    log_context.set({**log_context.get(), **fields})


def get_log_context() -> dict[str, Any]:
    return log_context.get()


def clear_log_context() -> None:
    log_context.set({})


def extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Return the fields passed to a log call through ``extra``."""
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RESERVED
    }


class StructuredJSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    Keys, in order of precedence (later wins): the base record fields, the
    request context, the call's ``extra`` fields. Lines longer than
    MAX_LOG_LINE_BYTES get their message cut short.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
            "environment": app_settings.ENVIRONMENT,
            **get_log_context(),
            **extra_fields(record),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        line = json.dumps(entry, default=str)
        overflow = len(line) - MAX_LOG_LINE_BYTES
        if overflow > 0:
            keep = max(len(entry["message"]) - overflow - 20, 0)
            entry["message"] = entry["message"][:keep] + "... [TRUNCATED]"
            line = json.dumps(entry, default=str)
        return line


class HumanReadableFormatter(logging.Formatter):
    """
    Console formatter: ``time - [k=v ...] LEVEL: message``.

    Records other than INFO also show where they were logged from. An
    empty context is shown as ``[-]``.
    """

    SHORT_FMT = "%(asctime)s - [%(context)s] %(levelname)s: %(message)s"
    LONG_FMT = (
        "%(asctime)s - [%(context)s] %(levelname)s: "
        "%(module)s.%(funcName)s:%(lineno)d - %(message)s"
    )

    def __init__(self) -> None:
        super().__init__(datefmt=DATE_FORMAT)
        self._short = logging.Formatter(self.SHORT_FMT, datefmt=DATE_FORMAT)
        self._long = logging.Formatter(self.LONG_FMT, datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        record.context = (
            " ".join(f"{k}={v}" for k, v in get_log_context().items()) or "-"
        )
        formatter = self._short if record.levelno == logging.INFO else self._long
        return formatter.format(record)


def setup_logging() -> logging.Logger:
    """
    Configure the ``querypage`` logger.

    Console output at LOG_LEVEL; ERROR and above are also appended as JSON
    to LOG_FILE_PATH when that file can be opened.
    """
    logger = logging.getLogger("querypage")
    logger.setLevel(app_settings.LOG_LEVEL.upper())
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(HumanReadableFormatter())
    logger.addHandler(console_handler)

    try:
        log_path = Path(app_settings.LOG_FILE_PATH)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
    except OSError as e:
        logger.warning(f"Could not create file handler: {e}")
    else:
        file_handler.setLevel(logging.ERROR)
        file_handler.setFormatter(StructuredJSONFormatter())
        logger.addHandler(file_handler)

    return logger


logger = setup_logging()
