"""Logging setup for the HRFlow service.

Records go to stdout and, when LOG_FILE is set, to a rotating file
(10MB, 5 backups). Production output is one JSON object per line; with
DEBUG enabled the console switches to a colored, human-readable layout.

Structured fields travel in ``extra={"context": {...}}``::

    logger = get_logger(__name__)
    logger.info("Simulation completed", extra={"context": {"workflow_id": wf.id}})
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, ClassVar

from hrflow.core.config import settings

PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5


class JSONFormatter(logging.Formatter):
    """Render each record as a single JSON line.

    Keys: ``timestamp`` (UTC, ``Z`` suffix), ``level``, ``logger``,
    ``message``, ``service``, plus ``context`` when the record carries one,
    ``exception`` when exc_info is set and ``source`` for ERROR and above.
    """

    def __init__(self, service_name: str = "HRFlow Workflow Engine") -> None:
        super().__init__()
        self.service_name = service_name

    @staticmethod
    def _timestamp(record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=UTC)
        return created.isoformat().replace("+00:00", "Z")

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self._timestamp(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
        }

        context = getattr(record, "context", None)
        if context is not None:
            entry["context"] = context

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            entry["exception"] = {
                "type": exc_type.__name__ if exc_type else None,
                "message": str(exc_value) if exc_value else None,
                "traceback": self.formatException(record.exc_info),
            }

        if record.levelno >= logging.ERROR:
            entry["source"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        return json.dumps(entry, default=str, ensure_ascii=False)


class ColoredConsoleFormatter(logging.Formatter):
    """Colored single-line output for local development."""

    LEVEL_COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[41m",
    }
    RESET: ClassVar[str] = "\033[0m"

    def __init__(self) -> None:
        super().__init__(fmt=PLAIN_FORMAT, datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        # Other handlers share the record, so decorate a copy
        shown = logging.makeLogRecord(record.__dict__)
        color = self.LEVEL_COLORS.get(shown.levelname, self.RESET)
        shown.levelname = f"{color}{shown.levelname}{self.RESET}"

        context = getattr(shown, "context", None)
        if context:
            shown.msg = f"{shown.msg} | Context: {json.dumps(context, default=str)}"

        return super().format(shown)


def _file_handler(log_file: str, service_name: str, enable_json: bool) -> logging.Handler:
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        filename=str(path),
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        JSONFormatter(service_name=service_name)
        if enable_json
        else logging.Formatter(PLAIN_FORMAT, datefmt=DATE_FORMAT)
    )
    return handler


def _console_handler(level: int, service_name: str, colored: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(
        ColoredConsoleFormatter() if colored else JSONFormatter(service_name=service_name)
    )
    return handler


def setup_logging(
    log_level: str | None = None,
    log_file: str | None = None,
    service_name: str | None = None,
    enable_json: bool = True,
    enable_console: bool = True,
    debug: bool | None = None,
) -> logging.Logger:
    """Configure the root logger, replacing any existing handlers.

    Args:
        log_level: Level name. Defaults to settings.LOG_LEVEL; unknown
            names fall back to INFO.
        log_file: Path for the rotating file handler. No file handler is
            attached when omitted.
        service_name: Value of the JSON ``service`` key.
            Defaults to settings.PROJECT_NAME.
        enable_json: JSON (True) or plain text (False) in the log file.
        enable_console: Attach the stdout handler.
        debug: Colored console output instead of JSON.
            Defaults to settings.DEBUG.

    Returns:
        The root logger.
    """
    log_level = log_level or settings.LOG_LEVEL
    service_name = service_name or settings.PROJECT_NAME
    debug = settings.DEBUG if debug is None else debug
    level = getattr(logging, log_level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    if log_file is not None:
        root.addHandler(_file_handler(log_file, service_name, enable_json))
    if enable_console:
        root.addHandler(_console_handler(level, service_name, colored=debug))

    root.info(
        f"Logging initialized - Level: {log_level}",
        extra={
            "context": {
                "log_level": log_level,
                "log_file": log_file,
                "service": service_name,
            }
        },
    )
    return root


def get_logger(name: str) -> logging.Logger:
    """Module logger; call as ``get_logger(__name__)``."""
    return logging.getLogger(name)


__all__ = [
    "ColoredConsoleFormatter",
    "JSONFormatter",
    "get_logger",
    "setup_logging",
]
