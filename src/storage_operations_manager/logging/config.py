"""Structured logging configuration using structlog.

Console output is human readable (or JSON on request); a rotating JSON log is
kept under ``~/.local/state/storage-ops`` so failed cluster calls can be
diagnosed after the fact.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timedelta
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog

LOG_DIR = Path.home() / ".local" / "state" / "storage-ops"
LOG_FILE = LOG_DIR / "storage-ops.log"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5
RETENTION_DAYS = 30

# Event keys whose values never reach a log sink
REDACTED_KEYS = frozenset({"password", "authorization", "auth", "secret"})
REDACTED_VALUE = "***"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def redact_credentials(
    _logger: Any, _method_name: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """Mask credential values bound to a log event."""
    for key in event_dict.keys() & REDACTED_KEYS:
        event_dict[key] = REDACTED_VALUE
    return event_dict


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        redact_credentials,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _cleanup_old_logs() -> None:
    """Delete rotated log files older than RETENTION_DAYS."""
    if not LOG_DIR.exists():
        return
    cutoff = datetime.now() - timedelta(days=RETENTION_DAYS)
    for log_file in LOG_DIR.glob("storage-ops.log*"):
        try:
            if datetime.fromtimestamp(log_file.stat().st_mtime) < cutoff:
                log_file.unlink()
        except OSError:
            continue


def _setup_file_logging() -> None:
    """Attach the rotating JSON file handler to the root logger."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    _cleanup_old_logs()

    file_handler = RotatingFileHandler(
        LOG_FILE,
        maxBytes=MAX_LOG_SIZE,
        backupCount=BACKUP_COUNT,
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=_shared_processors(),
        )
    )
    logging.getLogger().addHandler(file_handler)


def resolve_log_level(
    verbose: bool = False,
    debug: bool = False,
    level: str | None = None,
) -> int:
    """Pick the console log level.

    Command line flags win over a configured level name; without either the
    console only shows warnings.
    """
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    if level:
        try:
            return _LEVELS[level.upper()]
        except KeyError:
            raise ValueError(f"Unknown log level: {level}") from None
    return logging.WARNING


def configure_logging(
    verbose: bool = False,
    debug: bool = False,
    json_output: bool = False,
    level: str | None = None,
) -> None:
    """Configure structured logging for the application.

    Args:
        verbose: Enable INFO level console output.
        debug: Enable DEBUG level console output and rich tracebacks with locals.
        json_output: Render console logs as JSON.
        level: Configured level name, used when neither flag is set.
    """
    log_level = resolve_log_level(verbose=verbose, debug=debug, level=level)
    shared_processors = _shared_processors()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if json_output:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=debug),
        )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=shared_processors,
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(console_handler)

    _setup_file_logging()


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """Get a logger, optionally bound to initial context."""
    logger: structlog.BoundLogger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger
