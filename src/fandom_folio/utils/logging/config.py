# ABOUTME: Logging configuration using loguru sinks with structlog as the front end
# ABOUTME: Dual-mode operation: interactive log files vs production JSON on stderr

import logging
import os
import sys
import time
from pathlib import Path
from typing import Any

import structlog
from loguru import logger

DEFAULT_LOG_DIR = Path("logs")


class LoggingMode:
    """Logging mode constants."""

    INTERACTIVE = "interactive"
    PRODUCTION = "production"


def detect_logging_mode() -> str:
    """Detect whether we're running in interactive or production mode."""
    mode = os.getenv("FANDOM_FOLIO_LOG_MODE")
    if mode and mode.lower() in [LoggingMode.INTERACTIVE, LoggingMode.PRODUCTION]:
        return mode.lower()

    return LoggingMode.INTERACTIVE if sys.stderr.isatty() else LoggingMode.PRODUCTION


def setup_third_party_logging() -> None:
    """Quiet third-party library logging so it never interleaves with CLI output."""
    warning_loggers = ["httpx", "httpcore", "urllib3", "asyncio", "bs4"]

    for logger_name in warning_loggers:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
    logging.getLogger("py.warnings").setLevel(logging.ERROR)


def _loguru_factory(*args: Any) -> Any:
    # structlog hands the rendered event string to loguru's level methods
    return logger


def ensure_stderr_default() -> None:
    """Send structlog output to stderr when nothing has configured it yet.

    Library callers that never call configure_logging still keep stdout free
    for data.
    """
    if not structlog.is_configured():
        structlog.configure(logger_factory=structlog.PrintLoggerFactory(sys.stderr))


def setup_structlog(log_level: str) -> None:
    """Route structlog events through loguru so every sink sees the same stream."""
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=_loguru_factory,
        cache_logger_on_first_use=False,
    )


def _ensure_log_dir(log_dir: Path) -> bool:
    max_retries = 3
    for attempt in range(max_retries):
        try:
            log_dir.mkdir(exist_ok=True)
            return True
        except (FileNotFoundError, PermissionError, OSError):
            if attempt == max_retries - 1:
                return False
            time.sleep(0.01 * (attempt + 1))
    return False


def configure_logging(mode: str | None = None, log_level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging using loguru.

    Diagnostics never go to stdout: stdout is reserved for the extracted data.

    Args:
        mode: Logging mode (interactive/production), auto-detected if None
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Custom log file path, uses default if None
    """
    if mode is None:
        mode = detect_logging_mode()

    setup_third_party_logging()
    setup_structlog(log_level)

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    logging.getLogger().setLevel(numeric_level)

    logger.remove()

    if mode == LoggingMode.INTERACTIVE and not _ensure_log_dir(DEFAULT_LOG_DIR):
        mode = LoggingMode.PRODUCTION

    if mode == LoggingMode.PRODUCTION:
        logger.add(sys.stderr, level=log_level, format="{time} | {level} | {message}", serialize=True)
        return

    log_file_path = log_file or str(DEFAULT_LOG_DIR / "fandom-folio.log")

    # Human-readable logs
    logger.add(
        log_file_path,
        level=log_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}",
        rotation="10 MB",
        retention="7 days",
    )

    # JSON logs for machine processing
    logger.add(
        DEFAULT_LOG_DIR / "fandom-folio.json",
        level=log_level,
        format="{time} | {level} | {message}",
        serialize=True,
        rotation="10 MB",
        retention="7 days",
    )

    # Errors only
    logger.add(
        DEFAULT_LOG_DIR / "errors.log",
        level="ERROR",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}",
        backtrace=True,
        diagnose=True,
    )


def get_logging_status() -> dict[str, Any]:
    """Get current logging configuration status."""
    mode = detect_logging_mode()
    interactive = mode == LoggingMode.INTERACTIVE

    return {
        "mode": mode,
        "log_directory": str(DEFAULT_LOG_DIR.absolute()) if DEFAULT_LOG_DIR.exists() else None,
        "log_files": {
            "main": str(DEFAULT_LOG_DIR / "fandom-folio.log") if interactive else None,
            "json": str(DEFAULT_LOG_DIR / "fandom-folio.json") if interactive else None,
            "errors": str(DEFAULT_LOG_DIR / "errors.log") if interactive else None,
        },
        "third_party_suppressed": ["httpx", "httpcore", "urllib3", "asyncio", "bs4", "py.warnings"],
    }
