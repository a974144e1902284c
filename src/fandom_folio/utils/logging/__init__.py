# ABOUTME: Logging configuration and structured logger helpers
# ABOUTME: Keeps diagnostics on stderr or log files so stdout carries only data

from .config import LoggingMode, configure_logging, detect_logging_mode, ensure_stderr_default, get_logging_status
from .utils import LogContext, get_logger, log_api_call, log_extraction_step, with_page_context

ensure_stderr_default()

__all__ = [
    # Configuration
    "LoggingMode",
    "configure_logging",
    "detect_logging_mode",
    "ensure_stderr_default",
    "get_logging_status",
    # Utilities
    "LogContext",
    "get_logger",
    "log_api_call",
    "log_extraction_step",
    "with_page_context",
]
