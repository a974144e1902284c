# ABOUTME: Logger helpers: structlog loggers, timing decorators and page-scoped context
# ABOUTME: Every HTTP call and pipeline step logs its duration and outcome the same way

import functools
import time
import uuid
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import structlog

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to ``name`` (the calling module by convention)."""
    name = name or "fandom_folio"
    # Initial values keep the proxy lazy until configure_logging has run
    return structlog.get_logger(name, logger_name=name)


def generate_operation_id() -> str:
    """Short random ID tying together the log lines of one extraction."""
    return uuid.uuid4().hex[:8]


def _first_url(args: tuple, kwargs: dict) -> str | None:
    url = kwargs.get("url")
    if url is not None:
        return url
    return next((a for a in args if isinstance(a, str) and a.startswith(("http://", "https://"))), None)


async def _run_timed(bound_logger, label: str, func, args, kwargs):
    start_time = time.perf_counter()
    try:
        result = await func(*args, **kwargs)
    except Exception as e:
        bound_logger.error(
            f"{label} failed",
            duration_seconds=round(time.perf_counter() - start_time, 3),
            error=str(e),
            error_type=type(e).__name__,
            success=False,
        )
        raise

    extra = {"result_length": len(result)} if isinstance(result, str | bytes) else {}
    bound_logger.info(
        f"{label} succeeded",
        duration_seconds=round(time.perf_counter() - start_time, 3),
        success=True,
        **extra,
    )
    return result


def log_api_call(api_name: str) -> Callable[[F], F]:
    """Decorate an async HTTP call so it logs its target URL, timing and outcome.

    Args:
        api_name: Name of the remote service being called
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            bound_logger = get_logger(func.__module__).bind(
                api_name=api_name, call_id=generate_operation_id(), url=_first_url(args, kwargs)
            )
            bound_logger.debug(f"API call to {api_name}")
            return await _run_timed(bound_logger, f"API call to {api_name}", func, args, kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator


def log_extraction_step(step_name: str) -> Callable[[F], F]:
    """Decorate an async page extraction step with start, timing and outcome logs.

    Args:
        step_name: Name of the extraction step
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            bound_logger = get_logger(func.__module__).bind(step=step_name, pipeline="page_extraction")
            bound_logger.info(f"Starting extraction step: {step_name}")
            return await _run_timed(bound_logger, f"Extraction step {step_name}", func, args, kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator


class LogContext:
    """Context manager yielding a logger bound to extra context.

    An exception escaping the block is logged once and then propagates.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger, **context):
        self.logger = logger
        self.context = context
        self.bound_logger = None

    def __enter__(self) -> structlog.stdlib.BoundLogger:
        self.bound_logger = self.logger.bind(**self.context)
        return self.bound_logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None and self.bound_logger is not None:
            self.bound_logger.error("Page operation failed", error=str(exc_val), error_type=exc_type.__name__)


def with_page_context(url: str) -> LogContext:
    """Logging context for one page extraction: URL plus a fresh operation ID."""
    return LogContext(
        get_logger("fandom_folio.pages"), url=url, operation_id=generate_operation_id(), entity_type="page"
    )
