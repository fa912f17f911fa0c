"""
Logging setup for blogseed.

Every logger lives under the ``blogseed`` namespace. Records carry a
correlation id so the statements of one CLI invocation can be grouped.
"""

from __future__ import annotations

import logging
import time
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

NAMESPACE = "blogseed"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(correlation_id)s | %(name)s | %(message)s"

_correlation_id: ContextVar[str | None] = ContextVar("blogseed_correlation_id", default=None)


class CorrelationIdFilter(logging.Filter):
    """Stamps ``record.correlation_id`` for the formatter."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id()
        return True


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Attach a stderr handler to the namespace logger. Later calls leave an
    existing handler in place.
    """
    root = logging.getLogger(NAMESPACE)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.addFilter(CorrelationIdFilter())
        root.addHandler(handler)
        root.setLevel(level)
    return root


def set_level(level: int) -> None:
    configure_logging(level).setLevel(level)


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"{NAMESPACE}.{name}")


def set_correlation_id(value: str | None = None) -> str:
    token = value or uuid.uuid4().hex[:12]
    _correlation_id.set(token)
    return token


def get_correlation_id() -> str:
    return _correlation_id.get() or set_correlation_id()


@contextmanager
def time_call(
    name: str,
    logger: logging.Logger,
    *,
    sql: str | None = None,
    threshold_ms: int = 100,
) -> Iterator[None]:
    """
    Log how long the block took: DEBUG normally, WARNING at or above
    ``threshold_ms``. The statement text travels in ``extra``.
    """
    started = time.perf_counter()
    outcome = "took"
    try:
        yield
    except BaseException:
        outcome = "failed after"
        raise
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000
        level = logging.WARNING if elapsed_ms >= threshold_ms else logging.DEBUG
        logger.log(level, "%s %s %.2fms", name, outcome, elapsed_ms, extra={"sql": sql, "elapsed_ms": elapsed_ms})
