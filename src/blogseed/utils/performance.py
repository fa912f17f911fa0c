"""
Slow statement threshold resolution.
"""

from __future__ import annotations

import os

from .logging import get_logger

SLOW_QUERY_ENV = "BLOGSEED_SLOW_QUERY_MS"

logger = get_logger("utils.performance")


def resolve_slow_query_ms(*, default: int = 100, override: int | None = None) -> int:
    """
    Pick the slow statement threshold: explicit override, then the
    ``BLOGSEED_SLOW_QUERY_MS`` environment variable, then ``default``.
    """
    if override is not None:
        return override
    raw = os.getenv(SLOW_QUERY_ENV)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r; using %sms", SLOW_QUERY_ENV, raw, default)
        return default
    return max(value, 0)
