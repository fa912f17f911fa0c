"""Guard for statements that throw away existing rows."""

from __future__ import annotations

from ..utils import get_logger

logger = get_logger("security.destructive")


class DestructiveOperationError(RuntimeError):
    """A DROP or TRUNCATE was about to run without confirmation."""


def confirm_destructive_operation(operation: str, *, force: bool = False) -> None:
    if not force:
        raise DestructiveOperationError(
            f"'{operation}' discards existing data and needs explicit confirmation (force=True)."
        )
    logger.warning("Running destructive statement: %s", operation)
