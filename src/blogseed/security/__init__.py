"""Connection URL handling and the destructive-statement guard."""

from .destructive import DestructiveOperationError, confirm_destructive_operation
from .dsns import DatabaseURL, parse_dsn

__all__ = [
    "DatabaseURL",
    "DestructiveOperationError",
    "confirm_destructive_operation",
    "parse_dsn",
]
