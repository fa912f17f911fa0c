"""
SQL dialects for the supported backends.
"""

from .base import BaseDialect, Dialect, get_dialect
from .postgres import PostgresDialect
from .sqlite import SQLiteDialect

__all__ = ["BaseDialect", "Dialect", "PostgresDialect", "SQLiteDialect", "get_dialect"]
