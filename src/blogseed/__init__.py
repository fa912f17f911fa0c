"""
blogseed: drop, recreate and seed the ``blog_entry`` table.
"""

from .adapters import ConnectionConfig, PostgresAdapter, SQLiteAdapter, adapter_for  # noqa: F401
from .blog import (  # noqa: F401
    SEED_ENTRIES,
    BlogEntry,
    fetch_entries,
    render_script,
    reset,
    reset_and_seed,
    run_sql_script,
    seed,
)
from .config import load_config  # noqa: F401
from .core import DateTimeField, Model, StringField, TextField  # noqa: F401
from .schema import SchemaBuilder, SchemaScript  # noqa: F401
from .security import DestructiveOperationError  # noqa: F401

__all__ = [
    "BlogEntry",
    "ConnectionConfig",
    "DateTimeField",
    "DestructiveOperationError",
    "Model",
    "PostgresAdapter",
    "SEED_ENTRIES",
    "SQLiteAdapter",
    "SchemaBuilder",
    "SchemaScript",
    "StringField",
    "TextField",
    "adapter_for",
    "fetch_entries",
    "load_config",
    "render_script",
    "reset",
    "reset_and_seed",
    "run_sql_script",
    "seed",
]
