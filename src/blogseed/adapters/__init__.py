"""
Database adapters and connection settings.
"""

from .base import (
    AdapterConfigurationError,
    AdapterConnectionError,
    AdapterError,
    AdapterExecutionError,
    ConnectionConfig,
    DatabaseAdapter,
)
from .postgres import PostgresAdapter
from .sqlite import SQLiteAdapter

_ADAPTERS = {
    "sqlite": SQLiteAdapter,
    "postgres": PostgresAdapter,
    "postgresql": PostgresAdapter,
}


def adapter_for(config: ConnectionConfig, **kwargs) -> DatabaseAdapter:
    """
    Pick the adapter matching the URL scheme of ``config``.
    """
    try:
        adapter_cls = _ADAPTERS[config.scheme]
    except KeyError:
        raise AdapterConfigurationError(
            f"No adapter available for scheme {config.scheme!r} ({config.label()})."
        ) from None
    return adapter_cls(**kwargs)


__all__ = [
    "AdapterConfigurationError",
    "AdapterConnectionError",
    "AdapterError",
    "AdapterExecutionError",
    "ConnectionConfig",
    "DatabaseAdapter",
    "PostgresAdapter",
    "SQLiteAdapter",
    "adapter_for",
]
