"""
PostgreSQL adapter backed by psycopg.
"""

from __future__ import annotations

from typing import Any, Sequence

from ..dialects.postgres import PostgresDialect
from ..utils import get_logger, time_call
from ..utils.performance import resolve_slow_query_ms
from .base import (
    AdapterConfigurationError,
    AdapterConnectionError,
    AdapterExecutionError,
    ConnectionConfig,
    DatabaseAdapter,
)


def _load_driver():
    try:
        import psycopg

        return psycopg
    except ImportError:
        return None


class PostgresAdapter(DatabaseAdapter):
    """
    Runs statements on one psycopg connection. psycopg opens a transaction
    on the first statement, so :meth:`begin` only checks the connection.
    """

    def __init__(self, slow_query_ms: int | None = None) -> None:
        self.dialect = PostgresDialect()
        self.logger = get_logger("adapters.postgres")
        self.slow_query_ms = resolve_slow_query_ms(default=100, override=slow_query_ms)
        self._driver: Any = None
        self._connection: Any = None

    def connect(self, config: ConnectionConfig) -> Any:
        driver = _load_driver()
        if driver is None:
            raise AdapterConfigurationError("psycopg is required to use PostgresAdapter.")

        kwargs = dict(config.options)
        if config.timeout:
            kwargs.setdefault("connect_timeout", int(config.timeout))
        self.logger.info("Connecting to PostgreSQL %s (autocommit=%s)", config.label(), config.autocommit)
        try:
            connection = driver.connect(config.url, autocommit=config.autocommit, **kwargs)
        except driver.Error as exc:
            raise AdapterConnectionError(f"Cannot reach PostgreSQL at {config.label()}: {exc}") from exc

        self._driver, self._connection = driver, connection
        return connection

    def close(self) -> None:
        connection, self._connection = self._connection, None
        if connection is not None:
            connection.close()

    @property
    def autocommit(self) -> bool:
        return bool(self._connection is not None and self._connection.autocommit)

    def _require_connection(self) -> Any:
        if self._connection is None:
            raise AdapterConnectionError("PostgresAdapter is not connected.")
        return self._connection

    def execute(self, sql: str, params: Sequence[Any] | None = None) -> Any:
        cursor = self._require_connection().cursor()
        with time_call("postgres.execute", self.logger, sql=sql, threshold_ms=self.slow_query_ms):
            try:
                # With params=None psycopg leaves literal '%' alone.
                cursor.execute(sql, tuple(params) if params else None)
            except self._driver.Error as exc:
                raise AdapterExecutionError(f"PostgreSQL rejected statement: {exc}") from exc
        return cursor

    def begin(self) -> None:
        self._require_connection()

    def commit(self) -> None:
        self._require_connection().commit()

    def rollback(self) -> None:
        self._require_connection().rollback()
