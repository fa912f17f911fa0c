"""
SQLite adapter on the stdlib sqlite3 module.
"""

from __future__ import annotations

import sqlite3
from typing import Any, Sequence

from ..dialects.sqlite import SQLiteDialect
from ..utils import get_logger, time_call
from ..utils.performance import resolve_slow_query_ms
from .base import (
    AdapterConnectionError,
    AdapterExecutionError,
    ConnectionConfig,
    DatabaseAdapter,
)


def database_path(url: str) -> str:
    """
    ``sqlite:///relative.db`` -> ``relative.db``; ``sqlite://`` and
    ``sqlite:///:memory:`` -> ``:memory:``.
    """
    url = url.split("?", 1)[0]
    if url in ("sqlite://", "sqlite:///:memory:"):
        return ":memory:"
    return url.removeprefix("sqlite:///")


class SQLiteAdapter(DatabaseAdapter):
    """
    Outside autocommit the connection uses sqlite3's legacy transaction
    handling, so :meth:`begin` issues an explicit ``BEGIN`` and DDL joins
    the transaction.
    """

    def __init__(self, slow_query_ms: int | None = None) -> None:
        self.dialect = SQLiteDialect()
        self.logger = get_logger("adapters.sqlite")
        self.slow_query_ms = resolve_slow_query_ms(default=100, override=slow_query_ms)
        self._connection: sqlite3.Connection | None = None
        self._autocommit = False

    def connect(self, config: ConnectionConfig) -> sqlite3.Connection:
        path = database_path(config.url)
        self.logger.info("Opening SQLite database %s (autocommit=%s)", config.label(), config.autocommit)
        try:
            connection = sqlite3.connect(
                path,
                isolation_level=None if config.autocommit else "",
                timeout=config.timeout if config.timeout is not None else 5.0,
                check_same_thread=False,
            )
        except sqlite3.Error as exc:
            raise AdapterConnectionError(f"Cannot open SQLite database {path!r}: {exc}") from exc
        connection.row_factory = sqlite3.Row
        self._connection, self._autocommit = connection, config.autocommit
        return connection

    def close(self) -> None:
        connection, self._connection = self._connection, None
        if connection is not None:
            connection.close()

    @property
    def autocommit(self) -> bool:
        return self._connection is not None and self._autocommit

    def _require_connection(self) -> sqlite3.Connection:
        if self._connection is None:
            raise AdapterConnectionError("SQLiteAdapter is not connected.")
        return self._connection

    def execute(self, sql: str, params: Sequence[Any] | None = None) -> sqlite3.Cursor:
        cursor = self._require_connection().cursor()
        with time_call("sqlite.execute", self.logger, sql=sql, threshold_ms=self.slow_query_ms):
            try:
                cursor.execute(sql, tuple(params or ()))
            except sqlite3.Error as exc:
                raise AdapterExecutionError(f"SQLite rejected statement: {exc}") from exc
        return cursor

    def begin(self) -> None:
        connection = self._require_connection()
        if not connection.in_transaction:
            connection.execute("BEGIN")

    def commit(self) -> None:
        self._require_connection().commit()

    def rollback(self) -> None:
        self._require_connection().rollback()
