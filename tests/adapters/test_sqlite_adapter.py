import sqlite3

import pytest

from blogseed.adapters import (
    AdapterConnectionError,
    AdapterExecutionError,
    ConnectionConfig,
    SQLiteAdapter,
)
from blogseed.adapters.sqlite import database_path


def test_connect_creates_database(tmp_path):
    adapter = SQLiteAdapter()
    config = ConnectionConfig(url=f"sqlite:///{tmp_path / 'connect.db'}")
    connection = adapter.connect(config)
    assert isinstance(connection, sqlite3.Connection)
    assert (tmp_path / "connect.db").exists()
    adapter.close()


def test_execute_before_connect_raises():
    adapter = SQLiteAdapter()
    with pytest.raises(AdapterConnectionError):
        adapter.execute("SELECT 1")


def test_close_is_idempotent(sqlite_adapter):
    sqlite_adapter.close()
    sqlite_adapter.close()


def test_execution_errors_are_wrapped(sqlite_adapter):
    with pytest.raises(AdapterExecutionError) as excinfo:
        sqlite_adapter.execute("SELECT * FROM missing_table")
    assert isinstance(excinfo.value.__cause__, sqlite3.OperationalError)


def test_transaction_commit_and_rollback(sqlite_adapter):
    sqlite_adapter.execute("CREATE TABLE item (value INTEGER)")

    sqlite_adapter.begin()
    sqlite_adapter.execute("INSERT INTO item (value) VALUES (?)", (10,))
    sqlite_adapter.commit()
    assert sqlite_adapter.execute("SELECT COUNT(*) FROM item").fetchone()[0] == 1

    sqlite_adapter.begin()
    sqlite_adapter.execute("INSERT INTO item (value) VALUES (?)", (20,))
    sqlite_adapter.rollback()
    assert sqlite_adapter.execute("SELECT COUNT(*) FROM item").fetchone()[0] == 1


def test_ddl_is_rolled_back_inside_transaction(sqlite_adapter):
    sqlite_adapter.begin()
    sqlite_adapter.execute("CREATE TABLE scratch (value TEXT)")
    sqlite_adapter.rollback()
    row = sqlite_adapter.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name='scratch'"
    ).fetchone()
    assert row is None


def test_in_memory_database_and_autocommit():
    adapter = SQLiteAdapter()
    adapter.connect(ConnectionConfig.from_dsn("sqlite:///:memory:?autocommit=true"))
    assert adapter.autocommit is True
    adapter.execute("CREATE TABLE sample (value TEXT)")
    adapter.execute("INSERT INTO sample (value) VALUES (?)", ("hello",))
    assert adapter.execute("SELECT value FROM sample").fetchone()[0] == "hello"
    adapter.close()


@pytest.mark.parametrize(
    "url, expected",
    [
        ("sqlite://", ":memory:"),
        ("sqlite:///:memory:", ":memory:"),
        ("sqlite:///blog.db?autocommit=true", "blog.db"),
        ("sqlite:////var/lib/blog.db", "/var/lib/blog.db"),
    ],
)
def test_database_path(url, expected):
    assert database_path(url) == expected
