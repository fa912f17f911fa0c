import os

import pytest

from blogseed import blog
from blogseed.adapters import AdapterExecutionError, ConnectionConfig
from blogseed.adapters.postgres import PostgresAdapter


@pytest.fixture
def pg_adapter():
    try:
        import psycopg  # noqa: F401
    except ImportError:
        pytest.skip("psycopg driver not installed")
    dsn = os.getenv("BLOGSEED_POSTGRES_DSN")
    if not dsn:
        pytest.skip("BLOGSEED_POSTGRES_DSN not set; skipping Postgres integration test")
    adapter = PostgresAdapter()
    try:
        adapter.connect(ConnectionConfig.from_dsn(dsn))
    except Exception as exc:  # pragma: no cover - environment dependent
        pytest.skip(f"Cannot connect to Postgres for integration test: {exc}")
    yield adapter
    try:
        adapter.rollback()
        adapter.execute('DROP TABLE IF EXISTS "blog_entry"')
        adapter.commit()
    finally:
        adapter.close()


def test_postgres_reset_and_seed(pg_adapter):
    blog.reset_and_seed(pg_adapter, force=True)
    blog.reset_and_seed(pg_adapter, force=True)
    entries = blog.fetch_entries(pg_adapter)
    assert [(e.title, e.author, e.text) for e in entries] == [
        ("Get enterprisey with Rust", "Sander", "Lorem Ipsum"),
        ("Get whimsical with data", "Sander", "Lorem Ipsum"),
    ]
    assert all(e.created.tzinfo is not None for e in entries)

    cursor = pg_adapter.execute(
        "SELECT column_name, data_type, character_maximum_length "
        "FROM information_schema.columns WHERE table_name = %s ORDER BY ordinal_position",
        ("blog_entry",),
    )
    assert cursor.fetchall() == [
        ("created", "timestamp with time zone", None),
        ("title", "character varying", 100),
        ("author", "character varying", 40),
        ("text", "text", None),
    ]


def test_postgres_rejects_overlong_title(pg_adapter):
    blog.reset_and_seed(pg_adapter, force=True)
    with pytest.raises(AdapterExecutionError):
        pg_adapter.execute('INSERT INTO "blog_entry" ("title") VALUES (%s)', ("x" * 101,))
