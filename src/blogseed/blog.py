"""
The ``blog_entry`` table: model, seed rows and the reset-and-seed script.

Running :func:`reset_and_seed` drops any existing ``blog_entry`` table,
recreates it and inserts the two seed entries, in exactly that order.
Prior data is discarded, so the call requires ``force=True``.
"""

from __future__ import annotations

from typing import Any, List, Mapping

from .adapters.base import DatabaseAdapter
from .core import DateTimeField, Model, StringField, TextField
from .dialects.base import Dialect
from .schema import CURRENT_TIMESTAMP, SchemaBuilder, SchemaScript
from .utils import get_logger

logger = get_logger("blog")


class BlogEntry(Model):
    """A blog post. No key or constraint beyond the string length bounds."""

    created = DateTimeField(timezone=True)
    title = StringField(max_length=100)
    author = StringField(max_length=40)
    text = TextField()


SEED_ENTRIES: tuple[Mapping[str, Any], ...] = (
    {"title": "Get enterprisey with Rust", "author": "Sander", "text": "Lorem Ipsum"},
    {"title": "Get whimsical with data", "author": "Sander", "text": "Lorem Ipsum"},
)


def reset_statements(dialect: Dialect) -> SchemaScript:
    builder = SchemaBuilder(dialect)
    script = SchemaScript()
    script.add(builder.drop_table_sql(BlogEntry), description=f"drop table {BlogEntry._meta.table_name}")
    script.add(builder.create_table_sql(BlogEntry), description=f"create table {BlogEntry._meta.table_name}")
    return script


def seed_statements(dialect: Dialect, *, inline: bool = False) -> SchemaScript:
    builder = SchemaBuilder(dialect)
    script = SchemaScript()
    for index, entry in enumerate(SEED_ENTRIES, start=1):
        sql, params = builder.insert_sql(
            BlogEntry, {"created": CURRENT_TIMESTAMP, **entry}, inline=inline
        )
        script.add(sql, params, description=f"seed entry {index}: {entry['title']}")
    return script


def build_script(dialect: Dialect, *, inline: bool = False) -> SchemaScript:
    """
    Drop, create, insert, insert.
    """
    return SchemaScript(
        [*reset_statements(dialect), *seed_statements(dialect, inline=inline)]
    )


def render_script(dialect: Dialect) -> str:
    return build_script(dialect, inline=True).render()


def reset(adapter: DatabaseAdapter, *, force: bool = False) -> None:
    reset_statements(adapter.dialect).run(adapter, force=force)


def seed(adapter: DatabaseAdapter) -> None:
    seed_statements(adapter.dialect).run(adapter)


def reset_and_seed(adapter: DatabaseAdapter, *, force: bool = False) -> None:
    logger.info("Resetting %s and inserting %s seed entries", BlogEntry._meta.table_name, len(SEED_ENTRIES))
    build_script(adapter.dialect).run(adapter, force=force)


def fetch_entries(adapter: DatabaseAdapter) -> List[BlogEntry]:
    builder = SchemaBuilder(adapter.dialect)
    cursor = adapter.execute(builder.select_sql(BlogEntry))
    return [BlogEntry.from_row(row) for row in cursor.fetchall()]


def run_sql_script(adapter: DatabaseAdapter, text: str, *, force: bool = False) -> int:
    """
    Execute a SQL text statement by statement; returns the statement count.
    """
    script = SchemaScript.from_sql(text)
    script.run(adapter, force=force)
    return len(script)
