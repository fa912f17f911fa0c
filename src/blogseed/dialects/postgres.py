"""
PostgreSQL rendering: ``%s`` placeholders and native timestamptz.
"""

from __future__ import annotations

from .base import BaseDialect


class PostgresDialect(BaseDialect):
    name = "postgresql"
    placeholder = "%s"
    type_map = {
        "datetime": "TIMESTAMP",
        "datetime_tz": "TIMESTAMP WITH TIME ZONE",
        "varchar": "VARCHAR({max_length})",
        "text": "TEXT",
    }

    def current_timestamp_sql(self) -> str:
        return "now()"
