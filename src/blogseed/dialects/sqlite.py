"""
SQLite rendering.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from .base import BaseDialect

if TYPE_CHECKING:
    from ..core.fields import Field


class SQLiteDialect(BaseDialect):
    """
    SQLite accepts ``VARCHAR(n)`` but never enforces the bound, so string
    columns carry an explicit ``CHECK`` on their length. Timestamps are
    stored as ISO-8601 text with a UTC offset.
    """

    name = "sqlite"
    placeholder = "?"
    type_map = {
        "datetime": "TEXT",
        "datetime_tz": "TEXT",
        "varchar": "VARCHAR({max_length})",
        "text": "TEXT",
    }

    def column_checks(self, column: str, field: "Field") -> list[str]:
        max_length = getattr(field, "max_length", None)
        if field.type_key != "varchar" or not max_length:
            return []
        return [f"CHECK (length({self.quote_identifier(column)}) <= {int(max_length)})"]

    def current_timestamp_sql(self) -> str:
        return "strftime('%Y-%m-%d %H:%M:%f+00:00', 'now')"

    def adapt_value(self, value: Any) -> Any:
        if isinstance(value, datetime):
            return value.isoformat(sep=" ")
        return value
