"""
SQL rendering rules that differ between backends.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, Any, ClassVar, Protocol

if TYPE_CHECKING:
    from ..core.fields import Field


class Dialect(Protocol):
    """
    What the schema builder asks of a backend.
    """

    name: str

    def quote_identifier(self, identifier: str) -> str: ...

    def format_table(self, table_name: str) -> str: ...

    def parameter_placeholder(self) -> str: ...

    def column_type(self, field: "Field") -> str: ...

    def column_checks(self, column: str, field: "Field") -> list[str]: ...

    def render_column_definition(self, column: str, field: "Field") -> str: ...

    def current_timestamp_sql(self) -> str: ...

    def adapt_value(self, value: Any) -> Any: ...

    def render_literal(self, value: Any) -> str: ...


def quote_string_literal(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


class BaseDialect:
    """
    Double-quoted identifiers and nullable columns with no defaults. A
    subclass supplies ``type_map``, the placeholder and the clock.
    """

    name: ClassVar[str] = ""
    placeholder: ClassVar[str] = ""
    type_map: ClassVar[dict[str, str]] = {}

    def quote_identifier(self, identifier: str) -> str:
        return '"' + identifier.replace('"', '""') + '"'

    def format_table(self, table_name: str) -> str:
        return self.quote_identifier(table_name)

    def parameter_placeholder(self) -> str:
        return self.placeholder

    def column_type(self, field: "Field") -> str:
        template = self.type_map.get(field.type_key)
        if template is None:
            raise ValueError(f"{self.name} has no column type for {field.type_key!r} ({field.name}).")
        return template.format(max_length=getattr(field, "max_length", None))

    def column_checks(self, column: str, field: "Field") -> list[str]:
        return []

    def render_column_definition(self, column: str, field: "Field") -> str:
        parts = [self.quote_identifier(column), self.column_type(field)]
        parts.extend(self.column_checks(column, field))
        return " ".join(parts)

    def current_timestamp_sql(self) -> str:
        raise NotImplementedError

    def adapt_value(self, value: Any) -> Any:
        return value

    def render_literal(self, value: Any) -> str:
        value = self.adapt_value(value)
        if value is None:
            return "NULL"
        if isinstance(value, bool):
            return "TRUE" if value else "FALSE"
        if isinstance(value, (int, float)):
            return repr(value)
        if isinstance(value, (datetime, date)):
            value = value.isoformat()
        return quote_string_literal(str(value))


def get_dialect(name: str) -> Dialect:
    """
    Resolve a dialect by name or URL scheme (``postgresql+psycopg`` works).
    """
    from .postgres import PostgresDialect
    from .sqlite import SQLiteDialect

    normalized = name.lower().split("+", 1)[0]
    if normalized in ("postgres", "postgresql"):
        return PostgresDialect()
    if normalized == "sqlite":
        return SQLiteDialect()
    raise ValueError(f"Unsupported dialect '{name}'.")
