"""
DDL and DML generation from model metadata.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..core.model import Model
from ..dialects.base import Dialect


class _CurrentTimestamp:
    """Marker for "the database clock at statement time"."""

    def __repr__(self) -> str:
        return "CURRENT_TIMESTAMP"


CURRENT_TIMESTAMP = _CurrentTimestamp()


class SchemaBuilder:
    """
    Renders statements for one model against one dialect. Columns come out
    in declaration order, nullable and without keys or defaults.
    """

    def __init__(self, dialect: Dialect) -> None:
        self.dialect = dialect

    def _table(self, model: type[Model]) -> str:
        return self.dialect.format_table(model._meta.table_name)

    def create_table_sql(self, model: type[Model]) -> str:
        columns = ", ".join(
            self.dialect.render_column_definition(f.column_name(), f) for f in model._meta.get_fields()
        )
        return f"CREATE TABLE {self._table(model)} ({columns})"

    def drop_table_sql(self, model: type[Model]) -> str:
        return f"DROP TABLE IF EXISTS {self._table(model)}"

    def select_sql(self, model: type[Model]) -> str:
        columns = ", ".join(self.dialect.quote_identifier(c) for c in model._meta.column_names())
        return f"SELECT {columns} FROM {self._table(model)}"

    def insert_sql(
        self, model: type[Model], values: Mapping[str, Any], *, inline: bool = False
    ) -> tuple[str, list[Any]]:
        """
        Build an ``INSERT`` for ``values`` keyed by field name.

        :data:`CURRENT_TIMESTAMP` renders as the dialect's clock expression.
        With ``inline=True`` every value is rendered as a SQL literal and no
        parameters are returned.
        """
        if not values:
            raise ValueError(f"No values supplied for insert into '{model._meta.table_name}'.")

        columns: list[str] = []
        rendered: list[str] = []
        params: list[Any] = []
        for name, value in values.items():
            field_obj = model._meta.get_field(name)
            columns.append(self.dialect.quote_identifier(field_obj.column_name()))
            if value is CURRENT_TIMESTAMP:
                rendered.append(self.dialect.current_timestamp_sql())
            else:
                value = None if value is None else field_obj.to_python(value)
                if inline:
                    rendered.append(self.dialect.render_literal(value))
                else:
                    rendered.append(self.dialect.parameter_placeholder())
                    params.append(self.dialect.adapt_value(value))

        sql = f"INSERT INTO {self._table(model)} ({', '.join(columns)}) VALUES ({', '.join(rendered)})"
        return sql, params
