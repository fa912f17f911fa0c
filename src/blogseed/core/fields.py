"""
Column descriptors for blogseed models.

Every column is nullable and carries no key, uniqueness or default; a field
only knows its logical type and how to coerce values. ``to_python`` guards
assignment, ``from_db`` converts values read back from a driver.
"""

from __future__ import annotations

from datetime import datetime, timezone
from itertools import count
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .model import Model


class FieldError(Exception):
    """A field was declared with invalid arguments or used before binding."""


_declaration_order = count()


class Field:
    """
    Data descriptor storing its value in ``instance._field_values``.

    ``type_key`` names the logical column type each dialect maps to DDL.
    """

    type_key = ""

    def __init__(self, *, db_column: str | None = None) -> None:
        self.db_column = db_column
        self.name: str | None = None
        self.model: type["Model"] | None = None
        self.creation_counter = next(_declaration_order)

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance._field_values.get(self.require_name())

    def __set__(self, instance: Any, value: Any) -> None:
        instance._field_values[self.require_name()] = None if value is None else self.to_python(value)

    def bind(self, model: type["Model"], name: str) -> None:
        self.model, self.name = model, name
        setattr(model, name, self)

    def require_name(self) -> str:
        if self.name is None:
            raise FieldError(f"{type(self).__name__} is not attached to a model.")
        return self.name

    def column_name(self) -> str:
        return self.db_column or self.require_name()

    def to_python(self, value: Any) -> Any:
        return value

    def from_db(self, value: Any) -> Any:
        return value


class StringField(Field):
    type_key = "varchar"

    def __init__(self, *, max_length: int = 255, **kwargs: Any) -> None:
        if max_length <= 0:
            raise FieldError("max_length must be a positive integer.")
        super().__init__(**kwargs)
        self.max_length = max_length

    def to_python(self, value: Any) -> str:
        text = str(value)
        if len(text) > self.max_length:
            raise ValueError(
                f"{self.require_name()!r} is limited to {self.max_length} characters, got {len(text)}"
            )
        return text


class TextField(Field):
    type_key = "text"

    def to_python(self, value: Any) -> str:
        return str(value)


def _parse_timestamp(text: str) -> datetime:
    # SQLite's datetime('now') yields "YYYY-MM-DD HH:MM:SS"; fromisoformat
    # reads that as well as the offset form the dialect writes.
    return datetime.fromisoformat(text.strip())


class DateTimeField(Field):
    """
    ``timezone=True`` maps to a zone-aware column. Assigned values must then
    be aware; naive values read back from storage are taken as UTC.
    """

    def __init__(self, *, timezone: bool = True, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.timezone = timezone

    @property
    def type_key(self) -> str:  # type: ignore[override]
        return "datetime_tz" if self.timezone else "datetime"

    def to_python(self, value: Any) -> datetime:
        if isinstance(value, str):
            try:
                value = _parse_timestamp(value)
            except ValueError as exc:
                raise ValueError(f"{self.require_name()!r} got unparseable timestamp {value!r}") from exc
        if not isinstance(value, datetime):
            raise ValueError(f"{self.require_name()!r} expects a datetime, got {value!r}")
        if self.timezone and value.tzinfo is None:
            raise ValueError(f"{self.require_name()!r} needs a timezone-aware datetime")
        return value

    def from_db(self, value: Any) -> Any:
        if isinstance(value, str):
            try:
                value = _parse_timestamp(value)
            except ValueError:
                # Text written by other tools is shown as stored.
                return value
        if self.timezone and isinstance(value, datetime) and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value
