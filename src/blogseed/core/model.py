"""
Declarative models: a class body of fields becomes an ordered column list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Type, TypeVar

from ..utils import camel_to_snake
from .fields import Field


class ModelConfigurationError(Exception):
    """Raised when a model class is misconfigured."""


@dataclass
class ModelOptions:
    model: Type["Model"]
    table_name: str
    fields: dict[str, Field] = field(default_factory=dict)

    def get_field(self, name: str) -> Field:
        try:
            return self.fields[name]
        except KeyError:
            raise KeyError(f"{self.model.__name__} has no field {name!r}") from None

    def get_fields(self) -> Iterable[Field]:
        return self.fields.values()

    def column_names(self) -> list[str]:
        return [f.column_name() for f in self.fields.values()]


TModel = TypeVar("TModel", bound="Model")


class ModelMeta(type):
    """
    Collects declared fields in declaration order. No implicit ``id`` is
    added; the table name comes from ``Meta.table`` or the class name.
    """

    def __new__(mcls, name: str, bases: tuple[type, ...], attrs: dict[str, Any]) -> "ModelMeta":
        cls = super().__new__(mcls, name, bases, attrs)
        if not bases:
            return cls

        declared = sorted(
            ((key, value) for key, value in attrs.items() if isinstance(value, Field)),
            key=lambda item: item[1].creation_counter,
        )
        if not declared:
            raise ModelConfigurationError(f"Model '{name}' declares no fields.")

        meta = attrs.get("Meta")
        options = ModelOptions(model=cls, table_name=getattr(meta, "table", None) or camel_to_snake(name))
        for attr_name, field_obj in declared:
            field_obj.bind(cls, attr_name)
            options.fields[attr_name] = field_obj
        cls._meta = options
        return cls


class Model(metaclass=ModelMeta):
    _meta: ModelOptions

    def __init__(self, **values: Any) -> None:
        self._field_values: dict[str, Any] = {}
        unknown = sorted(set(values) - set(self._meta.fields))
        if unknown:
            raise TypeError(f"{type(self).__name__} got unexpected field(s): {', '.join(unknown)}")
        for name, value in values.items():
            setattr(self, name, value)

    def __repr__(self) -> str:
        shown = ", ".join(f"{key}={value!r}" for key, value in self.to_dict().items())
        return f"<{type(self).__name__} {shown}>"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> dict[str, Any]:
        return {name: self._field_values.get(name) for name in self._meta.fields}

    @classmethod
    def from_row(cls: Type[TModel], row: Mapping[str, Any] | Iterable[Any]) -> TModel:
        """
        Build an instance from a stored row, keyed by column name or in
        column order. Values go through ``Field.from_db`` and skip the
        assignment checks, so rows the model would not accept still load.
        """
        fields = list(cls._meta.get_fields())
        if isinstance(row, Mapping):
            raw = [row[f.column_name()] for f in fields]
        else:
            raw = list(row)
            if len(raw) != len(fields):
                raise ValueError(f"{cls.__name__} expects {len(fields)} columns, row has {len(raw)}")
        instance = cls.__new__(cls)
        instance._field_values = {
            f.require_name(): (None if value is None else f.from_db(value)) for f, value in zip(fields, raw)
        }
        return instance
