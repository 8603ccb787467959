"""
Field declarations for tinyorm models.

A model type declares its fields as class attributes built with
:func:`field`.  Each declaration is a :class:`FieldSpec` descriptor; when
the model class is created the descriptors are collected into the type's
field table, and every assignment to one of them is routed through the
model's single ``set_field`` entry point.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import TypeAdapter

from tinyorm.core.validation import SchemaType, get_adapter

if TYPE_CHECKING:
    from tinyorm.models.base import TinyModel

ModelT = TypeVar("ModelT", bound=type)


@dataclass
class Column:
    """Stored state of one field: its current value and its schema."""

    value: Any
    schema: SchemaType | None = None


class FieldSpec:
    """Descriptor for one declared field."""

    def __init__(self, schema: SchemaType | None = None) -> None:
        self.schema = schema
        self.name = ""
        self._adapter: TypeAdapter[Any] | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"FieldSpec(name={self.name!r}, schema={self.schema!r})"

    @property
    def adapter(self) -> TypeAdapter[Any] | None:
        """TypeAdapter for the schema, built on first use."""
        if self.schema is None:
            return None
        if self._adapter is None:
            self._adapter = get_adapter(self.schema)
        return self._adapter

    def __get__(self, instance: TinyModel | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance.get_field(self.name)

    def __set__(self, instance: TinyModel, value: Any) -> None:
        instance.set_field(self.name, value)


def field(schema: SchemaType | None = None) -> Any:
    """
    Declare a model field, optionally validated by *schema*.

    ``schema`` is anything pydantic accepts as a type, e.g.
    ``Annotated[int, Field(ge=1, le=5)]``.
    """
    return FieldSpec(schema)


def strict(cls: ModelT) -> ModelT:
    """
    Class decorator making every field assignment validate immediately.

    Equivalent to declaring the model with ``strict=True``.
    """
    cls._strict = True
    return cls
