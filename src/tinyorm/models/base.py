"""
Base class for tinyorm data models.

A model keeps one :class:`~tinyorm.core.fields.Column` per assigned field.
Values are written through :meth:`TinyModel.set_field`, which validates
them first when the model type is strict, and read back as plain data
through the object walker.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar, Self

from pydantic_core import to_json

from tinyorm.config.constants import (
    RESERVED_NAME_MSG,
    UNKNOWN_FIELD_MSG,
    UNSET_FIELD_MSG,
)
from tinyorm.config.settings import settings
from tinyorm.core.case import camel_case, change_case_deep, snake_case
from tinyorm.core.fields import Column, FieldSpec
from tinyorm.core.validation import validate
from tinyorm.core.values import HasColumns
from tinyorm.core.walker import get_object
from tinyorm.exceptions import FieldValidationError, ReservedNameError

logger = logging.getLogger(__name__)


class TinyModel(HasColumns):
    """
    Model whose declared fields carry an optional validation schema.

    Subclasses declare fields with :func:`~tinyorm.core.fields.field`::

        class User(TinyModel, strict=True):
            id = field(Annotated[int, Field(ge=1)])
            email = field(str)

    ``strict`` is resolved once, when the class is created: an explicit
    keyword wins, otherwise it is inherited from the closest model base,
    otherwise ``settings.strict_by_default`` applies.
    """

    _field_specs: ClassVar[dict[str, FieldSpec]] = {}
    _strict: ClassVar[bool] = False

    def __init_subclass__(cls, strict: bool | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        specs: dict[str, FieldSpec] = {}
        for klass in reversed(cls.__mro__):
            for name, attr in vars(klass).items():
                if isinstance(attr, FieldSpec):
                    specs[name] = attr
        cls._field_specs = specs

        if strict is not None:
            cls._strict = strict
        elif "_strict" not in vars(cls) and not any(
            issubclass(base, TinyModel) and base is not TinyModel
            for base in cls.__bases__
        ):
            cls._strict = settings.strict_by_default

    def __init__(self, model: Mapping[str, Any] | None = None, /, **kwargs: Any) -> None:
        """
        Copy every key of *model*, then of *kwargs*, onto the instance.

        Declared fields go through :meth:`set_field`; other keys become
        plain attributes unless they collide with a member of the class
        (``columns``, ``validate``...) or with the column storage, which
        raises :class:`~tinyorm.exceptions.ReservedNameError`.
        """
        for source in (model or {}, kwargs):
            for key, value in source.items():
                self._assign(key, value)

    def _assign(self, key: str, value: Any) -> None:
        if key not in self._field_specs and (
            key == "_columns" or hasattr(type(self), key)
        ):
            raise ReservedNameError(
                RESERVED_NAME_MSG.format(model=type(self).__name__, name=key),
            )
        setattr(self, key, value)

    @classmethod
    def get_instance(cls, source: Mapping[str, Any]) -> Self:
        """Build a model from *source*, normalising its keys to camelCase."""
        logger.debug("Building %s from an external source", cls.__name__)
        return cls(change_case_deep(dict(source), camel_case))

    # ------------------------------------------------------------------ #
    # Field access                                                       #
    # ------------------------------------------------------------------ #

    @property
    def columns(self) -> Mapping[str, Column]:
        """Read-only view of the stored columns."""
        return MappingProxyType(self.__dict__.get("_columns", {}))

    def _property_name(self, name: str) -> str:
        return f"{type(self).__name__}.{name}"

    def get_field(self, name: str) -> Any:
        """Return the stored value of field *name*."""
        column = self.__dict__.get("_columns", {}).get(name)
        if column is None:
            raise AttributeError(
                UNSET_FIELD_MSG.format(model=type(self).__name__, name=name),
            )
        return column.value

    def set_field(self, name: str, value: Any) -> None:
        """
        Store *value* in field *name*.

        On a strict model the value is validated first; if validation
        fails the error propagates and the previous value is kept.
        """
        spec = self._field_specs.get(name)
        if spec is None:
            raise AttributeError(
                UNKNOWN_FIELD_MSG.format(model=type(self).__name__, name=name),
            )

        if self._strict and spec.adapter is not None:
            try:
                validate(value, spec.adapter, self._property_name(name))
            except FieldValidationError as exc:
                logger.debug("Rejected assignment: %s", exc)
                raise

        columns: dict[str, Column] = self.__dict__.setdefault("_columns", {})
        column = columns.get(name)
        if column is None:
            columns[name] = Column(value=value, schema=spec.schema)
            return

        column.value = value
        if column.schema is None:
            column.schema = spec.schema

    # ------------------------------------------------------------------ #
    # Validation & serialization                                         #
    # ------------------------------------------------------------------ #

    def validate(self) -> bool:
        """
        Validate every assigned field that carries a schema.

        Fields are checked in declaration order and the first violation is
        raised as :class:`~tinyorm.exceptions.FieldValidationError`.
        """
        columns = self.__dict__.get("_columns", {})
        for name, spec in self._field_specs.items():
            column = columns.get(name)
            if column is None or column.schema is None:
                continue
            validate(column.value, spec.adapter, self._property_name(name))
        return True

    def to_object(self, snake_cased: bool = False) -> dict[str, Any]:
        """Plain-dict snapshot of the stored values."""
        obj = get_object(self.columns)
        if snake_cased:
            return change_case_deep(obj, snake_case)
        return obj

    def to_string(self, snake_cased: bool = False) -> str:
        """JSON text of :meth:`to_object`."""
        return to_json(
            self.to_object(snake_cased),
            indent=settings.json_indent,
        ).decode()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={column.value!r}" for name, column in self.columns.items()
        )
        return f"{type(self).__name__}({fields})"
