"""
Tagged variants for the values a column can hold.

The walker never inspects raw values directly: ``wrap_value`` classifies
a value once and the walker dispatches on the resulting variant, so every
shape (scalar, nested model, sequence, mapping) is handled explicitly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

if TYPE_CHECKING:
    from collections.abc import Mapping as MappingABC

    from tinyorm.core.fields import Column


class HasColumns(ABC):
    """
    Marker base for objects the walker treats as nested models.

    Anything deriving from it exposes its column map as ``columns``.
    """

    @property
    @abstractmethod
    def columns(self) -> MappingABC[str, Column]:
        """Column map of the model."""


@dataclass(frozen=True, slots=True)
class Scalar:
    """Leaf value, emitted verbatim."""

    value: Any


@dataclass(frozen=True, slots=True)
class Nested:
    """A nested model; unwrapped through its column map."""

    model: HasColumns


@dataclass(frozen=True, slots=True)
class Sequence:
    """A list or tuple of values; the container type is preserved."""

    items: tuple[Value, ...]
    container: type


@dataclass(frozen=True, slots=True)
class Mapping:
    """A plain dict whose values may themselves be models or containers."""

    items: tuple[tuple[Any, Value], ...]


Value = Scalar | Nested | Sequence | Mapping


def wrap_value(raw: Any) -> Value:
    """Classify *raw* into one of the ``Value`` variants."""
    if isinstance(raw, HasColumns):
        return Nested(raw)
    if isinstance(raw, BaseModel):
        # dumped to a plain dict, then classified like any other mapping
        return wrap_value(raw.model_dump())
    if isinstance(raw, (list, tuple)):
        return Sequence(
            items=tuple(wrap_value(item) for item in raw),
            container=tuple if isinstance(raw, tuple) else list,
        )
    if isinstance(raw, dict):
        return Mapping(items=tuple((key, wrap_value(val)) for key, val in raw.items()))
    return Scalar(raw)
