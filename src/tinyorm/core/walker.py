"""Rebuild plain objects from a model's column map."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tinyorm.core.values import Mapping, Nested, Scalar, Sequence, Value, wrap_value

if TYPE_CHECKING:
    from collections.abc import Mapping as MappingABC

    from tinyorm.core.fields import Column


def unwrap(value: Value) -> Any:
    """Turn a classified value back into plain data."""
    match value:
        case Scalar(value=raw):
            return raw
        case Nested(model=model):
            return get_object(model.columns)
        case Sequence(items=items, container=container):
            return container(unwrap(item) for item in items)
        case Mapping(items=items):
            return {key: unwrap(item) for key, item in items}
        case _:
            msg = f"Unsupported value variant: {value!r}"
            raise TypeError(msg)


def get_object(columns: MappingABC[str, Column]) -> dict[str, Any]:
    """
    Build a plain dict from *columns*.

    Only the stored values survive: schemas are dropped, nested models are
    unwrapped through their own columns and every list / tuple / dict is
    rebuilt, so mutating the model afterwards never leaks into the result.
    Falsy values such as ``0``, ``False`` or ``""`` are kept as they are.
    """
    return {name: unwrap(wrap_value(column.value)) for name, column in columns.items()}
