"""
Schema validation for single field values.

A *schema* is anything pydantic can build a ``TypeAdapter`` for: a plain
type (``int``), an ``Annotated`` type carrying ``pydantic.Field``
constraints, a ``BaseModel`` subclass, or a container / union of those.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError

from tinyorm.config.constants import DEFAULT_PROPERTY_NAME, ERROR_DETAIL_SEPARATOR
from tinyorm.exceptions import FieldValidationError

SchemaType = Any


@lru_cache(maxsize=256)
def _cached_adapter(schema: SchemaType) -> TypeAdapter[Any]:
    return TypeAdapter(schema)


def get_adapter(schema: SchemaType) -> TypeAdapter[Any]:
    """Return a (cached when hashable) TypeAdapter for *schema*."""
    if isinstance(schema, TypeAdapter):
        return schema
    try:
        return _cached_adapter(schema)
    except TypeError:
        # unhashable schema, e.g. an Annotated carrying a dict
        return TypeAdapter(schema)


def render_errors(errors: list[dict[str, Any]]) -> str:
    """
    Flatten pydantic's error list into one line.

    Each error becomes ``"<loc> <msg>"``; errors on the value itself
    (empty ``loc``) are rendered with the generic ``"value"`` subject so
    the caller can substitute the real property name.
    """
    parts = []
    for err in errors:
        loc = ".".join(str(part) for part in err.get("loc", ()))
        subject = f'"{DEFAULT_PROPERTY_NAME}"'
        if loc:
            subject = f"{subject}.{loc}"
        parts.append(f"{subject} {err['msg']}")
    return ERROR_DETAIL_SEPARATOR.join(parts)


def validate(
    value: Any,
    schema: SchemaType,
    property_name: str = DEFAULT_PROPERTY_NAME,
) -> None:
    """
    Validate *value* against *schema*.

    On failure a :class:`FieldValidationError` is raised whose message is
    the rendered pydantic error with the ``"value"`` placeholder replaced
    by *property_name*, e.g. ``"User.id Input should be less than or
    equal to 5"``.  The value itself is never modified.
    """
    adapter = get_adapter(schema)
    try:
        adapter.validate_python(value)
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        message = render_errors(errors).replace(
            f'"{DEFAULT_PROPERTY_NAME}"', property_name,
        )
        raise FieldValidationError(
            message,
            property_name=property_name,
            errors=errors,
        ) from exc
