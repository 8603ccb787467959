"""Errors raised by tinyorm."""

from __future__ import annotations

from typing import Any


class TinyORMError(Exception):
    """Base class for every error raised by tinyorm."""


class FieldValidationError(TinyORMError, ValueError):
    """
    A value violated the schema of a field.

    The message always starts with the property name
    (``"User.id Input should be less than or equal to 5"``) so callers
    can tell which field failed without parsing the error list.
    """

    def __init__(
        self,
        message: str,
        *,
        property_name: str,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.property_name = property_name
        self.errors = errors or []


class ModelAlreadyInitialisedError(TinyORMError, RuntimeError):
    """A populated model was re-initialised without ``override=True``."""


class ReservedNameError(TinyORMError, AttributeError):
    """An input key collides with a member of the model class."""
