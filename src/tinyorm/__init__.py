"""Public API of tinyorm."""
import logging

from .core.case import camel_case, change_case_deep, convert_keys, snake_case
from .core.fields import Column, FieldSpec, field, strict
from .core.validation import validate
from .core.walker import get_object
from .exceptions import (
    FieldValidationError,
    ModelAlreadyInitialisedError,
    ReservedNameError,
    TinyORMError,
)
from .models import DatabaseModel, TinyModel

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Column",
    "DatabaseModel",
    "FieldSpec",
    "FieldValidationError",
    "ModelAlreadyInitialisedError",
    "ReservedNameError",
    "TinyModel",
    "TinyORMError",
    "camel_case",
    "change_case_deep",
    "convert_keys",
    "field",
    "get_object",
    "snake_case",
    "strict",
    "validate",
]
