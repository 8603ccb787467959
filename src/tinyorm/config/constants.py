"""
Package-wide constants.

Everything *static* that the field interceptor, the walker and the case
converter share lives here so that key styles and error messages have a
single source of truth.

**IMPORTANT:** the ``KeyCase`` values are accepted as plain strings by
``convert_keys``; add new members instead of renaming existing ones.
"""

from enum import StrEnum

# ======================================================================
# KEY CASING
# ======================================================================


class KeyCase(StrEnum):
    """
    Key styles understood by :func:`tinyorm.core.case.convert_keys`.

    * ``CAMEL`` is the attribute style used on models (``authorId``).
    * ``SNAKE`` is the column style used by row oriented stores
      (``author_id``).
    """

    CAMEL = "camel"
    SNAKE = "snake"


# ======================================================================
# VALIDATION
# ======================================================================

# Placeholder used when validate() is called without a property name
DEFAULT_PROPERTY_NAME = "value"

# Separator between several errors reported for the same value
ERROR_DETAIL_SEPARATOR = "; "


# ======================================================================
# ERROR MESSAGES
# ======================================================================

ALREADY_INITIALISED_MSG = "Model was already initialised in the constructor."
UNKNOWN_FIELD_MSG = "{model} has no field named {name!r}"
UNSET_FIELD_MSG = "{model}.{name} has not been assigned yet"
RESERVED_NAME_MSG = (
    "{model} cannot store input key {name!r}: the name is reserved by the model"
)
