"""
Deep key-case conversion for plain nested objects.

Models use camelCase attribute names while row oriented stores use
snake_case columns; these helpers relabel every key of a dict / list
tree without touching the values.

``camel_case`` and ``snake_case`` are exact inverses: only an underscore
followed by a lowercase letter maps to an uppercase letter, so keys such
as ``line_1`` or ``address_2_text`` survive a round trip unchanged.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from tinyorm.config.constants import KeyCase

KeyTransform = Callable[[str], str]

_UNDERSCORE_LOWER_RE = re.compile(r"_([a-z])")
_UPPER_RE = re.compile(r"([A-Z])")


def camel_case(key: str) -> str:
    """``author_id`` -> ``authorId``; ``line_1`` stays ``line_1``."""
    return _UNDERSCORE_LOWER_RE.sub(lambda m: m.group(1).upper(), key)


def snake_case(key: str) -> str:
    """``authorId`` -> ``author_id``; ``addressLine2`` -> ``address_line2``."""
    return _UPPER_RE.sub(lambda m: f"_{m.group(1).lower()}", key)


CASE_TRANSFORMS: dict[KeyCase, KeyTransform] = {
    KeyCase.CAMEL: camel_case,
    KeyCase.SNAKE: snake_case,
}


def change_case_deep(obj: Any, fn: KeyTransform) -> Any:
    """
    Return a deep copy of *obj* with every string key passed through *fn*.

    Dicts are rebuilt key by key, lists and tuples element by element
    (keeping their container type) and anything else is returned as is.
    The input is never mutated.
    """
    if isinstance(obj, dict):
        return {
            (fn(key) if isinstance(key, str) else key): change_case_deep(value, fn)
            for key, value in obj.items()
        }
    if isinstance(obj, (list, tuple)):
        container = tuple if isinstance(obj, tuple) else list
        return container(change_case_deep(item, fn) for item in obj)
    return obj


def convert_keys(obj: Any, case: KeyCase | str) -> Any:
    """Deep-convert the keys of *obj* to the given :class:`KeyCase`."""
    return change_case_deep(obj, CASE_TRANSFORMS[KeyCase(case)])
