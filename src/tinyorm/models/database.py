"""Models that round-trip through snake_case row oriented stores."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Self

from tinyorm.config.constants import ALREADY_INITIALISED_MSG
from tinyorm.core.case import camel_case
from tinyorm.exceptions import ModelAlreadyInitialisedError
from tinyorm.models.base import TinyModel

logger = logging.getLogger(__name__)


class DatabaseModel(TinyModel):
    """TinyModel that can be loaded from, and dumped to, database rows."""

    @classmethod
    def from_db(cls, row: Mapping[str, Any]) -> Self:
        """Build a blank instance and populate it from *row*."""
        instance = cls()
        instance.init_from_db(row)
        return instance

    def init_from_db(self, row: Mapping[str, Any], override: bool = False) -> None:
        """
        Assign every column of *row* onto the model under its camelCase name.

        A model that already holds values refuses to be re-initialised
        unless ``override`` is true.
        """
        if self.columns:
            if not override:
                raise ModelAlreadyInitialisedError(ALREADY_INITIALISED_MSG)
            logger.debug("Overriding the values of %s from a row", type(self).__name__)

        for key, value in row.items():
            self._assign(camel_case(key), value)

    def to_db_object(self) -> dict[str, Any]:
        """snake_case snapshot ready to be written as a row."""
        return self.to_object(snake_cased=True)

    def to_db_string(self) -> str:
        """JSON text of :meth:`to_db_object`."""
        return self.to_string(snake_cased=True)
