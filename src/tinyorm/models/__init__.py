"""Model base classes."""
from tinyorm.models.base import TinyModel
from tinyorm.models.database import DatabaseModel

__all__ = ["DatabaseModel", "TinyModel"]
