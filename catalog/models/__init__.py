"""SQLAlchemy models for the catalog."""

from catalog.models.base import Base, CreatedAtMixin
from catalog.models.category import CategoryModel

__all__ = [
    "Base",
    "CreatedAtMixin",
    "CategoryModel",
]
