"""Domain aggregates and their repository contracts."""

from catalog.domain.category import Category, CategoryValidator
from catalog.domain.category_repository import CategoryRepository

__all__ = ["Category", "CategoryRepository", "CategoryValidator"]
