"""Repository contract for Category aggregates."""

from catalog.core.repository import SearchableRepository
from catalog.core.value_objects import Uuid
from catalog.domain.category import Category


class CategoryRepository(SearchableRepository[Category, Uuid]):
    """Searchable category storage.

    Filter terms match the category name case-insensitively. Without an
    allow-listed sort field, results are ordered newest first.
    """

    sortable_fields: tuple[str, ...] = ("name", "created_at")

    def get_entity(self) -> type[Category]:
        return Category
