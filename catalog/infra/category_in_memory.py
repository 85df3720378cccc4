"""In-memory Category repository."""

from catalog.core.value_objects import Uuid
from catalog.domain.category import Category
from catalog.domain.category_repository import CategoryRepository
from catalog.infra.in_memory import InMemorySearchableRepository
from catalog.schemas.search import SortDirection


class CategoryInMemoryRepository(InMemorySearchableRepository[Category, Uuid], CategoryRepository):
    """Category repository over a plain list, used for tests and local runs."""

    def _filter_predicate(self, item: Category, filter_term: str) -> bool:
        return filter_term.lower() in item.name.lower()

    def _apply_sort(
        self,
        items: list[Category],
        sort: str | None,
        sort_dir: SortDirection | None,
    ) -> list[Category]:
        # Newest first unless an allow-listed field is requested
        if sort and sort in self.sortable_fields:
            return super()._apply_sort(items, sort, sort_dir)
        return super()._apply_sort(items, "created_at", "desc")
