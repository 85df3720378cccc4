"""In-memory repositories.

Entities are kept in a process-local list owned by the repository. All
operations are coroutines so the in-memory and ORM-backed repositories are
interchangeable; nothing here ever suspends.
"""

from abc import abstractmethod
from typing import Any

from catalog.core.repository import (
    E,
    EntityId,
    NotFoundError,
    Repository,
    SearchableRepository,
)
from catalog.infra.logging import get_logger
from catalog.schemas.search import SearchParams, SearchResult, SortDirection

logger = get_logger(__name__)


class InMemoryRepository(Repository[E, EntityId]):
    """List-backed repository.

    Insertion order is preserved. Identity uniqueness is not enforced here,
    inserting the same identity twice is a caller error.
    """

    def __init__(self) -> None:
        self.items: list[E] = []

    async def insert(self, entity: E) -> None:
        self.items.append(entity)

    async def bulk_insert(self, entities: list[E]) -> None:
        self.items.extend(entities)

    async def update(self, entity: E) -> None:
        index = self._index_of(entity.entity_id)
        if index is None:
            raise NotFoundError(entity.entity_id, self.get_entity())
        self.items[index] = entity

    async def delete(self, entity_id: EntityId) -> None:
        index = self._index_of(entity_id)
        if index is None:
            raise NotFoundError(entity_id, self.get_entity())
        del self.items[index]

    async def find_by_id(self, entity_id: EntityId) -> E | None:
        index = self._index_of(entity_id)
        return None if index is None else self.items[index]

    async def find_all(self) -> list[E]:
        return list(self.items)

    def _index_of(self, entity_id: EntityId) -> int | None:
        for index, item in enumerate(self.items):
            if item.entity_id == entity_id:
                return index
        return None


class InMemorySearchableRepository(InMemoryRepository[E, EntityId], SearchableRepository[E, EntityId]):
    """In-memory repository with a filter -> sort -> paginate pipeline.

    Concrete repositories supply ``sortable_fields`` and
    ``_filter_predicate``; they may override ``_apply_sort`` to declare a
    default ordering.
    """

    async def search(self, props: SearchParams) -> SearchResult[E]:
        """Run the search pipeline over all stored items.

        ``total`` counts the filtered items before pagination.
        """
        items_filtered = await self._apply_filter(self.items, props.filter)
        items_sorted = self._apply_sort(items_filtered, props.sort, props.sort_dir)
        items_paginated = self._apply_paginate(items_sorted, props.page, props.per_page)

        logger.debug(
            "In-memory search",
            entity=self.get_entity().__name__,
            filter=props.filter,
            sort=props.sort,
            sort_dir=props.sort_dir,
            page=props.page,
            per_page=props.per_page,
            total=len(items_filtered),
        )

        return SearchResult(
            items=items_paginated,
            total=len(items_filtered),
            current_page=props.page,
            per_page=props.per_page,
        )

    async def _apply_filter(self, items: list[E], filter_term: str | None) -> list[E]:
        """Keep items matching ``filter_term``, in their original order.

        Without a term the input list itself is returned and the predicate
        is never evaluated.
        """
        if not filter_term:
            return items
        return [item for item in items if self._filter_predicate(item, filter_term)]

    @abstractmethod
    def _filter_predicate(self, item: E, filter_term: str) -> bool:
        """Whether ``item`` matches a non-empty ``filter_term``."""
        pass

    def _apply_sort(
        self,
        items: list[E],
        sort: str | None,
        sort_dir: SortDirection | None,
    ) -> list[E]:
        """Stable sort on an allow-listed field.

        Unknown or missing fields leave the order unchanged. ``desc``
        reverses the comparison; ties keep their input order either way.
        """
        if not sort or sort not in self.sortable_fields:
            return items
        return sorted(
            items,
            key=lambda item: self._sort_key(item, sort),
            reverse=sort_dir == "desc",
        )

    def _sort_key(self, item: E, field: str) -> Any:
        return getattr(item, field)

    def _apply_paginate(self, items: list[E], page: int, per_page: int) -> list[E]:
        start = (page - 1) * per_page
        return items[start:start + per_page]
