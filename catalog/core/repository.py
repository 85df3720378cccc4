"""Repository contracts shared by in-memory and ORM-backed implementations."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Generic, TypeVar

from catalog.core.entity import Entity
from catalog.core.value_objects import Uuid
from catalog.schemas.search import SearchParams, SearchResult

E = TypeVar("E", bound=Entity)
EntityId = TypeVar("EntityId", bound=Uuid)


class NotFoundError(Exception):
    """Raised when a repository cannot find the targeted entity.

    Attributes:
        entity_id: Missing identity (or identities)
        entity_class: Entity type that was expected
    """

    def __init__(
        self,
        entity_id: Uuid | str | Sequence[Uuid | str],
        entity_class: type,
    ) -> None:
        self.entity_id = entity_id
        self.entity_class = entity_class

        if isinstance(entity_id, (list, tuple)):
            ids = ", ".join(str(i) for i in entity_id)
        else:
            ids = str(entity_id)
        super().__init__(f"{entity_class.__name__} Not Found using ID {ids}")


class Repository(ABC, Generic[E, EntityId]):
    """Persistence-agnostic CRUD contract for one entity type."""

    @abstractmethod
    async def insert(self, entity: E) -> None:
        pass

    @abstractmethod
    async def bulk_insert(self, entities: list[E]) -> None:
        pass

    @abstractmethod
    async def update(self, entity: E) -> None:
        """Replace the stored entity with the same identity.

        Raises:
            NotFoundError: If no entity with that identity is stored
        """
        pass

    @abstractmethod
    async def delete(self, entity_id: EntityId) -> None:
        """Remove the entity with ``entity_id``.

        Raises:
            NotFoundError: If no entity with that identity is stored
        """
        pass

    @abstractmethod
    async def find_by_id(self, entity_id: EntityId) -> E | None:
        pass

    @abstractmethod
    async def find_all(self) -> list[E]:
        pass

    @abstractmethod
    def get_entity(self) -> type[E]:
        """Entity class managed by this repository."""
        pass


class SearchableRepository(Repository[E, EntityId]):
    """Repository with a filter / sort / paginate query contract.

    ``sortable_fields`` is the allow-list of attribute names accepted as a
    sort key; anything else is ignored.
    """

    sortable_fields: tuple[str, ...] = ()

    @abstractmethod
    async def search(self, props: SearchParams) -> SearchResult[E]:
        pass
