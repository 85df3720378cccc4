"""Entity capability shared by all aggregates."""

from abc import ABC, abstractmethod
from typing import Any

from catalog.core.value_objects import Uuid


def entities_equal(left: Any, right: Any) -> bool:
    """Identity-based equality for entities.

    Two entities are equal when they have the same concrete type and the same
    identity value. Attributes are never compared.

    Args:
        left: First entity
        right: Second object (may be anything)

    Returns:
        True if both are entities of the same type with equal ids
    """
    if left is right:
        return True
    if not isinstance(left, Entity) or not isinstance(right, Entity):
        return False
    return type(left) is type(right) and left.entity_id == right.entity_id


class Entity(ABC):
    """Abstract base for domain entities.

    Concrete entities expose their identity through ``entity_id`` and a
    plain-dict serialization through ``to_dict``.
    """

    @property
    @abstractmethod
    def entity_id(self) -> Uuid:
        """Identity of this entity."""
        pass

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Serialize the entity to a plain dict."""
        pass

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return entities_equal(self, other)

    def __hash__(self) -> int:
        return hash((type(self), self.entity_id))
