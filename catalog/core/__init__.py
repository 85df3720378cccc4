"""Core module - Entities, identity, validation and repository contracts."""

from catalog.core.entity import Entity, entities_equal
from catalog.core.repository import NotFoundError, Repository, SearchableRepository
from catalog.core.validation import EntityValidationError, ValidatorFields
from catalog.core.value_objects import InvalidUuidError, Uuid

__all__ = [
    "Entity",
    "entities_equal",
    "EntityValidationError",
    "InvalidUuidError",
    "NotFoundError",
    "Repository",
    "SearchableRepository",
    "Uuid",
    "ValidatorFields",
]
