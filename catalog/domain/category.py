"""Category aggregate."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from catalog.core.entity import Entity
from catalog.core.validation import (
    EntityValidationError,
    FieldRules,
    ValidatorFields,
    is_boolean,
    is_not_empty,
    is_string,
    max_length,
)
from catalog.core.value_objects import Uuid

if TYPE_CHECKING:
    from catalog.domain.category_fake_builder import CategoryFakeBuilder

NAME_MAX_LENGTH = 250


class CategoryValidator(ValidatorFields):
    """Field rules for Category."""

    rules = {
        "name": FieldRules(
            rules=(is_not_empty(), is_string(), max_length(NAME_MAX_LENGTH)),
        ),
        "description": FieldRules(rules=(is_string(),), optional=True),
        "is_active": FieldRules(rules=(is_boolean(),), optional=True),
    }


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    if value.tzinfo is not timezone.utc:
        return value.astimezone(timezone.utc)
    return value


class Category(Entity):
    """Catalog category.

    The constructor only assigns attributes; ``create`` is the validating
    factory. ``created_at`` is always held as an aware UTC datetime; naive
    values are read as UTC.

    ``change_name`` and ``change_description`` assign first and validate
    afterwards, so a rejected value stays on the instance when
    ``EntityValidationError`` propagates.
    """

    def __init__(
        self,
        name: str,
        category_id: Uuid | None = None,
        description: str | None = None,
        is_active: bool = True,
        created_at: datetime | None = None,
    ) -> None:
        self.category_id = category_id or Uuid()
        self.name = name
        self.description = description
        self.is_active = True if is_active is None else is_active
        self.created_at = as_utc(created_at) if created_at else datetime.now(timezone.utc)

    @classmethod
    def create(
        cls,
        name: str,
        description: str | None = None,
        is_active: bool = True,
    ) -> Category:
        """Build and validate a new category.

        Raises:
            EntityValidationError: If any field rule is violated
        """
        category = cls(name=name, description=description, is_active=is_active)
        cls.validate(category)
        return category

    @property
    def entity_id(self) -> Uuid:
        return self.category_id

    def change_name(self, name: str) -> None:
        self.name = name
        Category.validate(self)

    def change_description(self, description: str | None) -> None:
        self.description = description
        Category.validate(self)

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False

    @staticmethod
    def validate(entity: Category) -> None:
        """Run the category rules against ``entity``.

        Raises:
            EntityValidationError: With every violation, keyed by field
        """
        validator = CategoryValidator()
        if not validator.validate(entity):
            raise EntityValidationError(validator.errors or {})

    @staticmethod
    def fake() -> type[CategoryFakeBuilder]:
        """Entry point to the test-data builder."""
        from catalog.domain.category_fake_builder import CategoryFakeBuilder

        return CategoryFakeBuilder

    def to_dict(self) -> dict[str, Any]:
        return {
            "category_id": self.category_id.id,
            "name": self.name,
            "description": self.description,
            "is_active": self.is_active,
            "created_at": self.created_at,
        }

    def __repr__(self) -> str:
        return f"<Category(category_id='{self.category_id}', name='{self.name}')>"
