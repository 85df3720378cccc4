"""Conversion between the Category aggregate and CategoryModel rows."""

from catalog.core.value_objects import Uuid
from catalog.domain.category import Category
from catalog.models.category import CategoryModel


class CategoryModelMapper:
    """Bidirectional aggregate/row mapping.

    Timestamps leave as aware UTC values; naive values read back (SQLite)
    are taken as UTC by the aggregate constructor.

    ``to_entity(to_model(category))`` serializes identically to ``category``.
    """

    @staticmethod
    def to_model(entity: Category) -> CategoryModel:
        return CategoryModel(
            category_id=entity.category_id.id,
            name=entity.name,
            description=entity.description,
            is_active=entity.is_active,
            created_at=entity.created_at,
        )

    @staticmethod
    def to_entity(model: CategoryModel) -> Category:
        """Rehydrate and re-validate a category.

        Raises:
            EntityValidationError: If the stored row breaks the category rules
            InvalidUuidError: If the stored identity is malformed
        """
        category = Category(
            category_id=Uuid(model.category_id),
            name=model.name,
            description=model.description,
            is_active=model.is_active,
            created_at=model.created_at,
        )
        Category.validate(category)
        return category

