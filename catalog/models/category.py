"""CategoryModel - relational row for the Category aggregate."""

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from catalog.domain.category import NAME_MAX_LENGTH
from catalog.models.base import Base, CreatedAtMixin


class CategoryModel(Base, CreatedAtMixin):
    """Category row.

    Columns mirror the aggregate attributes one to one; the identity is the
    canonical UUID string.
    """

    __tablename__ = "categories"

    category_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        return f"<CategoryModel(category_id='{self.category_id}', name='{self.name}')>"
