"""Search input and output value objects for searchable repositories."""

import math
from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from catalog.config import settings

T = TypeVar("T")

SortDirection = Literal["asc", "desc"]


def _positive_int_or(value: Any, default: int) -> int:
    """Coerce ``value`` to a positive integer, falling back to ``default``."""
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if number <= 0 or not number.is_integer():
        return default
    return int(number)


class SearchParams(BaseModel):
    """Immutable search request.

    Invalid values never raise; they are normalised instead:
    - page / per_page fall back to their defaults when not positive integers
    - empty sort / filter become None
    - sort_dir is None without a sort, otherwise "asc" unless "desc" is given
    """

    page: int = Field(default=1, description="1-indexed page number")
    per_page: int = Field(
        default_factory=lambda: settings.default_per_page,
        description="Items per page",
    )
    sort: str | None = Field(default=None, description="Field to sort by")
    sort_dir: SortDirection | None = Field(default=None, description="Sort direction")
    filter: str | None = Field(default=None, description="Repository-specific filter term")

    model_config = {"frozen": True, "validate_default": True}

    @field_validator("page", mode="before")
    @classmethod
    def normalize_page(cls, v: Any) -> int:
        return _positive_int_or(v, 1)

    @field_validator("per_page", mode="before")
    @classmethod
    def normalize_per_page(cls, v: Any) -> int:
        return _positive_int_or(v, settings.default_per_page)

    @field_validator("sort", "filter", mode="before")
    @classmethod
    def normalize_optional_text(cls, v: Any) -> str | None:
        if v is None or v == "":
            return None
        return str(v)

    @field_validator("sort_dir", mode="before")
    @classmethod
    def normalize_sort_dir(cls, v: Any, info: ValidationInfo) -> str | None:
        """Depends on ``sort``, which is validated first."""
        if info.data.get("sort") is None:
            return None
        direction = str(v).lower() if v is not None else ""
        return direction if direction in ("asc", "desc") else "asc"


@dataclass(frozen=True)
class SearchResult(Generic[T]):
    """One page of search results.

    Attributes:
        items: Entities of the requested page
        total: Number of matches before pagination
        current_page: Page that was requested
        per_page: Page size that was requested
        last_page: ceil(total / per_page)
    """

    items: list[T]
    total: int
    current_page: int
    per_page: int
    last_page: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "last_page", math.ceil(self.total / self.per_page))

    def to_dict(self, force_entity: bool = False) -> dict[str, Any]:
        """Serialize the result.

        Args:
            force_entity: Serialize each item through its ``to_dict``

        Returns:
            Dict with items and page metadata
        """
        return {
            "items": [item.to_dict() for item in self.items] if force_entity else self.items,
            "total": self.total,
            "current_page": self.current_page,
            "per_page": self.per_page,
            "last_page": self.last_page,
        }
