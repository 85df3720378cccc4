"""Test-data builder for Category aggregates.

Usage:
    category = Category.fake().a_category().with_name("Movie").build()
    categories = Category.fake().the_categories(3).with_name(lambda i: f"c{i}").build()

Every ``with_*`` value may be a plain value or a callable taking the index
of the object being built.
"""

from __future__ import annotations

import random
import string
from collections.abc import Callable
from datetime import datetime
from typing import Any, Generic, TypeVar

from catalog.core.value_objects import Uuid
from catalog.domain.category import NAME_MAX_LENGTH, Category

T = TypeVar("T", Category, list[Category])

PropOrFactory = Any | Callable[[int], Any]

_UNSET = object()


def _random_word(min_length: int = 3, max_length: int = 10) -> str:
    length = random.randint(min_length, max_length)
    return "".join(random.choices(string.ascii_lowercase, k=length))


def _random_sentence(words: int = 8) -> str:
    return " ".join(_random_word() for _ in range(words)).capitalize() + "."


class CategoryFakeBuilder(Generic[T]):
    """Fluent builder producing one category or a list of categories."""

    def __init__(self, count: int = 1) -> None:
        self._count = count
        self._category_id: PropOrFactory = _UNSET
        self._name: PropOrFactory = lambda _index: _random_word()
        self._description: PropOrFactory = lambda _index: _random_sentence()
        self._is_active: PropOrFactory = True
        self._created_at: PropOrFactory = _UNSET

    @classmethod
    def a_category(cls) -> CategoryFakeBuilder[Category]:
        return cls(1)

    @classmethod
    def the_categories(cls, count: int) -> CategoryFakeBuilder[list[Category]]:
        return cls(count)

    def with_category_id(self, value: PropOrFactory) -> CategoryFakeBuilder[T]:
        self._category_id = value
        return self

    def with_name(self, value: PropOrFactory) -> CategoryFakeBuilder[T]:
        self._name = value
        return self

    def with_description(self, value: PropOrFactory) -> CategoryFakeBuilder[T]:
        self._description = value
        return self

    def activate(self) -> CategoryFakeBuilder[T]:
        self._is_active = True
        return self

    def deactivate(self) -> CategoryFakeBuilder[T]:
        self._is_active = False
        return self

    def with_created_at(self, value: PropOrFactory) -> CategoryFakeBuilder[T]:
        self._created_at = value
        return self

    def with_invalid_name_too_long(self, value: str | None = None) -> CategoryFakeBuilder[T]:
        self._name = value if value is not None else "a" * (NAME_MAX_LENGTH + 1)
        return self

    def build(self) -> T:
        categories = [self._build_one(index) for index in range(self._count)]
        return categories if self._count > 1 else categories[0]  # type: ignore[return-value]

    def _build_one(self, index: int) -> Category:
        category_id = self._call_factory(self._category_id, index)
        created_at = self._call_factory(self._created_at, index)

        return Category(
            category_id=None if category_id is _UNSET else category_id,
            name=self._call_factory(self._name, index),
            description=self._call_factory(self._description, index),
            is_active=self._call_factory(self._is_active, index),
            created_at=None if created_at is _UNSET else created_at,
        )

    @staticmethod
    def _call_factory(value: PropOrFactory, index: int) -> Any:
        return value(index) if callable(value) else value

    # Read back the configured value (first object), mostly for assertions
    @property
    def category_id(self) -> Uuid:
        return self._get_value("category_id")

    @property
    def name(self) -> str:
        return self._get_value("name")

    @property
    def description(self) -> str | None:
        return self._get_value("description")

    @property
    def is_active(self) -> bool:
        return self._get_value("is_active")

    @property
    def created_at(self) -> datetime:
        return self._get_value("created_at")

    def _get_value(self, prop: str) -> Any:
        value = self._call_factory(getattr(self, f"_{prop}"), 0)
        if value is _UNSET:
            raise AttributeError(f"Property {prop} does not have a factory, use 'with' methods")
        return value
