"""Tests for the InMemorySearchableRepository pipeline."""

from typing import Any
from unittest.mock import patch

import pytest

from catalog.core.entity import Entity
from catalog.core.value_objects import Uuid
from catalog.infra.in_memory import InMemorySearchableRepository
from catalog.schemas.search import SearchParams, SearchResult


class StubEntity(Entity):
    def __init__(self, name: str, price: float, entity_id: Uuid | None = None) -> None:
        self._entity_id = entity_id or Uuid()
        self.name = name
        self.price = price

    @property
    def entity_id(self) -> Uuid:
        return self._entity_id

    def to_dict(self) -> dict[str, Any]:
        return {"entity_id": self._entity_id.id, "name": self.name, "price": self.price}


class StubInMemorySearchableRepository(InMemorySearchableRepository[StubEntity, Uuid]):
    sortable_fields = ("name",)

    def _filter_predicate(self, item: StubEntity, filter_term: str) -> bool:
        return filter_term.lower() in item.name.lower() or str(item.price) == filter_term

    def get_entity(self) -> type[StubEntity]:
        return StubEntity


@pytest.fixture
def repo() -> StubInMemorySearchableRepository:
    return StubInMemorySearchableRepository()


class TestApplyFilter:
    """Tests for the filter stage."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("filter_term", [None, ""])
    async def test_empty_filter_returns_same_list(self, repo, filter_term):
        """No filter term: the input list itself, predicate never evaluated."""
        items = [StubEntity(name="Test 1", price=10), StubEntity(name="Test 2", price=20)]

        with patch.object(repo, "_filter_predicate", wraps=repo._filter_predicate) as spy:
            result = await repo._apply_filter(items, filter_term)

        assert result is items
        spy.assert_not_called()

    @pytest.mark.asyncio
    async def test_filters_with_predicate(self, repo):
        items = [
            StubEntity(name="TEST", price=10),
            StubEntity(name="test", price=20),
            StubEntity(name="fake", price=30),
        ]

        with patch.object(repo, "_filter_predicate", wraps=repo._filter_predicate) as spy:
            filtered = await repo._apply_filter(items, "TEST")
            assert filtered == [items[0], items[1]]
            assert spy.call_count == 3

            filtered = await repo._apply_filter(items, "20")
            assert filtered == [items[1]]

            filtered = await repo._apply_filter(items, "no-filter")
            assert filtered == []
            assert spy.call_count == 9


class TestApplySort:
    """Tests for the sort stage."""

    def test_no_sort_field_keeps_order(self, repo):
        items = [StubEntity(name="b", price=10), StubEntity(name="a", price=20)]

        assert repo._apply_sort(items, None, None) == items

    def test_field_outside_allow_list_keeps_order(self, repo):
        items = [StubEntity(name="b", price=20), StubEntity(name="a", price=10)]

        assert repo._apply_sort(items, "price", "asc") == items

    def test_sorts_by_allowed_field(self, repo):
        items = [
            StubEntity(name="b", price=10),
            StubEntity(name="a", price=20),
            StubEntity(name="c", price=15),
        ]

        assert repo._apply_sort(items, "name", "asc") == [items[1], items[0], items[2]]
        assert repo._apply_sort(items, "name", "desc") == [items[2], items[0], items[1]]

    def test_sort_does_not_mutate_input(self, repo):
        items = [StubEntity(name="b", price=10), StubEntity(name="a", price=20)]
        original = list(items)

        repo._apply_sort(items, "name", "asc")

        assert items == original

    @pytest.mark.parametrize("sort_dir", ["asc", "desc"])
    def test_sort_is_stable(self, repo, sort_dir):
        """Equal keys keep their relative input order in both directions."""
        items = [
            StubEntity(name="x", price=1),
            StubEntity(name="a", price=2),
            StubEntity(name="x", price=3),
            StubEntity(name="x", price=4),
        ]

        ties = [e.price for e in repo._apply_sort(items, "name", sort_dir) if e.name == "x"]

        assert ties == [1, 3, 4]


class TestApplyPaginate:
    """Tests for the paginate stage."""

    def test_paginates(self, repo):
        items = [StubEntity(name=f"Test {i}", price=i) for i in range(1, 6)]

        assert repo._apply_paginate(items, 1, 2) == [items[0], items[1]]
        assert repo._apply_paginate(items, 2, 2) == [items[2], items[3]]
        assert repo._apply_paginate(items, 3, 2) == [items[4]]
        assert repo._apply_paginate(items, 4, 2) == []

    @pytest.mark.parametrize(("size", "per_page"), [(0, 3), (1, 1), (7, 3), (9, 3), (10, 4)])
    def test_pages_reconstruct_sequence(self, repo, size, per_page):
        items = [StubEntity(name=str(i), price=i) for i in range(size)]
        last_page = -(-size // per_page)

        pages = [repo._apply_paginate(items, page, per_page) for page in range(1, last_page + 1)]

        assert [item for page in pages for item in page] == items


class TestSearch:
    """Tests for the composed search pipeline."""

    @pytest.mark.asyncio
    async def test_only_paginates_with_default_params(self, repo):
        entity = StubEntity(name="Test 1", price=10)
        repo.items = [entity] * 16

        result = await repo.search(SearchParams())

        assert result == SearchResult(
            items=[entity] * 15,
            total=16,
            current_page=1,
            per_page=15,
        )
        assert result.last_page == 2

    @pytest.mark.asyncio
    async def test_paginates_and_filters(self, repo):
        items = [
            StubEntity(name="Test", price=10),
            StubEntity(name="a", price=20),
            StubEntity(name="TeST", price=30),
            StubEntity(name="b", price=40),
            StubEntity(name="TEST", price=50),
        ]
        repo.items = items

        result = await repo.search(SearchParams(page=1, per_page=2, filter="TEST"))
        assert result == SearchResult(items=[items[0], items[2]], total=3, current_page=1, per_page=2)

        result = await repo.search(SearchParams(page=2, per_page=2, filter="TEST"))
        assert result == SearchResult(items=[items[4]], total=3, current_page=2, per_page=2)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("params", "expected_names"),
        [
            (SearchParams(page=1, per_page=2, sort="name"), ["a", "b"]),
            (SearchParams(page=2, per_page=2, sort="name"), ["c", "d"]),
            (SearchParams(page=1, per_page=2, sort="name", sort_dir="desc"), ["e", "d"]),
            (SearchParams(page=2, per_page=2, sort="name", sort_dir="desc"), ["c", "b"]),
        ],
    )
    async def test_paginates_and_sorts(self, repo, params, expected_names):
        repo.items = [StubEntity(name=name, price=5) for name in ["b", "a", "d", "e", "c"]]

        result = await repo.search(params)

        assert [e.name for e in result.items] == expected_names
        assert result.total == 5
        assert result.current_page == params.page
        assert result.per_page == 2

    @pytest.mark.asyncio
    async def test_filters_sorts_and_paginates(self, repo):
        items = [
            StubEntity(name="test", price=5),
            StubEntity(name="a", price=5),
            StubEntity(name="TEST", price=5),
            StubEntity(name="e", price=5),
            StubEntity(name="TeSt", price=5),
        ]
        repo.items = items

        result = await repo.search(SearchParams(page=1, per_page=2, sort="name", filter="TEST"))
        assert result == SearchResult(items=[items[2], items[4]], total=3, current_page=1, per_page=2)

        result = await repo.search(SearchParams(page=2, per_page=2, sort="name", filter="TEST"))
        assert result == SearchResult(items=[items[0]], total=3, current_page=2, per_page=2)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page,per_page", [(1, 1), (2, 2), (5, 3), (40, 15)])
    async def test_total_ignores_pagination(self, repo, page, per_page):
        repo.items = [StubEntity(name=f"item {i}", price=i) for i in range(7)]

        result = await repo.search(SearchParams(page=page, per_page=per_page, filter="item"))

        assert result.total == 7

    @pytest.mark.asyncio
    async def test_over_paging_returns_empty_page(self, repo):
        repo.items = [StubEntity(name="a", price=1)]

        result = await repo.search(SearchParams(page=3, per_page=15))

        assert result.items == []
        assert result.total == 1
