"""Pydantic schemas and value objects for repository searches."""

from catalog.schemas.search import SearchParams, SearchResult

__all__ = ["SearchParams", "SearchResult"]
