"""Pydantic models for catalog records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CatalogRecord(BaseModel):
    """Immutable record with camelCase wire names and snake_case attributes."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Author(CatalogRecord):
    id: int
    first_name: str
    last_name: str
    biography: str


class Book(CatalogRecord):
    id: int
    author: int  # Author.id, not guaranteed to resolve
    name: str
    post_date: str
    description: str


class Comment(CatalogRecord):
    id: int
    book_id: int  # Book.id, not guaranteed to resolve
    name: str
    comment: str
