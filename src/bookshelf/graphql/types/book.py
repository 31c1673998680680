"""
Book GraphQL type definitions
"""

import strawberry

from .author import Author


@strawberry.type
class Book:
    """Book type for GraphQL API."""

    id: strawberry.ID
    author: strawberry.ID
    name: str
    post_date: str
    description: str
    author_info: Author | None = None


@strawberry.type
class BooksWithCount:
    """A page of books plus the total number of books."""

    books: list[Book]
    count: int
