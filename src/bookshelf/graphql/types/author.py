"""
Author GraphQL type definitions
"""

import strawberry


@strawberry.type
class Author:
    """Author type for GraphQL API."""

    id: strawberry.ID
    first_name: str
    last_name: str
    biography: str
    book_count: int


@strawberry.type
class AuthorsWithCount:
    """A page of authors plus the total number of authors."""

    authors: list[Author]
    count: int
