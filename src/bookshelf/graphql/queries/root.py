"""
Root GraphQL query definitions
"""

import strawberry

from ..types.author import Author, AuthorsWithCount
from ..types.book import Book, BooksWithCount
from ..types.comment import CommentsWithCount


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def author(self, info: strawberry.Info, id: strawberry.ID) -> Author:
        """Get an author by ID, with the number of books they wrote."""
        from ..resolvers.author import resolve_author_by_id

        return await resolve_author_by_id(info, id)

    @strawberry.field
    async def authors(
        self,
        info: strawberry.Info,
        offset: int | None = None,
        limit: int | None = None,
    ) -> AuthorsWithCount:
        """Get a page of authors and the total author count."""
        from ..resolvers.author import resolve_authors

        return await resolve_authors(info, offset, limit)

    @strawberry.field
    async def book(self, info: strawberry.Info, id: strawberry.ID) -> Book:
        """Get a book by ID, with its author."""
        from ..resolvers.book import resolve_book_by_id

        return await resolve_book_by_id(info, id)

    @strawberry.field
    async def books(
        self,
        info: strawberry.Info,
        offset: int | None = None,
        limit: int | None = None,
    ) -> BooksWithCount:
        """Get a page of books and the total book count."""
        from ..resolvers.book import resolve_books

        return await resolve_books(info, offset, limit)

    @strawberry.field
    async def books_by_author(self, info: strawberry.Info, id: strawberry.ID) -> list[Book]:
        """Get all books written by an author."""
        from ..resolvers.book import resolve_books_by_author

        return await resolve_books_by_author(info, id)

    @strawberry.field
    async def comments(
        self,
        info: strawberry.Info,
        book_id: strawberry.ID,
        offset: int | None = None,
        limit: int | None = None,
    ) -> CommentsWithCount:
        """Get a page of comments on a book and that book's comment count."""
        from ..resolvers.comment import resolve_comments

        return await resolve_comments(info, book_id, offset, limit)
