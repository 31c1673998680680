"""
Book resolvers for GraphQL API
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

import strawberry

from ...datasource.models import Book as BookRecord
from ...logging import get_logger
from ..context import catalog_errors, get_catalog
from .author import to_author_type

if TYPE_CHECKING:
    from ...catalog.joins import BookView
    from ..types.book import Book, BooksWithCount

logger = get_logger(__name__)


def to_book_type(book: BookRecord, book_counts: Counter[int] | None = None) -> Book:
    """
    Convert a book record to the GraphQL type.

    ``authorInfo`` is filled only for joined views; ``book_counts`` supplies the
    embedded author's ``bookCount``.
    """
    from ..types.book import Book as BookType

    author = getattr(book, "author_info", None)
    author_info = None
    if author is not None:
        author_info = to_author_type(author, (book_counts or Counter())[author.id])

    return BookType(
        id=strawberry.ID(str(book.id)),
        author=strawberry.ID(str(book.author)),
        name=book.name,
        post_date=book.post_date,
        description=book.description,
        author_info=author_info,
    )


async def resolve_book_by_id(info: strawberry.Info, id: strawberry.ID) -> Book:
    """Resolve one book with its author."""
    catalog = get_catalog(info)
    with catalog_errors("book"):
        view: BookView = catalog.book(id)

    if view.author_info is None:
        logger.debug("Book references a missing author", book_id=view.id, author_id=view.author)
    return to_book_type(view, catalog.book_counts())


async def resolve_books(
    info: strawberry.Info, offset: int | None, limit: int | None
) -> BooksWithCount:
    """Resolve a page of books; ``count`` is the number of all books."""
    from ..types.book import BooksWithCount as BooksWithCountType

    catalog = get_catalog(info)
    with catalog_errors("books"):
        page = catalog.books(offset, limit)

    book_counts = catalog.book_counts()
    return BooksWithCountType(
        books=[to_book_type(view, book_counts) for view in page.items],
        count=page.total_count,
    )


async def resolve_books_by_author(info: strawberry.Info, id: strawberry.ID) -> list[Book]:
    """Resolve the books of one author. No join: ``authorInfo`` stays null."""
    with catalog_errors("booksByAuthor"):
        books = get_catalog(info).books_by_author(id)
    return [to_book_type(book) for book in books]
