"""
Query resolution over a read-only DataSource.

Each public method corresponds to one query of the GraphQL surface. Arguments
are accepted as raw transport values and parsed through the shared helpers in
``arguments``; results are plain pydantic views and ``Page`` envelopes.
"""

from __future__ import annotations

from collections import Counter
from typing import Any

from ..datasource.base import DataSource
from ..datasource.models import Book, Comment
from ..logging import get_logger
from .arguments import CommentsArgs, IdArgs, PageArgs
from .errors import NotFound
from .joins import AuthorView, BookView, count_books_by_author, with_author_info, with_book_count
from .pagination import Page, paginate

logger = get_logger(__name__)


class QueryResolver:
    """Resolves catalog queries against an injected DataSource."""

    def __init__(self, data_source: DataSource):
        self.data_source = data_source

    def author(self, id: Any) -> AuthorView:
        """
        Find one author, annotated with its book count.

        Raises:
            InvalidArgument: If id is not an integer
            NotFound: If no author has this id
        """
        args = IdArgs.parse(id)
        logger.debug("Resolving author", author_id=args.id)

        for view in with_book_count(self.data_source.authors, self.data_source.books):
            if view.id == args.id:
                return view
        raise NotFound("Author", args.id)

    def authors(self, offset: Any = None, limit: Any = None) -> Page[AuthorView]:
        page = PageArgs.parse(offset, limit)
        logger.debug("Resolving authors", offset=page.offset, limit=page.limit)

        views = with_book_count(self.data_source.authors, self.data_source.books)
        return paginate(views, page.offset, page.limit)

    def book(self, id: Any) -> BookView:
        """
        Find one book, annotated with its author.

        Raises:
            InvalidArgument: If id is not an integer
            NotFound: If no book has this id
        """
        args = IdArgs.parse(id)
        logger.debug("Resolving book", book_id=args.id)

        for view in with_author_info(self.data_source.books, self.data_source.authors):
            if view.id == args.id:
                return view
        raise NotFound("Book", args.id)

    def books(self, offset: Any = None, limit: Any = None) -> Page[BookView]:
        page = PageArgs.parse(offset, limit)
        logger.debug("Resolving books", offset=page.offset, limit=page.limit)

        views = with_author_info(self.data_source.books, self.data_source.authors)
        return paginate(views, page.offset, page.limit)

    def books_by_author(self, id: Any) -> list[Book]:
        """Books whose author is ``id``, in source order. Empty when there are none."""
        args = IdArgs.parse(id)
        logger.debug("Resolving books by author", author_id=args.id)

        return [book for book in self.data_source.books if book.author == args.id]

    def comments(self, book_id: Any, offset: Any = None, limit: Any = None) -> Page[Comment]:
        """Comments on one book; ``total_count`` counts that book's comments only."""
        args = CommentsArgs.parse(book_id, offset, limit)
        logger.debug(
            "Resolving comments",
            book_id=args.book_id,
            offset=args.page.offset,
            limit=args.page.limit,
        )

        matching = [c for c in self.data_source.comments if c.book_id == args.book_id]
        return paginate(matching, args.page.offset, args.page.limit)

    def book_counts(self) -> Counter[int]:
        """Number of books referencing each author id."""
        return count_books_by_author(self.data_source.books)
