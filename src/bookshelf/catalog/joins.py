"""
Derived views over the catalog collections.

Joins never mutate their inputs and tolerate dangling foreign keys.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from ..datasource.models import Author, Book


class AuthorView(Author):
    """Author annotated with the number of books referencing it."""

    book_count: int


class BookView(Book):
    """Book annotated with its author, or None when the reference dangles."""

    author_info: Author | None = None


def count_books_by_author(books: Iterable[Book]) -> Counter[int]:
    """Map author id to the number of books referencing it."""
    return Counter(book.author for book in books)


def with_book_count(authors: Sequence[Author], books: Sequence[Book]) -> list[AuthorView]:
    counts = count_books_by_author(books)
    return [AuthorView(**author.model_dump(), book_count=counts[author.id]) for author in authors]


def with_author_info(books: Sequence[Book], authors: Sequence[Author]) -> list[BookView]:
    authors_by_id: dict[int, Author] = {}
    for author in authors:
        # First occurrence wins on duplicate ids
        authors_by_id.setdefault(author.id, author)

    return [
        BookView(**book.model_dump(), author_info=authors_by_id.get(book.author)) for book in books
    ]
