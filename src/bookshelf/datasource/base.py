"""Read-only data source interface and in-memory implementation."""

from collections.abc import Iterable, Sequence
from typing import Protocol

from .models import Author, Book, Comment


class DataSource(Protocol):
    """Three ordered collections, complete and immutable before the first query."""

    @property
    def authors(self) -> Sequence[Author]: ...

    @property
    def books(self) -> Sequence[Book]: ...

    @property
    def comments(self) -> Sequence[Comment]: ...


class InMemoryDataSource:
    """DataSource backed by tuples held in memory for the process lifetime."""

    def __init__(
        self,
        authors: Iterable[Author] = (),
        books: Iterable[Book] = (),
        comments: Iterable[Comment] = (),
    ):
        self._authors = tuple(authors)
        self._books = tuple(books)
        self._comments = tuple(comments)

    @property
    def authors(self) -> tuple[Author, ...]:
        return self._authors

    @property
    def books(self) -> tuple[Book, ...]:
        return self._books

    @property
    def comments(self) -> tuple[Comment, ...]:
        return self._comments

    def __repr__(self) -> str:
        return (
            f"InMemoryDataSource(authors={len(self._authors)}, "
            f"books={len(self._books)}, comments={len(self._comments)})"
        )
