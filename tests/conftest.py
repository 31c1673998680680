"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest

from bookshelf.catalog.auth import AuthStub
from bookshelf.catalog.resolver import QueryResolver
from bookshelf.datasource import Author, Book, Comment, InMemoryDataSource


@pytest.fixture
def sample_authors() -> list[Author]:
    """Three authors; the third has written nothing."""
    return [
        Author(id=1, first_name="Ursula", last_name="Le Guin", biography="Earthsea"),
        Author(id=2, first_name="Stanislaw", last_name="Lem", biography="Solaris"),
        Author(id=3, first_name="Jorge", last_name="Borges", biography="Ficciones"),
    ]


@pytest.fixture
def sample_books() -> list[Book]:
    """Four books; book 13 references an author that does not exist."""
    return [
        Book(id=10, author=1, name="A Wizard of Earthsea", post_date="1968", description="Ged"),
        Book(id=11, author=1, name="The Dispossessed", post_date="1974", description="Shevek"),
        Book(id=12, author=2, name="Solaris", post_date="1961", description="Ocean"),
        Book(id=13, author=99, name="Orphan", post_date="2000", description="No author"),
    ]


@pytest.fixture
def sample_comments() -> list[Comment]:
    """Three comments on book 10, one on book 12 and one on a missing book."""
    return [
        Comment(id=1, book_id=10, name="Mira", comment="Lovely"),
        Comment(id=2, book_id=12, name="Kasia", comment="Strange"),
        Comment(id=3, book_id=10, name="Tomas", comment="Dense"),
        Comment(id=4, book_id=10, name="Ana", comment="Classic"),
        Comment(id=5, book_id=999, name="Ghost", comment="Where am I"),
    ]


@pytest.fixture
def data_source(sample_authors, sample_books, sample_comments) -> InMemoryDataSource:
    return InMemoryDataSource(sample_authors, sample_books, sample_comments)


@pytest.fixture
def catalog(data_source) -> QueryResolver:
    return QueryResolver(data_source)


@pytest.fixture
def graphql_context(catalog) -> dict[str, Any]:
    """Context equivalent to what the GraphQL router builds per request."""
    return {"request": None, "catalog": catalog, "auth": AuthStub()}


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
