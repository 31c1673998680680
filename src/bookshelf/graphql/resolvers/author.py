"""
Author resolvers for GraphQL API
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...catalog.joins import AuthorView
from ...datasource.models import Author as AuthorRecord
from ..context import catalog_errors, get_catalog

if TYPE_CHECKING:
    from ..types.author import Author, AuthorsWithCount


def to_author_type(author: AuthorRecord, book_count: int) -> Author:
    """Convert an author record to the GraphQL type."""
    from ..types.author import Author as AuthorType

    return AuthorType(
        id=strawberry.ID(str(author.id)),
        first_name=author.first_name,
        last_name=author.last_name,
        biography=author.biography,
        book_count=book_count,
    )


def _from_view(view: AuthorView) -> Author:
    return to_author_type(view, view.book_count)


async def resolve_author_by_id(info: strawberry.Info, id: strawberry.ID) -> Author:
    """Resolve one author with its book count."""
    with catalog_errors("author"):
        view = get_catalog(info).author(id)
    return _from_view(view)


async def resolve_authors(
    info: strawberry.Info, offset: int | None, limit: int | None
) -> AuthorsWithCount:
    """Resolve a page of authors; ``count`` is the number of all authors."""
    from ..types.author import AuthorsWithCount as AuthorsWithCountType

    with catalog_errors("authors"):
        page = get_catalog(info).authors(offset, limit)
    return AuthorsWithCountType(
        authors=[_from_view(view) for view in page.items],
        count=page.total_count,
    )
