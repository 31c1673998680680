"""
Comment resolvers for GraphQL API
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ..context import catalog_errors, get_catalog

if TYPE_CHECKING:
    from ..types.comment import CommentsWithCount


async def resolve_comments(
    info: strawberry.Info,
    book_id: strawberry.ID,
    offset: int | None,
    limit: int | None,
) -> CommentsWithCount:
    """Resolve a page of one book's comments; ``count`` covers that book only."""
    from ..types.comment import Comment, CommentsWithCount

    with catalog_errors("comments"):
        page = get_catalog(info).comments(book_id, offset, limit)

    return CommentsWithCount(
        comments=[
            Comment(
                id=strawberry.ID(str(comment.id)),
                book_id=strawberry.ID(str(comment.book_id)),
                name=comment.name,
                comment=comment.comment,
            )
            for comment in page.items
        ],
        count=page.total_count,
    )
