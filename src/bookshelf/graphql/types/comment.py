"""
Comment GraphQL type definitions
"""

import strawberry


@strawberry.type
class Comment:
    """Comment type for GraphQL API."""

    id: strawberry.ID
    book_id: strawberry.ID
    name: str
    comment: str


@strawberry.type
class CommentsWithCount:
    """A page of one book's comments plus the number of comments on that book."""

    comments: list[Comment]
    count: int
