"""
Auth GraphQL type definitions
"""

import strawberry


@strawberry.type
class Tokens:
    """Tokens issued by the login mutation."""

    access_token: str | None
