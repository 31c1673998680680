"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.auth import Tokens


@strawberry.input
class LoginInput:
    """Input for logging in."""

    email: str | None = None
    password: str | None = None


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation
    async def login(self, info: strawberry.Info, data: LoginInput | None = None) -> Tokens | None:
        """Log in. Placeholder: any credentials get the same constant token."""
        from ..resolvers.auth import resolve_login

        return await resolve_login(info, data)
