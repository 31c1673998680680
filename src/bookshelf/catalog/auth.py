"""Placeholder login for the front end. Not a security boundary."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..logging import get_logger

logger = get_logger(__name__)

ACCESS_TOKEN = "some token that we won't parse on front 'cause of fake auth"


class Credentials(BaseModel):
    email: str | None = None
    password: str | None = None


class Tokens(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    access_token: str


class AuthStub:
    """
    Login stub that accepts any credentials.

    WARNING: Every caller receives the same constant token. Nothing is verified.
    """

    def __init__(self):
        logger.warning(
            "AuthStub is active - login accepts any credentials and returns a constant token. "
            "This should ONLY be used until a real authentication provider exists."
        )

    def login(self, credentials: Credentials | None = None) -> Tokens:
        """Return the constant access token; ``credentials`` are ignored."""
        logger.debug("Login requested", email=credentials.email if credentials else None)
        return Tokens(access_token=ACCESS_TOKEN)
