"""
Helpers shared by GraphQL resolvers: context access and error mapping.
"""

from collections.abc import Iterator
from contextlib import contextmanager

import strawberry
from graphql import GraphQLError

from ..catalog.auth import AuthStub
from ..catalog.errors import CatalogError
from ..catalog.resolver import QueryResolver
from ..logging import get_logger

logger = get_logger(__name__)


def get_catalog(info: strawberry.Info) -> QueryResolver:
    """Get the QueryResolver injected by the router's context getter."""
    return info.context["catalog"]


def get_auth_stub(info: strawberry.Info) -> AuthStub:
    """Get the AuthStub injected by the router's context getter."""
    return info.context["auth"]


@contextmanager
def catalog_errors(field: str) -> Iterator[None]:
    """
    Convert catalog errors raised inside the block into GraphQL errors.

    The error code lands in ``extensions.code`` so clients can tell a bad
    argument from a missing entity without parsing the message.
    """
    try:
        yield
    except CatalogError as e:
        logger.info("Query rejected", field=field, code=e.code, error=str(e))
        raise GraphQLError(str(e), extensions={"code": e.code}) from e
