"""Error taxonomy for catalog queries."""

from typing import Any


class CatalogError(Exception):
    """Base exception for catalog operations."""

    code = "INTERNAL_SERVER_ERROR"


class InvalidArgument(CatalogError):
    """An identifier or pagination argument could not be used."""

    code = "BAD_USER_INPUT"

    def __init__(self, argument: str, value: Any, reason: str = "must be an integer"):
        self.argument = argument
        self.value = value
        super().__init__(f"Invalid argument '{argument}': {reason} (got {value!r})")


class NotFound(CatalogError):
    """A single-entity lookup matched nothing."""

    code = "NOT_FOUND"

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class DataSourceUnavailable(CatalogError):
    """The catalog collections could not be loaded. Fatal at startup."""

    code = "DATA_SOURCE_UNAVAILABLE"
