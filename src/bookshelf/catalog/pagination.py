"""Offset/limit pagination over ordered sequences."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from .errors import InvalidArgument

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """A slice of a collection plus the size of the whole collection."""

    items: tuple[T, ...]
    total_count: int


def paginate(sequence: Sequence[T], offset: int | None = None, limit: int | None = None) -> Page[T]:
    """
    Slice ``sequence`` to ``[offset, offset + limit)``.

    ``total_count`` is always ``len(sequence)``; callers filter before paginating.
    A missing offset starts at 0 and a missing limit runs to the end.
    An offset past the end yields an empty page.

    Raises:
        InvalidArgument: If offset or limit is negative
    """
    if offset is not None and offset < 0:
        raise InvalidArgument("offset", offset, "must not be negative")
    if limit is not None and limit < 0:
        raise InvalidArgument("limit", limit, "must not be negative")

    start = offset or 0
    stop = None if limit is None else start + limit
    return Page(items=tuple(sequence[start:stop]), total_count=len(sequence))
