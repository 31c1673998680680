"""
Parsing of identifier and pagination arguments.

Arguments reach the catalog as opaque transport values: GraphQL ``ID``
arguments arrive as strings, ``Int`` arguments as ints, and callers outside
GraphQL may pass either. Everything funnels through ``parse_required_integer``
so a malformed id is rejected instead of silently matching nothing (or id 0).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from .errors import InvalidArgument

# ASCII digits only; \d would also match other scripts' decimal digits
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_required_integer(raw: Any, name: str) -> int:
    """
    Parse a transport value into an integer.

    Accepts ints and base-10 strings of ASCII digits (surrounding whitespace
    allowed).

    Raises:
        InvalidArgument: For None, bools, floats, empty or non-numeric strings
    """
    # bool is an int subclass; True must not become id 1
    if isinstance(raw, bool):
        raise InvalidArgument(name, raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        if _INTEGER_RE.fullmatch(text):
            try:
                return int(text)
            except ValueError as e:
                # Digit strings past the interpreter's int conversion limit
                raise InvalidArgument(name, raw, "is too large") from e
    raise InvalidArgument(name, raw)


def parse_optional_integer(raw: Any, name: str) -> int | None:
    """Like ``parse_required_integer`` but lets None through."""
    if raw is None:
        return None
    return parse_required_integer(raw, name)


@dataclass(frozen=True)
class IdArgs:
    """Arguments of single-entity lookups and ``booksByAuthor``."""

    id: int

    @classmethod
    def parse(cls, id: Any) -> IdArgs:
        return cls(id=parse_required_integer(id, "id"))


@dataclass(frozen=True)
class PageArgs:
    """Offset/limit pair; None means unbounded on that side."""

    offset: int | None = None
    limit: int | None = None

    @classmethod
    def parse(cls, offset: Any = None, limit: Any = None) -> PageArgs:
        return cls(
            offset=parse_optional_integer(offset, "offset"),
            limit=parse_optional_integer(limit, "limit"),
        )


@dataclass(frozen=True)
class CommentsArgs:
    """Arguments of the ``comments`` query."""

    book_id: int
    page: PageArgs

    @classmethod
    def parse(cls, book_id: Any, offset: Any = None, limit: Any = None) -> CommentsArgs:
        return cls(
            book_id=parse_required_integer(book_id, "bookId"),
            page=PageArgs.parse(offset, limit),
        )
