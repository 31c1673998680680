"""JSON fixture loader.

Reads ``authors.json``, ``books.json`` and ``comments.json`` from a directory,
validates every record and returns an ``InMemoryDataSource``. Any problem is
reported as ``DataSourceUnavailable`` so startup fails fast.
"""

from __future__ import annotations

from pathlib import Path
from typing import TypeVar

from pydantic import TypeAdapter, ValidationError

from ..catalog.errors import DataSourceUnavailable
from ..logging import get_logger
from .base import InMemoryDataSource
from .models import Author, Book, CatalogRecord, Comment

logger = get_logger(__name__)

R = TypeVar("R", bound=CatalogRecord)

AUTHORS_FILE = "authors.json"
BOOKS_FILE = "books.json"
COMMENTS_FILE = "comments.json"


def _load_collection(path: Path, model: type[R]) -> list[R]:
    try:
        raw = path.read_bytes()
    except FileNotFoundError as e:
        raise DataSourceUnavailable(f"Fixture file not found: {path}") from e
    except OSError as e:
        raise DataSourceUnavailable(f"Cannot read fixture file {path}: {e}") from e

    try:
        records = TypeAdapter(list[model]).validate_json(raw)
    except ValidationError as e:
        raise DataSourceUnavailable(
            f"Invalid {model.__name__} records in {path}: {e.error_count()} error(s)\n{e}"
        ) from e

    logger.debug("Loaded collection", path=str(path), model=model.__name__, count=len(records))
    return records


def load_data_source(data_dir: str | Path) -> InMemoryDataSource:
    """
    Load the three catalog collections from ``data_dir``.

    Raises:
        DataSourceUnavailable: If a file is missing, unreadable or malformed
    """
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        raise DataSourceUnavailable(f"Data directory does not exist: {data_dir}")

    data_source = InMemoryDataSource(
        authors=_load_collection(data_dir / AUTHORS_FILE, Author),
        books=_load_collection(data_dir / BOOKS_FILE, Book),
        comments=_load_collection(data_dir / COMMENTS_FILE, Comment),
    )
    logger.info(
        "Data source loaded",
        data_dir=str(data_dir),
        authors=len(data_source.authors),
        books=len(data_source.books),
        comments=len(data_source.comments),
    )
    return data_source
