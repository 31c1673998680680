"""
Referential audit of the catalog data source.

Duplicate ids and dangling foreign keys are tolerated by the query layer
(a dangling reference resolves to "no match"), so findings here are
warnings rather than errors. They are logged at startup and reported by
``bookshelf check-data``.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from typing import Any

from .datasource.base import DataSource
from .logging import get_logger

logger = get_logger(__name__)


def _duplicate_ids(collection: str, ids: Iterable[int]) -> list[dict[str, Any]]:
    return [
        {
            "type": "duplicate_id",
            "collection": collection,
            "id": record_id,
            "description": f"{collection} id {record_id} appears {count} times",
        }
        for record_id, count in Counter(ids).items()
        if count > 1
    ]


def _dangling_references(data_source: DataSource) -> list[dict[str, Any]]:
    findings = []
    author_ids = {author.id for author in data_source.authors}
    book_ids = {book.id for book in data_source.books}

    for book in data_source.books:
        if book.author not in author_ids:
            findings.append(
                {
                    "type": "dangling_reference",
                    "collection": "books",
                    "id": book.id,
                    "description": f"book {book.id} references missing author {book.author}",
                }
            )

    for comment in data_source.comments:
        if comment.book_id not in book_ids:
            findings.append(
                {
                    "type": "dangling_reference",
                    "collection": "comments",
                    "id": comment.id,
                    "description": f"comment {comment.id} references missing book {comment.book_id}",
                }
            )

    return findings


def audit_data_source(data_source: DataSource) -> dict[str, Any]:
    """
    Audit a loaded data source for duplicate ids and dangling references.

    Returns a dictionary with collection statistics and a list of findings.
    """
    findings = (
        _duplicate_ids("authors", (a.id for a in data_source.authors))
        + _duplicate_ids("books", (b.id for b in data_source.books))
        + _duplicate_ids("comments", (c.id for c in data_source.comments))
        + _dangling_references(data_source)
    )

    results = {
        "valid": not findings,
        "statistics": {
            "authors": len(data_source.authors),
            "books": len(data_source.books),
            "comments": len(data_source.comments),
        },
        "findings": findings,
    }

    if findings:
        logger.warning(
            "Data source audit found issues",
            findings_count=len(findings),
            findings=[f["description"] for f in findings],
        )
    else:
        logger.info("Data source audit completed successfully", **results["statistics"])

    return results
