"""
Catalog data source for Bookshelf
"""

from .base import DataSource, InMemoryDataSource
from .loader import load_data_source
from .models import Author, Book, Comment

__all__ = [
    "Author",
    "Book",
    "Comment",
    "DataSource",
    "InMemoryDataSource",
    "load_data_source",
]
