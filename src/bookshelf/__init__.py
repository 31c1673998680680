"""
Bookshelf
GraphQL catalog API over authors, books and comments
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
