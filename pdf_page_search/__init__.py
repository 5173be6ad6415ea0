"""
PDF Page Search - exact, whole-word and fuzzy search over paginated document text.

This package takes text that has already been extracted from a document and
split by ``[PAGE n]`` markers, scans it page by page for a query, and returns
ranked matches with bounded context windows.
"""

__version__ = "1.0.0"

from .core.coordinator import SearchCoordinator
from .models.response import SearchResult, SearchResponse

__all__ = [
    "SearchCoordinator",
    "SearchResult",
    "SearchResponse",
]
