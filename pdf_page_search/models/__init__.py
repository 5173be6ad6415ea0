"""Data models for the page search service."""

from .response import (
    MatchText,
    MatchPosition,
    SearchResult,
    SearchMetadata,
    SearchResponse,
    ErrorResponse,
    HealthResponse,
)
from .request import SearchOptions, SearchRequest

__all__ = [
    "MatchText",
    "MatchPosition",
    "SearchResult",
    "SearchMetadata",
    "SearchResponse",
    "ErrorResponse",
    "HealthResponse",
    "SearchOptions",
    "SearchRequest",
]
