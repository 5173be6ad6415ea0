"""Core page search functionality."""

from .coordinator import SearchCoordinator
from .context import ContextWindow, extract_context
from .exceptions import (
    PageSearchError,
    InputError,
    DocumentNotFoundError,
    InternalSearchError,
)
from .matcher import MatchCandidate, MatchFinder, is_whole_word
from .normalizer import TextNormalizer
from .pages import Page, split_pages
from .similarity import levenshtein_distance, similarity

__all__ = [
    "SearchCoordinator",
    "ContextWindow",
    "extract_context",
    "PageSearchError",
    "InputError",
    "DocumentNotFoundError",
    "InternalSearchError",
    "MatchCandidate",
    "MatchFinder",
    "is_whole_word",
    "TextNormalizer",
    "Page",
    "split_pages",
    "levenshtein_distance",
    "similarity",
]
