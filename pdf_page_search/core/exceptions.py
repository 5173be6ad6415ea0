"""Exception hierarchy for the page search engine."""

from typing import Any, Dict, Optional


class PageSearchError(Exception):
    """Base exception for all page search errors."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error description
            details: Optional dictionary with additional context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InputError(PageSearchError):
    """Raised when a search request is rejected before scanning."""

    status_code = 400


class DocumentNotFoundError(PageSearchError):
    """Raised when the document store has no document for an id."""

    status_code = 404

    def __init__(
        self,
        message: str,
        document_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message, details)
        self.document_id = document_id


class InternalSearchError(PageSearchError):
    """Raised when an unexpected fault happens while splitting or scanning."""

    status_code = 500
