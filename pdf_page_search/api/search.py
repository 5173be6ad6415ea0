"""Search API endpoints."""

from typing import Optional

import structlog
from fastapi import APIRouter, Path, Query
from fastapi.responses import JSONResponse

from ..config import get_settings
from ..core.exceptions import InternalSearchError, PageSearchError
from ..models.request import SearchOptions, SearchRequest
from ..models.response import ErrorResponse, SearchResponse

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()
logger = structlog.get_logger(__name__)

# Import the global search coordinator instance
from ..engine_instance import search_coordinator

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid search request"},
    404: {"model": ErrorResponse, "description": "Document not found"},
    500: {"model": ErrorResponse, "description": "Search failed"},
}


def error_response(error: PageSearchError) -> JSONResponse:
    """Convert a search error into the ``{error, results: []}`` envelope."""
    details = error.details or None
    if isinstance(error, InternalSearchError) and not settings.debug:
        details = None

    return JSONResponse(
        status_code=error.status_code,
        content=ErrorResponse(error=error.message, details=details).model_dump(
            mode="json", exclude_none=True
        )
    )


def run_search(
    document_id: Optional[str],
    search_text: Optional[str],
    options: Optional[SearchOptions]
):
    try:
        return search_coordinator.search(document_id, search_text, options)
    except PageSearchError as e:
        logger.warning(
            "Search rejected",
            document_id=document_id,
            error_type=type(e).__name__,
            error=e.message
        )
        return error_response(e)


@router.post(
    "/search",
    response_model=SearchResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    summary="Search a document",
    description="Search one document's pages for exact, whole-word or fuzzy matches"
)
def search_document(request: SearchRequest):
    """
    Search a document using a JSON request body.

    The body carries ``documentId``, ``searchText`` and optional ``options``.
    A document without extracted text yields an empty result with an
    ``error`` message and a 200 status.
    """
    return run_search(request.document_id, request.search_text, request.options)


@router.get(
    "/documents/{document_id}/search",
    response_model=SearchResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    summary="Search a document by query string",
    description="Same search as POST /search, with options passed as query parameters"
)
def search_document_by_query(
    document_id: str = Path(..., description="Identifier of the document to search"),
    q: Optional[str] = Query(None, description="Text to look for"),
    case_sensitive: bool = Query(False, description="Distinguish upper and lower case"),
    whole_word: bool = Query(False, description="Only report matches on word boundaries"),
    fuzzy_match: bool = Query(True, description="Use edit-distance similarity"),
    context_length: int = Query(100, ge=0, description="Characters of context on each side"),
    max_results: int = Query(50, ge=0, description="Maximum number of results")
):
    """Search a document with options given as query parameters."""
    options = SearchOptions(
        case_sensitive=case_sensitive,
        whole_word=whole_word,
        fuzzy_match=fuzzy_match,
        context_length=context_length,
        max_results=max_results
    )
    return run_search(document_id, q, options)
