"""Response models for API endpoints."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .request import SearchOptions


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MatchText(CamelModel):
    """Context around a match, split into three segments."""

    before: str = Field(..., description="Text preceding the match")
    match: str = Field(..., description="The matched text as it appears in the document")
    after: str = Field(..., description="Text following the match")


class MatchPosition(CamelModel):
    """Character span of a match within its page."""

    start: int = Field(..., ge=0, description="Offset of the first matched character")
    end: int = Field(..., ge=0, description="Offset just past the last matched character")


class SearchResult(CamelModel):
    """Individual search result."""

    page_number: int = Field(..., ge=1, description="1-based page number")
    text: MatchText = Field(..., description="Match with surrounding context")
    position: MatchPosition = Field(..., description="Match span within the page")
    score: float = Field(..., gt=0.0, le=1.0, description="Relevance score (1.0 for exact matches)")


class SearchMetadata(CamelModel):
    """Metadata describing a completed search."""

    document_name: str = Field(..., description="Name of the searched document")
    total_results: int = Field(..., ge=0, description="Number of results returned")
    search_options: SearchOptions = Field(..., description="Options the search ran with")
    execution_time_ms: float = Field(..., description="Search execution time in milliseconds")


class SearchResponse(CamelModel):
    """Result envelope for a document search."""

    results: List[SearchResult] = Field(default_factory=list, description="Results, highest score first")
    metadata: Optional[SearchMetadata] = Field(None, description="Search metadata")
    error: Optional[str] = Field(None, description="Reason no search was run, if any")


class ErrorResponse(CamelModel):
    """Error envelope; always carries an empty result list."""

    error: str = Field(..., description="Error message")
    results: List[SearchResult] = Field(default_factory=list, description="Always empty")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")


class HealthResponse(CamelModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Check timestamp"
    )
    dependencies: Dict[str, str] = Field(..., description="Dependency status")
