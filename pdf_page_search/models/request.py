"""Request models for API endpoints."""

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class SearchOptions(BaseModel):
    """Search toggles. Accepts camelCase or snake_case keys; unknown keys are ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore"
    )

    case_sensitive: bool = Field(default=False, description="Distinguish upper and lower case")
    whole_word: bool = Field(default=False, description="Only report matches on word boundaries")
    fuzzy_match: bool = Field(default=True, description="Use edit-distance similarity instead of exact search")
    context_length: int = Field(default=100, ge=0, description="Characters of context on each side of a match")
    max_results: int = Field(default=50, ge=0, description="Maximum number of results to return")


class SearchRequest(BaseModel):
    """Request model for searching one document."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    document_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("documentId", "pdfId", "document_id"),
        description="Identifier of the document to search"
    )
    search_text: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("searchText", "search_text"),
        description="Text to look for"
    )
    options: Optional[SearchOptions] = Field(default=None, description="Search options")

    @field_validator("document_id", mode="before")
    @classmethod
    def coerce_document_id(cls, v: Any) -> Any:
        """Accept numeric ids from clients that store them as integers."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v
