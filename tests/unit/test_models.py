"""Unit tests for request and response models."""

import pytest
from pydantic import ValidationError

from pdf_page_search.models.request import SearchOptions, SearchRequest
from pdf_page_search.models.response import (
    ErrorResponse,
    MatchPosition,
    MatchText,
    SearchMetadata,
    SearchResponse,
    SearchResult,
)


class TestSearchOptions:
    """Test cases for SearchOptions."""

    def test_defaults(self):
        """Test default option values."""
        options = SearchOptions()

        assert options.case_sensitive is False
        assert options.whole_word is False
        assert options.fuzzy_match is True
        assert options.context_length == 100
        assert options.max_results == 50

    def test_camel_case_keys(self):
        """Test wire-format keys."""
        options = SearchOptions.model_validate({"caseSensitive": True, "maxResults": 5})

        assert options.case_sensitive is True
        assert options.max_results == 5

    def test_unknown_keys_ignored(self):
        """Test that unknown option fields are not errors."""
        options = SearchOptions.model_validate({"highlight": "yes", "wholeWord": True})

        assert options.whole_word is True

    @pytest.mark.parametrize("payload", [
        {"contextLength": -1},
        {"maxResults": -5},
        {"maxResults": "lots"},
    ])
    def test_invalid_values(self, payload):
        """Test validation of option values."""
        with pytest.raises(ValidationError):
            SearchOptions.model_validate(payload)

    def test_serializes_camel_case(self):
        """Test that options echo back in wire format."""
        dumped = SearchOptions().model_dump(by_alias=True)

        assert dumped == {
            "caseSensitive": False,
            "wholeWord": False,
            "fuzzyMatch": True,
            "contextLength": 100,
            "maxResults": 50,
        }


class TestSearchRequest:
    """Test cases for SearchRequest."""

    def test_wire_format(self):
        """Test parsing a request body."""
        request = SearchRequest.model_validate({
            "documentId": "doc-1",
            "searchText": "quick",
            "options": {"fuzzyMatch": False}
        })

        assert request.document_id == "doc-1"
        assert request.search_text == "quick"
        assert request.options.fuzzy_match is False

    def test_legacy_pdf_id(self):
        """Test that pdfId is accepted as the document id."""
        request = SearchRequest.model_validate({"pdfId": "doc-2", "searchText": "x"})

        assert request.document_id == "doc-2"

    def test_numeric_document_id(self):
        """Test that integer ids are coerced to strings."""
        request = SearchRequest.model_validate({"documentId": 17, "searchText": "x"})

        assert request.document_id == "17"

    def test_missing_fields_are_left_for_the_coordinator(self):
        """Test that missing fields parse to None."""
        request = SearchRequest.model_validate({})

        assert request.document_id is None
        assert request.search_text is None
        assert request.options is None


class TestResponses:
    """Test cases for response models."""

    def test_search_response_wire_format(self):
        """Test camelCase serialization of the result envelope."""
        response = SearchResponse(
            results=[
                SearchResult(
                    page_number=1,
                    text=MatchText(before="The ", match="quick", after=" brown"),
                    position=MatchPosition(start=4, end=9),
                    score=1.0
                )
            ],
            metadata=SearchMetadata(
                document_name="fox.pdf",
                total_results=1,
                search_options=SearchOptions(),
                execution_time_ms=0.5
            )
        )

        data = response.model_dump(by_alias=True, exclude_none=True)

        assert "error" not in data
        assert data["results"][0]["pageNumber"] == 1
        assert data["results"][0]["text"] == {"before": "The ", "match": "quick", "after": " brown"}
        assert data["results"][0]["position"] == {"start": 4, "end": 9}
        assert data["metadata"]["documentName"] == "fox.pdf"
        assert data["metadata"]["totalResults"] == 1
        assert data["metadata"]["searchOptions"]["fuzzyMatch"] is True

    def test_score_must_be_positive(self):
        """Test that a zero score is not a valid result."""
        with pytest.raises(ValidationError):
            SearchResult(
                page_number=1,
                text=MatchText(before="", match="", after=""),
                position=MatchPosition(start=0, end=0),
                score=0.0
            )

    def test_error_response(self):
        """Test the error envelope shape."""
        data = ErrorResponse(error="search text required").model_dump(exclude_none=True)

        assert data == {"error": "search text required", "results": []}
