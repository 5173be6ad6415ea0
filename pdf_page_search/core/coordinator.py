"""Search coordination: validation, page scanning, ranking and envelope assembly."""

import time
from typing import Any, Dict, List, Optional, Union

import structlog
from pydantic import ValidationError

from ..models.request import SearchOptions
from ..models.response import (
    MatchPosition,
    MatchText,
    SearchMetadata,
    SearchResponse,
    SearchResult,
)
from ..store.documents import DocumentStore
from .context import extract_context
from .exceptions import DocumentNotFoundError, InputError, InternalSearchError, PageSearchError
from .matcher import DEFAULT_FUZZY_THRESHOLD, MatchFinder
from .normalizer import TextNormalizer
from .pages import Page, split_pages

logger = structlog.get_logger(__name__)

NO_TEXT_MESSAGE = "No text content available for this document"


class SearchCoordinator:
    """Runs a search over one document's pages and builds the result envelope."""

    def __init__(
        self,
        document_store: DocumentStore,
        fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD,
        max_query_length: Optional[int] = None,
        max_page_length: Optional[int] = None
    ) -> None:
        """
        Initialize the coordinator.

        Args:
            document_store: Collaborator used to fetch document text
            fuzzy_threshold: Similarity a fuzzy window must exceed
            max_query_length: Longest accepted query (None for no limit)
            max_page_length: Longest accepted page text (None for no limit)
        """
        self.document_store = document_store
        self.normalizer = TextNormalizer()
        self.match_finder = MatchFinder(threshold=fuzzy_threshold)
        self.max_query_length = max_query_length
        self.max_page_length = max_page_length

    def search(
        self,
        document_id: Optional[str],
        search_text: Optional[str],
        options: Union[SearchOptions, Dict[str, Any], None] = None
    ) -> SearchResponse:
        """
        Search one document for a query.

        Pages are scanned in order and scanning stops once ``max_results``
        results have been collected, so the returned results are the best of
        what was scanned, not a global top-K over the whole document.

        Args:
            document_id: Identifier passed to the document store
            search_text: Query text
            options: SearchOptions, a raw option mapping, or None for defaults

        Returns:
            SearchResponse with ranked results and metadata, or an empty
            result with ``error`` set when the document has no text

        Raises:
            InputError: If the request is invalid
            DocumentNotFoundError: If the store does not know the document
            InternalSearchError: If scanning fails unexpectedly
        """
        start_time = time.time()

        search_options = self._validate(document_id, search_text, options)

        document = self.document_store.get_document(document_id)
        if document is None:
            raise DocumentNotFoundError(
                f"Document not found: {document_id}",
                document_id=document_id
            )

        if not document.extracted_text:
            logger.info("Document has no extracted text", document_id=document_id)
            return SearchResponse(results=[], error=NO_TEXT_MESSAGE)

        try:
            pages = split_pages(document.extracted_text)
            results = self._scan_pages(pages, search_text, search_options)
        except PageSearchError:
            raise
        except Exception as e:
            logger.error(
                "Search failed",
                document_id=document_id,
                error=str(e),
                exc_info=True
            )
            raise InternalSearchError(
                f"Error searching document: {e}",
                {"document_id": document_id}
            ) from e

        # Stable: equal scores keep discovery order
        results.sort(key=lambda result: result.score, reverse=True)

        execution_time = (time.time() - start_time) * 1000

        logger.info(
            "Search completed",
            document_id=document_id,
            pages=len(pages),
            total_results=len(results),
            fuzzy=search_options.fuzzy_match,
            execution_time_ms=round(execution_time, 2)
        )

        return SearchResponse(
            results=results,
            metadata=SearchMetadata(
                document_name=document.name,
                total_results=len(results),
                search_options=search_options,
                execution_time_ms=execution_time
            )
        )

    def _validate(
        self,
        document_id: Optional[str],
        search_text: Optional[str],
        options: Union[SearchOptions, Dict[str, Any], None]
    ) -> SearchOptions:
        """Reject bad requests before any document is fetched."""
        if not isinstance(search_text, str) or not search_text.strip():
            raise InputError("search text required")

        if not isinstance(document_id, str) or not document_id.strip():
            raise InputError("document id required")

        if self.max_query_length is not None and len(search_text) > self.max_query_length:
            raise InputError(
                f"search text too long, maximum length is {self.max_query_length} characters",
                {"length": len(search_text), "max_length": self.max_query_length}
            )

        if options is None:
            return SearchOptions()
        if isinstance(options, SearchOptions):
            return options

        try:
            return SearchOptions.model_validate(options)
        except ValidationError as e:
            raise InputError(
                "invalid search options",
                {"errors": e.errors(include_url=False, include_context=False, include_input=False)}
            ) from e

    def _scan_pages(
        self,
        pages: List[Page],
        search_text: str,
        options: SearchOptions
    ) -> List[SearchResult]:
        """Collect results page by page until the result budget is spent."""
        query = self.normalizer.normalize(search_text, options.case_sensitive)
        results: List[SearchResult] = []

        for page in pages:
            if len(results) >= options.max_results:
                logger.debug("Result budget reached", page_number=page.number)
                break

            if not page.text:
                continue

            if self.max_page_length is not None and len(page.text) > self.max_page_length:
                raise InputError(
                    f"page {page.number} too long, maximum length is {self.max_page_length} characters",
                    {"page_number": page.number, "length": len(page.text)}
                )

            normalized_text = self.normalizer.normalize(page.text, options.case_sensitive)
            candidates = self.match_finder.find(
                normalized_text,
                query,
                fuzzy=options.fuzzy_match,
                whole_word=options.whole_word,
                original_text=page.text
            )

            for candidate in candidates:
                if len(results) >= options.max_results:
                    break

                window = extract_context(
                    page.text,
                    candidate.offset,
                    candidate.length,
                    options.context_length
                )
                results.append(
                    SearchResult(
                        page_number=page.number,
                        text=MatchText(before=window.before, match=window.match, after=window.after),
                        position=MatchPosition(start=window.start, end=window.end),
                        score=candidate.score
                    )
                )

        return results
