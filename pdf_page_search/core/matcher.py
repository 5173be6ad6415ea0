"""Exact and fuzzy match scanning over a single page."""

from typing import List, NamedTuple, Optional

from .similarity import similarity

DEFAULT_FUZZY_THRESHOLD = 0.8


class MatchCandidate(NamedTuple):
    """A match location inside one page's text."""

    offset: int
    length: int
    score: float


def is_whole_word(text: str, offset: int, length: int) -> bool:
    """
    Check that a span sits on word boundaries.

    Args:
        text: Original page text
        offset: Start of the span
        length: Length of the span

    Returns:
        False if the character just before or just after the span is
        alphanumeric, True otherwise (including at text edges)
    """
    if offset > 0 and text[offset - 1].isalnum():
        return False

    end = offset + length
    if end < len(text) and text[end].isalnum():
        return False

    return True


class MatchFinder:
    """Finds candidate matches of a query in normalized page text."""

    def __init__(self, threshold: float = DEFAULT_FUZZY_THRESHOLD) -> None:
        """
        Initialize the match finder.

        Args:
            threshold: Similarity a fuzzy window must exceed to be reported
        """
        self.threshold = threshold

    def find(
        self,
        text: str,
        query: str,
        fuzzy: bool = True,
        whole_word: bool = False,
        original_text: Optional[str] = None
    ) -> List[MatchCandidate]:
        """
        Find all matches of a query in a page.

        Args:
            text: Normalized page text
            query: Normalized query
            fuzzy: Use sliding-window similarity instead of substring search
            whole_word: Drop candidates that are not on word boundaries
            original_text: Un-normalized page text used for the word boundary
                check; defaults to ``text``

        Returns:
            Candidates ordered by ascending offset
        """
        if not query or not text:
            return []

        if fuzzy:
            candidates = self._find_fuzzy(text, query)
        else:
            candidates = self._find_exact(text, query)

        if whole_word:
            boundary_text = original_text if original_text is not None else text
            candidates = [
                candidate for candidate in candidates
                if is_whole_word(boundary_text, candidate.offset, candidate.length)
            ]

        return candidates

    def _find_exact(self, text: str, query: str) -> List[MatchCandidate]:
        """Report every occurrence, overlapping ones included."""
        matches = []
        length = len(query)

        index = text.find(query)
        while index != -1:
            matches.append(MatchCandidate(offset=index, length=length, score=1.0))
            index = text.find(query, index + 1)

        return matches

    def _find_fuzzy(self, text: str, query: str) -> List[MatchCandidate]:
        """Score a query-sized window at every offset."""
        matches = []
        query_length = len(query)

        for index in range(len(text)):
            window = text[index:index + query_length]

            # Windows clamped at the text end can only lose similarity
            if len(window) / query_length <= self.threshold:
                break

            score = similarity(window, query)
            if score > self.threshold:
                matches.append(MatchCandidate(offset=index, length=len(window), score=score))

        return matches
