"""Context window extraction around a match."""

from typing import NamedTuple


class ContextWindow(NamedTuple):
    """Text around a match, split into three segments."""

    before: str
    match: str
    after: str
    start: int
    end: int


def extract_context(page_text: str, offset: int, length: int, context_length: int) -> ContextWindow:
    """
    Slice a bounded window of original text around a match.

    Offsets come from normalized text; normalization preserves length, so
    they index ``page_text`` directly. Python strings index by code point,
    so multi-byte characters are never split.

    Args:
        page_text: Original (non-normalized) page text
        offset: Match start
        length: Match length
        context_length: Maximum characters kept on each side

    Returns:
        ContextWindow with before/match/after segments and the match span
    """
    text_length = len(page_text)
    start = min(max(0, offset), text_length)
    end = min(text_length, start + max(0, length))

    context_start = max(0, start - context_length)
    context_end = min(text_length, end + context_length)

    return ContextWindow(
        before=page_text[context_start:start],
        match=page_text[start:end],
        after=page_text[end:context_end],
        start=start,
        end=end
    )
