"""Splitting of extracted document text into numbered pages."""

from typing import List, NamedTuple

from .exceptions import InputError

PAGE_MARKER = "[PAGE "
HEADER_END = "]\n"


class Page(NamedTuple):
    """A single page of extracted text."""

    number: int
    label: str
    text: str


def split_pages(text: str) -> List[Page]:
    """
    Split a marked-up text blob into pages.

    Pages are delimited by ``[PAGE <label>]\\n`` headers. Anything before the
    first marker is preamble and dropped. Pages are numbered in scan order,
    the label is never parsed. A block without a ``]\\n`` terminator yields a
    page with empty text.

    Args:
        text: Extracted document text

    Returns:
        Pages in document order

    Raises:
        InputError: If text is not a non-empty string
    """
    if not isinstance(text, str) or not text:
        raise InputError("document text must be a non-empty string")

    pages = []
    fragments = text.split(PAGE_MARKER)[1:]

    for number, fragment in enumerate(fragments, start=1):
        label, separator, body = fragment.partition(HEADER_END)
        if not separator:
            # Malformed header: keep the page slot, drop its content
            pages.append(Page(number=number, label=fragment.split("]", 1)[0], text=""))
            continue
        pages.append(Page(number=number, label=label, text=body))

    return pages
