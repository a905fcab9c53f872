"""Split a flat bundle text stream into pages at "Page N of M" markers."""

from __future__ import annotations

import logging
import re

from clipsplit.extraction.models import Page

logger = logging.getLogger(__name__)

# Longer digit runs are not page numbers and do not open a page.
PAGE_MARKER_RE = re.compile(r"Page (\d{1,9}) of (\d+)")


def split_pages(text: str, page_count: int | None = None) -> list[Page]:
    """Return pages in stream order.

    Each marker opens a page that runs up to the next marker. Text that
    precedes the first marker is kept on the first page so the pages always
    concatenate back to *text*. Without any marker the whole stream becomes
    page 1. *page_count* is advisory and only reported.
    """

    if not text:
        return []

    matches = list(PAGE_MARKER_RE.finditer(text))
    if not matches:
        logger.debug("No page markers found; treating stream as a single page")
        return [Page(number=1, text=text)]

    pages: list[Page] = []
    for position, match in enumerate(matches):
        start = 0 if position == 0 else match.start()
        end = matches[position + 1].start() if position + 1 < len(matches) else len(text)
        pages.append(Page(number=int(match.group(1)), text=text[start:end]))

    if page_count is not None and page_count != len(pages):
        logger.debug("Segmented %d pages; upstream reported %d", len(pages), page_count)
    return pages
