"""Carve per-article page ranges out of the segmented bundle."""

from __future__ import annotations

from typing import Sequence

from clipsplit.extraction.models import ArticleSpan, IndexEntry, Page

PAGE_SEPARATOR = "\n\n"


def page_ranges(entries: Sequence[IndexEntry], last_page: int) -> list[tuple[int, int]]:
    """Return inclusive (start, end) pages for entries sorted by start page.

    An entry ends one page before the next entry starts; the last entry runs
    to *last_page*. End pages are clamped so a range never ends before it
    starts.
    """

    ranges: list[tuple[int, int]] = []
    for position, entry in enumerate(entries):
        if position + 1 < len(entries):
            end = entries[position + 1].start_page - 1
        else:
            end = last_page
        ranges.append((entry.start_page, max(end, entry.start_page)))
    return ranges


def build_spans(entries: Sequence[IndexEntry], pages: Sequence[Page]) -> list[ArticleSpan]:
    if not entries or not pages:
        return []

    ordered_pages = sorted(pages, key=lambda page: page.number)
    last_page = ordered_pages[-1].number

    spans: list[ArticleSpan] = []
    for entry, (start, end) in zip(entries, page_ranges(entries, last_page)):
        text = PAGE_SEPARATOR.join(page.text for page in ordered_pages if start <= page.number <= end)
        spans.append(ArticleSpan(title=entry.title, start_page=start, end_page=end, text=text))
    return spans
