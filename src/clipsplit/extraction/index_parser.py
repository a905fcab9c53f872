"""Table-of-contents recovery from the leading pages of a bundle.

Index rows look like ``Alpha Report .......... 5``: a title, a dotted leader
and the page the article starts on. Only the first pages of the bundle are
scanned, and candidate rows are filtered through a set of title checks that
reject page furniture and stray numbers.
"""

from __future__ import annotations

import logging
import re
from typing import Sequence

from clipsplit.extraction.config import ExtractionSettings
from clipsplit.extraction.models import IndexEntry, Page
from clipsplit.extraction.normalization import normalize_whitespace, strip_page_boilerplate

logger = logging.getLogger(__name__)

_LEADER_RE = re.compile(r"\.{2,}\s*(\d+)")
_DOT_RUN_RE = re.compile(r"\.{3,}")


def _exclusion_pattern(words: Sequence[str]) -> re.Pattern[str] | None:
    if not words:
        return None
    return re.compile("|".join(re.escape(word) for word in words))


def clean_title(raw: str) -> str:
    """Collapse dotted runs and whitespace inside a raw title fragment."""

    return normalize_whitespace(_DOT_RUN_RE.sub(" ", raw))


def _alpha_ratio(text: str) -> float:
    if not text:
        return 0.0
    return sum(1 for char in text if char.isalpha()) / len(text)


def is_valid_title(
    title: str,
    settings: ExtractionSettings,
    *,
    exclusions: re.Pattern[str] | None = None,
) -> bool:
    """Return True when a cleaned title looks like an article headline.

    Exclusion terms match anywhere in the title, so "Pageant" is rejected
    along with "Page".
    """

    if len(title) < settings.min_title_chars:
        return False
    if exclusions is None:
        exclusions = _exclusion_pattern(settings.title_exclusions)
    if exclusions is not None and exclusions.search(title):
        return False
    return _alpha_ratio(title) >= settings.min_title_alpha_ratio


def parse_index_page(
    text: str,
    settings: ExtractionSettings,
    *,
    exclusions: re.Pattern[str] | None = None,
) -> list[IndexEntry]:
    """Return index rows found in one page, in the order they appear."""

    if exclusions is None:
        exclusions = _exclusion_pattern(settings.title_exclusions)

    working = strip_page_boilerplate(text)
    entries: list[IndexEntry] = []
    previous_end = 0

    for match in _LEADER_RE.finditer(working):
        raw_title = working[previous_end : match.start()]
        previous_end = match.end()

        digits = match.group(1)
        if len(digits) > len(str(settings.max_index_page)):
            continue
        start_page = int(digits)
        if not settings.accepts_index_page(start_page):
            continue

        title = clean_title(raw_title)
        if not is_valid_title(title, settings, exclusions=exclusions):
            logger.debug("Rejected index title %r (page %d)", title, start_page)
            continue
        entries.append(IndexEntry(title=title, start_page=start_page))

    return entries


def parse_index(pages: Sequence[Page], settings: ExtractionSettings | None = None) -> list[IndexEntry]:
    """Collect, deduplicate and order index entries from the leading pages."""

    settings = settings or ExtractionSettings()
    exclusions = _exclusion_pattern(settings.title_exclusions)

    collected: list[IndexEntry] = []
    for page in pages[: settings.index_page_window]:
        collected.extend(parse_index_page(page.text, settings, exclusions=exclusions))

    unique = list(dict.fromkeys(collected))
    unique.sort(key=lambda entry: entry.start_page)

    if not unique:
        logger.warning("No index entries found in the first %d pages", settings.index_page_window)
    return unique
