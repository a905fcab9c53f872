"""Final gate that drops empty and implausibly large articles."""

from __future__ import annotations

import logging
from typing import Iterable

from clipsplit.extraction.models import Article, DiscardReport

logger = logging.getLogger(__name__)

REASON_EMPTY = "empty"
REASON_OVERSIZED = "oversized"


def discard_reason(text: str, max_chars: int) -> str | None:
    """Return why an article's normalized text is rejected, or None to keep it."""

    if not text:
        return REASON_EMPTY
    if len(text) > max_chars:
        return REASON_OVERSIZED
    return None


def filter_articles(articles: Iterable[Article], max_chars: int) -> tuple[list[Article], DiscardReport]:
    accepted: list[Article] = []
    report = DiscardReport()

    for article in articles:
        reason = discard_reason(article.text_content, max_chars)
        if reason is None:
            accepted.append(article)
            continue

        logger.debug(
            "Discarding %r (page %d): %s, %d chars",
            article.title,
            article.page_number,
            reason,
            len(article.text_content),
        )
        if reason == REASON_EMPTY:
            report.empty += 1
        else:
            report.oversized += 1

    return accepted, report
