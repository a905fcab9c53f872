"""Orchestrates the reconstruction stages for one bundle."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import logging

from clipsplit.extraction.config import ExtractionSettings
from clipsplit.extraction.index_parser import parse_index
from clipsplit.extraction.metadata import DEFAULT_RULES, HeuristicRules, extract_metadata
from clipsplit.extraction.models import Article, ArticleSpan, ExtractionResult
from clipsplit.extraction.normalization import normalize_article_text
from clipsplit.extraction.segmentation import split_pages
from clipsplit.extraction.spans import build_spans
from clipsplit.extraction.validation import filter_articles

logger = logging.getLogger(__name__)


class ArticleExtractor:
    """Turn a decoded bundle stream into validated articles with metadata."""

    def __init__(
        self,
        settings: ExtractionSettings | None = None,
        *,
        rules: HeuristicRules = DEFAULT_RULES,
    ) -> None:
        self._settings = settings or ExtractionSettings()
        self._rules = rules

    @property
    def settings(self) -> ExtractionSettings:
        return self._settings

    def extract(self, full_text: str, page_count: int | None = None) -> ExtractionResult:
        """Run every stage in order; degraded input yields fewer articles, never an error."""

        pages = split_pages(full_text, page_count)
        entries = parse_index(pages, self._settings) if pages else []
        spans = build_spans(entries, pages)
        logger.info("Segmented %d pages, found %d index entries", len(pages), len(entries))

        articles = self._finish_articles(spans)
        accepted, discarded = filter_articles(articles, self._settings.max_article_chars)
        logger.info("Accepted %d articles, discarded %d", len(accepted), discarded.total)

        return ExtractionResult(
            articles=accepted,
            discarded=discarded,
            page_count=len(pages),
            index_entry_count=len(entries),
            advisory_page_count=page_count,
        )

    def _finish_articles(self, spans: list[ArticleSpan]) -> list[Article]:
        workers = min(self._settings.max_workers, len(spans))
        if workers <= 1:
            return [self._finish_article(span) for span in spans]

        # map() yields in submission order, so index order is preserved.
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(self._finish_article, spans))

    def _finish_article(self, span: ArticleSpan) -> Article:
        metadata = extract_metadata(span.text, span.title, self._settings, self._rules)
        return Article(
            title=span.title,
            page_number=span.start_page,
            text_content=normalize_article_text(span.text),
            metadata=metadata,
        )


def extract_articles(
    full_text: str,
    page_count: int | None = None,
    *,
    settings: ExtractionSettings | None = None,
) -> ExtractionResult:
    """Convenience wrapper around :class:`ArticleExtractor`."""

    return ArticleExtractor(settings).extract(full_text, page_count)
