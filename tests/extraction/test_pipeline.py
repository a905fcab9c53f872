from __future__ import annotations

from dataclasses import replace
import logging

from clipsplit.extraction.config import ExtractionSettings
from clipsplit.extraction.metadata import DEFAULT_RULES
from clipsplit.extraction.pipeline import ArticleExtractor, extract_articles

_HEADER = "Page {number} of {total} © 2025 Factiva, Inc. All rights reserved.\n"


def _bundle() -> str:
    return (
        _HEADER.format(number=1, total=3)
        + "Alpha Report .......... 2\n"
        + "Beta Notes .......... 3\n"
        + _HEADER.format(number=2, total=3)
        + "Alpha Report\n"
        + "Jane Smith\n"
        + "1,204 words\n"
        + "1 September 2025\n"
        + "ABC News\n"
        + "English\n"
        + "The first article body talks about rates.\n"
        + "Document ABCNEW0020250901el91000bq\n"
        + _HEADER.format(number=3, total=3)
        + "Beta Notes\n"
        + "John Doe | Staff Writer\n"
        + "845 words\n"
        + "2 September 2025\n"
        + "04:37 PM\n"
        + "The Guardian\n"
        + "English\n"
        + "The second article body covers the weather.\n"
    )


def test_three_page_bundle_yields_two_complete_articles() -> None:
    result = extract_articles(_bundle(), 3)

    assert result.discarded.total == 0
    assert result.page_count == 3
    assert result.index_entry_count == 2
    assert result.advisory_page_count == 3
    assert [article.title for article in result.articles] == ["Alpha Report", "Beta Notes"]

    alpha, beta = result.articles
    assert alpha.page_number == 2
    assert (alpha.word_count, alpha.publish_date, alpha.source, alpha.author) == (
        1204,
        "2025-09-01",
        "ABC News",
        "Jane Smith",
    )
    assert (beta.word_count, beta.publish_date, beta.source, beta.author) == (
        845,
        "2025-09-02",
        "The Guardian",
        "John Doe",
    )


def test_article_text_is_normalized() -> None:
    alpha = extract_articles(_bundle()).articles[0]

    assert "Factiva" not in alpha.text_content
    assert "Document ABCNEW" not in alpha.text_content
    assert "\nEnglish\n" not in alpha.text_content
    assert alpha.text_content.startswith("Alpha Report\nJane Smith\n1,204 words")
    assert alpha.text_content.endswith("The first article body talks about rates.")


def test_records_follow_output_contract() -> None:
    record = extract_articles(_bundle()).articles[1].to_record()

    assert record == {
        "title": "Beta Notes",
        "pageNumber": 3,
        "textContent": record["textContent"],
        "source": "The Guardian",
        "author": "John Doe",
        "publishDate": "2025-09-02",
        "wordCount": 845,
    }
    assert record["textContent"]


def test_bundle_without_index_returns_empty_result() -> None:
    result = extract_articles("Page 1 of 1\nJust a page of prose.", 1)

    assert result.articles == []
    assert result.index_entry_count == 0
    assert result.discarded.total == 0


def test_empty_stream_returns_empty_result() -> None:
    result = extract_articles("", 0)

    assert result.articles == []
    assert result.page_count == 0


def test_oversized_span_is_discarded_and_reported() -> None:
    settings = ExtractionSettings(max_article_chars=50)

    result = ArticleExtractor(settings).extract(_bundle(), 3)

    assert result.articles == []
    assert result.discarded.oversized == 2


def test_entry_without_pages_is_discarded_as_empty() -> None:
    text = "Page 1 of 2\nLost Story .... 40\nPage 2 of 2\nSome unrelated text."

    result = extract_articles(text)

    assert result.articles == []
    assert result.discarded.empty == 1


def test_parallel_and_sequential_runs_agree() -> None:
    sequential = ArticleExtractor(ExtractionSettings(max_workers=1)).extract(_bundle())
    parallel = ArticleExtractor(ExtractionSettings(max_workers=8)).extract(_bundle())

    assert [article.to_record() for article in parallel.articles] == [
        article.to_record() for article in sequential.articles
    ]


def test_custom_rules_reach_metadata_stage() -> None:
    rules = replace(DEFAULT_RULES, is_valid_source=lambda line: False)

    result = ArticleExtractor(rules=rules).extract(_bundle())

    assert all(article.source is None for article in result.articles)
    assert all(article.word_count for article in result.articles)


def test_run_is_logged(caplog: object) -> None:
    with caplog.at_level(logging.INFO, logger="clipsplit.extraction.pipeline"):
        extract_articles(_bundle())

    assert "found 2 index entries" in caplog.text
    assert "Accepted 2 articles, discarded 0" in caplog.text


def test_oversized_digit_runs_do_not_abort_extraction() -> None:
    for text in ("Page " + "9" * 5000 + " of 3\nbody", "Some Story Title .... " + "7" * 5000):
        result = extract_articles(text)

        assert result.articles == []
        assert result.index_entry_count == 0

    bundle = "Story Title .... 2\nPage 2 of 2\nStory Title\n" + "1" * 5000 + " words\nbody"
    result = extract_articles(bundle)

    assert [article.title for article in result.articles] == ["Story Title"]
    assert result.articles[0].word_count is None
