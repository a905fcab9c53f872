"""CSV rendering of reconstructed articles."""

from __future__ import annotations

import csv
from typing import Iterable, TextIO

from clipsplit.extraction.models import Article

CSV_COLUMNS = (
    "Source File",
    "Title",
    "Author",
    "Source",
    "Publication Date",
    "Word Count",
    "Page Number",
    "Full Text",
)

_UNKNOWN = "Unknown"


def article_row(article: Article, source_file: str = "") -> dict[str, str]:
    return {
        "Source File": source_file,
        "Title": article.title,
        "Author": article.author or _UNKNOWN,
        "Source": article.source or _UNKNOWN,
        "Publication Date": article.publish_date or "",
        "Word Count": "" if article.word_count is None else str(article.word_count),
        "Page Number": str(article.page_number),
        "Full Text": article.text_content,
    }


def write_articles_csv(rows: Iterable[tuple[str, Article]], stream: TextIO) -> int:
    """Write (source file, article) pairs as CSV and return the row count."""

    writer = csv.DictWriter(stream, fieldnames=CSV_COLUMNS)
    writer.writeheader()
    written = 0
    for source_file, article in rows:
        writer.writerow(article_row(article, source_file))
        written += 1
    return written
