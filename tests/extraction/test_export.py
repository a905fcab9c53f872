from __future__ import annotations

import csv
import io

from clipsplit.extraction.export import CSV_COLUMNS, write_articles_csv
from clipsplit.extraction.models import Article, ArticleMetadata


def test_csv_export_quotes_text_and_fills_unknowns() -> None:
    articles = [
        Article(
            title="Rates, Rents and Rows",
            page_number=4,
            text_content='Line one.\n"Quoted" line two.',
            metadata=ArticleMetadata(source="ABC News", author="Jane Smith", publish_date="2025-09-01", word_count=1204),
        ),
        Article(title="Bare Story", page_number=9, text_content="Body."),
    ]
    stream = io.StringIO()

    written = write_articles_csv((("bundle.pdf", article) for article in articles), stream)

    stream.seek(0)
    rows = list(csv.DictReader(stream))
    assert written == 2
    assert tuple(rows[0]) == CSV_COLUMNS
    assert rows[0]["Title"] == "Rates, Rents and Rows"
    assert rows[0]["Full Text"] == 'Line one.\n"Quoted" line two.'
    assert rows[0]["Word Count"] == "1204"
    assert rows[1]["Author"] == "Unknown"
    assert rows[1]["Source"] == "Unknown"
    assert rows[1]["Publication Date"] == ""
    assert rows[1]["Page Number"] == "9"
    assert rows[1]["Source File"] == "bundle.pdf"
