from __future__ import annotations

from clipsplit.extraction.normalization import (
    normalize_article_text,
    normalize_layout,
    normalize_whitespace,
    strip_page_boilerplate,
)

_RAW_ARTICLE = (
    "Page 2 of 9 © 2025 Factiva, Inc. All rights reserved.\n"
    "Council Approves Budget\n"
    "Jane Smith\n"
    "1,204 words\n"
    "1 September 2025\n"
    "ABC News\n"
    "English\n"
    "The council   approved the budget on Monday.\n"
    "\n\n\n\n"
    "Page 3 of 9\n"
    "Residents will see rates rise.\n"
    "ISSN 1234-567X\n"
    "Vol. 12; Issue 3\n"
    "Volume 12; Issue 3\n"
    "14-15\n"
    "© 2025 Nine Entertainment. Content provided by NewsBank\n"
    "Document ABCNEW0020250901el91000bq\n"
)


def test_boilerplate_lines_are_removed_and_content_kept() -> None:
    cleaned = normalize_article_text(_RAW_ARTICLE)

    assert cleaned == (
        "Council Approves Budget\n"
        "Jane Smith\n"
        "1,204 words\n"
        "1 September 2025\n"
        "ABC News\n"
        "\n"
        "The council approved the budget on Monday.\n"
        "\n"
        "Residents will see rates rise."
    )


def test_normalization_is_idempotent() -> None:
    for sample in (
        _RAW_ARTICLE,
        "Body.\nAll rights reserved. © 2025 Nine Entertainment.",
        "Body.\n© 2025 Nine Entertainment. All rights reserved.\nMore body.",
    ):
        once = normalize_article_text(sample)

        assert normalize_article_text(once) == once


def test_rights_line_exposed_by_copyright_removal_is_removed() -> None:
    assert normalize_article_text("Body.\nAll rights reserved. © 2025 Nine Entertainment.") == "Body."


def test_prose_that_resembles_boilerplate_is_untouched() -> None:
    prose = (
        "The English cricket team won.\n"
        "Document review took 14-15 days.\n"
        "Volume 12 of the report was released.\n"
        "All rights reserved by the author were waived."
    )

    assert normalize_article_text(prose) == prose


def test_header_fragments_are_removed_individually() -> None:
    text = "Page 4 of 9\nBody one.\n© 2024 Factiva, Inc.\nBody two.\nAll rights reserved."

    assert normalize_article_text(text) == "Body one.\n\nBody two."


def test_strip_page_boilerplate_leaves_footer_lines() -> None:
    text = "Page 1 of 3 © 2025 Factiva, Inc. All rights reserved.\nEnglish\nStory One .... 2"

    assert strip_page_boilerplate(text) == "\nEnglish\nStory One .... 2"


def test_layout_normalization_rules() -> None:
    assert normalize_layout("  a  \t b \n\n\n\n  c  \r\n  d  ") == "a b\n\nc\nd"
    assert normalize_whitespace("  one\n\t two   ") == "one two"
