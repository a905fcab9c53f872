"""Boilerplate removal and whitespace normalization for article text."""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")
_HORIZONTAL_WS_RE = re.compile(r"[^\S\n]+")
_NEWLINE_EDGE_RE = re.compile(r" *\n *")
_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")

# Header printed on every page: "Page 3 of 50 © 2025 Factiva, Inc. All rights reserved."
_PAGE_HEADER_RE = re.compile(
    r"Page\s+\d+\s+of\s+\d+\s*©\s*\d{4}\s+[^\n]*?All\s+rights\s+reserved\.?"
)
_CREDIT_LINE_RE = re.compile(r"^[^\S\n]*©\s*\d{4}\b[^\n]*\bprovided\s+by\b[^\n]*$", re.MULTILINE)
_COPYRIGHT_RIGHTS_RE = re.compile(r"©\s*\d{4}\s+[^\n©]*?All\s+rights\s+reserved\.?")
_PAGE_MARKER_RE = re.compile(r"Page\s+\d+\s+of\s+\d+")
_RIGHTS_RE = re.compile(r"^[^\S\n]*All\s+rights\s+reserved\.[^\S\n]*$", re.MULTILINE)
_COPYRIGHT_RE = re.compile(r"©\s*\d{4}\s+[^\n.]*\.")

_ISSN_LINE_RE = re.compile(r"^[^\S\n]*ISSN:?[^\S\n]*\d{4}-?\d{3}[\dXx][^\S\n]*$", re.MULTILINE)
_VOLUME_LINE_RE = re.compile(
    r"^[^\S\n]*(?:Volume|Vol\.)[^\S\n]*\d+;[^\S\n]*Issue[^\S\n]*\d+[^\S\n]*$",
    re.MULTILINE,
)
_DOCUMENT_LINE_RE = re.compile(r"^[^\S\n]*Document[^\S\n]+[A-Za-z0-9]+[^\S\n]*$", re.MULTILINE)
_LANGUAGE_LINE_RE = re.compile(r"^[^\S\n]*English[^\S\n]*$", re.MULTILINE)
_NUMERIC_RANGE_LINE_RE = re.compile(r"^[^\S\n]*\d+[^\S\n]*[-–][^\S\n]*\d+[^\S\n]*$", re.MULTILINE)

# The combined header must run before its fragments.
HEADER_RULES: tuple[re.Pattern[str], ...] = (
    _PAGE_HEADER_RE,
    _CREDIT_LINE_RE,
    _COPYRIGHT_RIGHTS_RE,
    _PAGE_MARKER_RE,
    _COPYRIGHT_RE,
    _RIGHTS_RE,
)

FOOTER_RULES: tuple[re.Pattern[str], ...] = (
    _ISSN_LINE_RE,
    _VOLUME_LINE_RE,
    _DOCUMENT_LINE_RE,
    _LANGUAGE_LINE_RE,
    _NUMERIC_RANGE_LINE_RE,
)

BOILERPLATE_RULES: tuple[re.Pattern[str], ...] = HEADER_RULES + FOOTER_RULES


def normalize_whitespace(text: str) -> str:
    """Collapse repeated whitespace and trim boundaries."""

    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize_layout(text: str) -> str:
    """Collapse horizontal runs and blank-line runs while keeping paragraphs."""

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _HORIZONTAL_WS_RE.sub(" ", text)
    text = _NEWLINE_EDGE_RE.sub("\n", text)
    text = _EXCESS_NEWLINES_RE.sub("\n\n", text)
    return text.strip()


def remove_patterns(text: str, rules: tuple[re.Pattern[str], ...]) -> str:
    """Delete every match of each rule, in order, until nothing more matches.

    One removal can expose another, e.g. a copyright tail trailing an
    "All rights reserved." line.
    """

    while True:
        cleaned = text
        for rule in rules:
            cleaned = rule.sub("", cleaned)
        if cleaned == text:
            return cleaned
        text = cleaned


def strip_page_boilerplate(text: str) -> str:
    """Remove copyright and page-marker text from a working copy of a page."""

    return remove_patterns(text, HEADER_RULES)


def normalize_article_text(text: str) -> str:
    """Return article text without producer boilerplate and with tidy whitespace."""

    return normalize_layout(remove_patterns(text, BOILERPLATE_RULES))
