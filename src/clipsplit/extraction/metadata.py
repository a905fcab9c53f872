"""Positional metadata recovery around an article's word-count line.

Bundle articles open with a short header block where the word count acts as
an anchor::

    Jane Smith              <- author (line before)
    1,204 words             <- anchor
    1 September 2025        <- publish date (line after)
    04:37 PM                <- optional time of day
    ABC News                <- source

Every helper here is a pure function over an immutable tuple of lines so
each heuristic can be exercised on its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
import re
from typing import Callable

from clipsplit.extraction.config import ExtractionSettings
from clipsplit.extraction.models import ArticleMetadata

_WORD_COUNT_RE = re.compile(r"^(\d{1,3}(?:,\d{3}){1,5}|\d{1,18})\s+words$", re.IGNORECASE)
_DATE_RE = re.compile(r"^(\d{1,2})\s+([A-Za-z]+)\s+(\d{4})$")
_TIME_RE = re.compile(r"^\d{1,2}:\d{2}(?:\s*[AP]M)?$", re.IGNORECASE)
_NUMERIC_RE = re.compile(r"^[\d\s.,:/-]+$")
_PRESS_RE = re.compile(r"\bPress\b")

_MONTHS = {
    name: number
    for number, name in enumerate(
        (
            "january",
            "february",
            "march",
            "april",
            "may",
            "june",
            "july",
            "august",
            "september",
            "october",
            "november",
            "december",
        ),
        start=1,
    )
}


def split_lines(text: str) -> tuple[str, ...]:
    """Return the non-empty, trimmed lines of *text*."""

    return tuple(stripped for stripped in (line.strip() for line in text.splitlines()) if stripped)


def parse_word_count(line: str) -> int | None:
    match = _WORD_COUNT_RE.match(line.strip())
    if match is None:
        return None
    return int(match.group(1).replace(",", ""))


def find_word_count_line(lines: tuple[str, ...], window: int) -> tuple[int, int] | None:
    """Return (line index, word count) for the first anchor in the scan window."""

    for index, line in enumerate(lines[:window]):
        count = parse_word_count(line)
        if count is not None:
            return index, count
    return None


def parse_publish_date(value: str) -> str:
    """Normalize "D Month YYYY" to ISO format; other values pass through unchanged."""

    match = _DATE_RE.match(value.strip())
    if match is None:
        return value
    day, month_name, year = match.groups()
    month = _MONTHS.get(month_name.lower())
    if month is None:
        return value
    try:
        return date(int(year), month, int(day)).isoformat()
    except ValueError:
        return value


def is_time_line(line: str) -> bool:
    return bool(_TIME_RE.match(line.strip()))


def is_valid_source(line: str) -> bool:
    """Plausible outlet name: long enough, alphabetic, not a time or a number."""

    candidate = line.strip()
    if len(candidate) < 3:
        return False
    if sum(1 for char in candidate if char.isalpha()) < 2:
        return False
    if is_time_line(candidate):
        return False
    return not _NUMERIC_RE.match(candidate)


def looks_like_source(line: str) -> bool:
    """Wire-service style names such as "Australian Associated Press"."""

    return bool(_PRESS_RE.search(line)) and len(line.split()) > 2


def is_single_word(line: str) -> bool:
    return len(line.split()) <= 1


@dataclass(frozen=True, slots=True)
class HeuristicRules:
    """Predicates used to tell sources and authors apart; each can be replaced."""

    is_time_line: Callable[[str], bool] = is_time_line
    is_valid_source: Callable[[str], bool] = is_valid_source
    looks_like_source: Callable[[str], bool] = looks_like_source
    is_single_word: Callable[[str], bool] = is_single_word


DEFAULT_RULES = HeuristicRules()


def pick_source(lines: tuple[str, ...], anchor: int, rules: HeuristicRules = DEFAULT_RULES) -> str | None:
    """Source sits two lines below the anchor, or three when a time line intervenes."""

    position = anchor + 2
    if position >= len(lines):
        return None
    if rules.is_time_line(lines[position]):
        position += 1
        if position >= len(lines):
            return None
    candidate = lines[position]
    if rules.is_time_line(candidate) or not rules.is_valid_source(candidate):
        return None
    return candidate


def pick_author(
    lines: tuple[str, ...],
    anchor: int,
    title: str,
    rules: HeuristicRules = DEFAULT_RULES,
) -> str | None:
    if anchor == 0:
        return None
    line = lines[anchor - 1]
    if line == title:
        return None
    candidate = line.split("|", 1)[0].strip() if "|" in line else line
    if not candidate or candidate == title:
        return None
    if rules.is_single_word(candidate):
        return None
    if rules.looks_like_source(candidate):
        return None
    return candidate


def locate_metadata(
    lines: tuple[str, ...],
    title: str,
    *,
    window: int,
    rules: HeuristicRules = DEFAULT_RULES,
) -> ArticleMetadata | None:
    """Return metadata anchored on the first word-count line, or None without one."""

    found = find_word_count_line(lines, window)
    if found is None:
        return None
    anchor, word_count = found

    publish_date = parse_publish_date(lines[anchor + 1]) if anchor + 1 < len(lines) else None
    return ArticleMetadata(
        source=pick_source(lines, anchor, rules),
        author=pick_author(lines, anchor, title, rules),
        publish_date=publish_date,
        word_count=word_count,
    )


def extract_metadata(
    text: str,
    title: str,
    settings: ExtractionSettings | None = None,
    rules: HeuristicRules = DEFAULT_RULES,
) -> ArticleMetadata:
    """Recover whatever metadata the article header carries; missing fields stay None."""

    settings = settings or ExtractionSettings()
    located = locate_metadata(split_lines(text), title, window=settings.metadata_line_window, rules=rules)
    return located if located is not None else ArticleMetadata()
