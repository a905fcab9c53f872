"""Runtime configuration for the article reconstruction pipeline."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping


DEFAULT_INDEX_PAGE_WINDOW = 10
DEFAULT_MIN_INDEX_PAGE = 1
DEFAULT_MAX_INDEX_PAGE = 500
DEFAULT_MIN_TITLE_CHARS = 5
DEFAULT_MIN_TITLE_ALPHA_RATIO = 0.1
DEFAULT_METADATA_LINE_WINDOW = 20
DEFAULT_MAX_ARTICLE_CHARS = 50_000
DEFAULT_MAX_WORKERS = 4
DEFAULT_TITLE_EXCLUSIONS: tuple[str, ...] = (
    "Factiva",
    "Dow Jones",
    "Page",
    "Document",
    "Unknown",
    "All rights reserved",
    "Rights Reserved",
)


def _parse_positive_int(*, name: str, raw_value: str, minimum: int = 1) -> int:
    try:
        value = int(raw_value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer") from exc
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return value


def _parse_ratio(*, name: str, raw_value: str) -> float:
    try:
        value = float(raw_value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number") from exc
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be between 0 and 1")
    return value


def _parse_exclusions(raw_value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw_value.split(",") if part.strip())


@dataclass(frozen=True, slots=True)
class ExtractionSettings:
    """Validated tuning values for the newsclip bundle conventions."""

    index_page_window: int = DEFAULT_INDEX_PAGE_WINDOW
    min_index_page: int = DEFAULT_MIN_INDEX_PAGE
    max_index_page: int = DEFAULT_MAX_INDEX_PAGE
    min_title_chars: int = DEFAULT_MIN_TITLE_CHARS
    min_title_alpha_ratio: float = DEFAULT_MIN_TITLE_ALPHA_RATIO
    metadata_line_window: int = DEFAULT_METADATA_LINE_WINDOW
    max_article_chars: int = DEFAULT_MAX_ARTICLE_CHARS
    max_workers: int = DEFAULT_MAX_WORKERS
    title_exclusions: tuple[str, ...] = DEFAULT_TITLE_EXCLUSIONS

    def __post_init__(self) -> None:
        if self.max_index_page <= self.min_index_page:
            raise ValueError("max_index_page must be greater than min_index_page")
        if not 0.0 <= self.min_title_alpha_ratio <= 1.0:
            raise ValueError("min_title_alpha_ratio must be between 0 and 1")

    def accepts_index_page(self, number: int) -> bool:
        """Return True when *number* lies strictly inside the index page bounds."""

        return self.min_index_page < number < self.max_index_page

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ExtractionSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        def _raw(name: str, default: object) -> str:
            value = source.get(name, str(default)).strip()
            if not value:
                raise ValueError(f"{name} cannot be empty")
            return value

        exclusions_raw = source.get("CLIPSPLIT_TITLE_EXCLUSIONS")
        if exclusions_raw is None:
            title_exclusions = DEFAULT_TITLE_EXCLUSIONS
        else:
            title_exclusions = _parse_exclusions(exclusions_raw)

        return cls(
            index_page_window=_parse_positive_int(
                name="CLIPSPLIT_INDEX_PAGE_WINDOW",
                raw_value=_raw("CLIPSPLIT_INDEX_PAGE_WINDOW", DEFAULT_INDEX_PAGE_WINDOW),
            ),
            min_index_page=_parse_positive_int(
                name="CLIPSPLIT_MIN_INDEX_PAGE",
                raw_value=_raw("CLIPSPLIT_MIN_INDEX_PAGE", DEFAULT_MIN_INDEX_PAGE),
                minimum=0,
            ),
            max_index_page=_parse_positive_int(
                name="CLIPSPLIT_MAX_INDEX_PAGE",
                raw_value=_raw("CLIPSPLIT_MAX_INDEX_PAGE", DEFAULT_MAX_INDEX_PAGE),
                minimum=2,
            ),
            min_title_chars=_parse_positive_int(
                name="CLIPSPLIT_MIN_TITLE_CHARS",
                raw_value=_raw("CLIPSPLIT_MIN_TITLE_CHARS", DEFAULT_MIN_TITLE_CHARS),
            ),
            min_title_alpha_ratio=_parse_ratio(
                name="CLIPSPLIT_MIN_TITLE_ALPHA_RATIO",
                raw_value=_raw("CLIPSPLIT_MIN_TITLE_ALPHA_RATIO", DEFAULT_MIN_TITLE_ALPHA_RATIO),
            ),
            metadata_line_window=_parse_positive_int(
                name="CLIPSPLIT_METADATA_LINE_WINDOW",
                raw_value=_raw("CLIPSPLIT_METADATA_LINE_WINDOW", DEFAULT_METADATA_LINE_WINDOW),
            ),
            max_article_chars=_parse_positive_int(
                name="CLIPSPLIT_MAX_ARTICLE_CHARS",
                raw_value=_raw("CLIPSPLIT_MAX_ARTICLE_CHARS", DEFAULT_MAX_ARTICLE_CHARS),
                minimum=100,
            ),
            max_workers=_parse_positive_int(
                name="CLIPSPLIT_MAX_WORKERS",
                raw_value=_raw("CLIPSPLIT_MAX_WORKERS", DEFAULT_MAX_WORKERS),
            ),
            title_exclusions=title_exclusions,
        )
