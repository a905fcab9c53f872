"""Data structures passed between the article reconstruction stages."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Page:
    """One physical page of the bundle as delimited by its page marker."""

    number: int
    text: str


@dataclass(frozen=True, slots=True)
class IndexEntry:
    """A (title, starting page) row recovered from the table of contents."""

    title: str
    start_page: int


@dataclass(frozen=True, slots=True)
class ArticleSpan:
    """Raw article text assembled from a contiguous range of pages."""

    title: str
    start_page: int
    end_page: int
    text: str


@dataclass(slots=True)
class ArticleMetadata:
    """Metadata recovered around the word-count marker; every field is optional."""

    source: str | None = None
    author: str | None = None
    publish_date: str | None = None
    word_count: int | None = None


@dataclass(slots=True)
class Article:
    """Final article handed to the caller after normalization and validation."""

    title: str
    page_number: int
    text_content: str
    metadata: ArticleMetadata = field(default_factory=ArticleMetadata)

    @property
    def source(self) -> str | None:
        return self.metadata.source

    @property
    def author(self) -> str | None:
        return self.metadata.author

    @property
    def publish_date(self) -> str | None:
        return self.metadata.publish_date

    @property
    def word_count(self) -> int | None:
        return self.metadata.word_count

    def to_record(self) -> dict[str, object]:
        """Render the persistence-layer record, omitting unset metadata."""

        record: dict[str, object] = {
            "title": self.title,
            "pageNumber": self.page_number,
            "textContent": self.text_content,
        }
        optional = {
            "source": self.metadata.source,
            "author": self.metadata.author,
            "publishDate": self.metadata.publish_date,
            "wordCount": self.metadata.word_count,
        }
        record.update({key: value for key, value in optional.items() if value is not None})
        return record


@dataclass(slots=True)
class DiscardReport:
    """Counts of articles dropped by the final validation gate."""

    empty: int = 0
    oversized: int = 0

    @property
    def total(self) -> int:
        return self.empty + self.oversized

    def as_dict(self) -> dict[str, int]:
        return {"empty": self.empty, "oversized": self.oversized, "total": self.total}


@dataclass(slots=True)
class ExtractionResult:
    """Outcome of one pipeline run over a single bundle."""

    articles: list[Article] = field(default_factory=list)
    discarded: DiscardReport = field(default_factory=DiscardReport)
    page_count: int = 0
    index_entry_count: int = 0
    advisory_page_count: int | None = None


@dataclass(slots=True)
class RawDocument:
    """Decoded character stream handed over by a text-source adapter."""

    source_path: str
    text: str
    page_count: int
