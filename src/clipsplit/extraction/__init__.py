"""Article reconstruction pipeline interfaces."""

from .config import ExtractionSettings
from .loader import DecodeError, DocumentLoader
from .models import Article, ArticleMetadata, DiscardReport, ExtractionResult, RawDocument
from .pipeline import ArticleExtractor, extract_articles

__all__ = [
    "Article",
    "ArticleExtractor",
    "ArticleMetadata",
    "DecodeError",
    "DiscardReport",
    "DocumentLoader",
    "ExtractionResult",
    "ExtractionSettings",
    "RawDocument",
    "extract_articles",
]
