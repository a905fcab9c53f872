"""Upstream text-source adapters and their contract."""

import logging

from .base import TextSourceAdapter

logger = logging.getLogger(__name__)

try:
    from .pdf_adapter import PDFAdapter
except ImportError:
    PDFAdapter = None
    logger.warning("PDF support unavailable: install 'pymupdf'")

try:
    from .txt_adapter import TXTAdapter
except ImportError:
    TXTAdapter = None
    logger.warning("TXT support unavailable: install 'charset-normalizer'")


def build_default_adapters() -> dict[str, TextSourceAdapter]:
    """Return the default adapter map keyed by format name."""
    adapters: dict[str, TextSourceAdapter] = {}
    if PDFAdapter is not None:
        adapters["pdf"] = PDFAdapter()
    if TXTAdapter is not None:
        adapters["txt"] = TXTAdapter()
    return adapters


__all__ = [
    "TextSourceAdapter",
    "PDFAdapter",
    "TXTAdapter",
    "build_default_adapters",
]
