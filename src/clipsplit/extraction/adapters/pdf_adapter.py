"""PDF adapter flattening every page into one bundle text stream."""

from __future__ import annotations

import logging
from pathlib import Path

import pymupdf

from clipsplit.extraction.models import RawDocument

logger = logging.getLogger(__name__)

_PDF_MAGIC = b"%PDF-"


class PDFAdapter:
    """Decode a newsclip PDF export with its embedded text layer."""

    def supports(self, path: Path, sniffed_bytes: bytes | None = None) -> bool:
        if path.suffix.lower() == ".pdf":
            return True
        if sniffed_bytes is None:
            return False
        return sniffed_bytes.startswith(_PDF_MAGIC)

    def extract(self, path: Path) -> RawDocument:
        with pymupdf.open(path) as doc:
            page_texts = [page.get_text("text") for page in doc]
            page_count = doc.page_count

        if not any(text.strip() for text in page_texts):
            logger.warning("PDF %s has no embedded text layer", path.name)

        return RawDocument(source_path=str(path), text="\n".join(page_texts), page_count=page_count)
