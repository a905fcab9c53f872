"""TXT adapter for bundles already converted to plain text."""

from __future__ import annotations

from pathlib import Path

from charset_normalizer import from_bytes

from clipsplit.extraction.models import RawDocument

_FORM_FEED = "\f"


class TXTAdapter:
    """Decode plain-text bundle dumps with charset detection."""

    def supports(self, path: Path, sniffed_bytes: bytes | None = None) -> bool:
        if path.suffix.lower() == ".txt":
            return True
        if sniffed_bytes is None:
            return False

        if path.suffix.lower() == ".pdf":
            return False
        if sniffed_bytes.lstrip().startswith(b"%PDF-"):
            return False

        return b"\x00" not in sniffed_bytes

    def extract(self, path: Path) -> RawDocument:
        raw = path.read_bytes()
        encoding = self._detect_encoding(raw)
        text = raw.decode(encoding)
        # pdftotext-style dumps separate sheets with form feeds
        page_count = text.rstrip(_FORM_FEED).count(_FORM_FEED) + 1
        return RawDocument(source_path=str(path), text=text, page_count=page_count)

    def _detect_encoding(self, raw: bytes) -> str:
        best = from_bytes(raw).best()
        if best and best.encoding:
            return best.encoding

        for fallback in ("utf-8", "cp1252"):
            try:
                raw.decode(fallback)
                return fallback
            except UnicodeDecodeError:
                continue
        raise ValueError("Could not detect TXT encoding")
