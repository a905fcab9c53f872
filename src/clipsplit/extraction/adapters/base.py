"""Shared adapter contract for upstream text decoding."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from clipsplit.extraction.models import RawDocument


@runtime_checkable
class TextSourceAdapter(Protocol):
    """Protocol that every bundle decoder must implement."""

    def supports(self, path: Path, sniffed_bytes: bytes | None = None) -> bool:
        """Return True when this adapter can decode the given file."""

    def extract(self, path: Path) -> RawDocument:
        """Decode a bundle into a single character stream plus page count."""
