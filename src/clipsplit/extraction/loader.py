"""Routing entrypoint that decodes bundle files through registered adapters."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from clipsplit.extraction.adapters.base import TextSourceAdapter
from clipsplit.extraction.models import RawDocument


@dataclass(slots=True)
class DecodeError(Exception):
    """Upstream decoding failure; the only error surfaced to callers."""

    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.message} (path={self.path})"


class DocumentLoader:
    """Resolve the right adapter and return the decoded bundle stream."""

    def __init__(self, sniff_bytes: int = 4096) -> None:
        self._sniff_bytes = sniff_bytes
        self._adapter_map: dict[str, TextSourceAdapter] = {}

    @property
    def adapter_map(self) -> dict[str, TextSourceAdapter]:
        """Registered adapters keyed by adapter name."""

        return dict(self._adapter_map)

    def register_adapter(self, name: str, adapter: TextSourceAdapter) -> None:
        if not name:
            raise ValueError("Adapter name cannot be empty")
        self._adapter_map[name] = adapter

    def load(self, path: str | Path) -> RawDocument:
        source = Path(path)
        sniffed = self._sniff(source)

        for adapter in self._adapter_map.values():
            if adapter.supports(source, sniffed):
                try:
                    document = adapter.extract(source)
                except Exception as exc:
                    raise DecodeError(source, f"Adapter extraction failed: {exc}") from exc

                if not isinstance(document, RawDocument):
                    raise DecodeError(source, "Adapter returned non-canonical output")
                return document

        raise DecodeError(source, "No adapter registered for file content")

    def _sniff(self, path: Path) -> bytes:
        try:
            with path.open("rb") as handle:
                return handle.read(self._sniff_bytes)
        except OSError as exc:
            raise DecodeError(path, f"Failed to read source file: {exc}") from exc
