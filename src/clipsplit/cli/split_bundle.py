"""CLI command that splits newsclip bundles into articles."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

from dotenv import load_dotenv

from clipsplit.extraction.adapters import build_default_adapters
from clipsplit.extraction.config import ExtractionSettings
from clipsplit.extraction.export import write_articles_csv
from clipsplit.extraction.loader import DecodeError, DocumentLoader
from clipsplit.extraction.models import Article, ExtractionResult
from clipsplit.extraction.pipeline import ArticleExtractor


load_dotenv()

LOGGER = logging.getLogger(__name__)

_SUPPORTED_SUFFIXES = {".pdf", ".txt"}


def _collect_inputs(target: Path) -> list[Path]:
    if target.is_file():
        return [target]
    if target.is_dir():
        return sorted(
            path for path in target.rglob("*") if path.is_file() and path.suffix.lower() in _SUPPORTED_SUFFIXES
        )
    return []


def _build_loader() -> DocumentLoader:
    loader = DocumentLoader()
    for name, adapter in build_default_adapters().items():
        loader.register_adapter(name, adapter)
    return loader


def _result_payload(source_path: str, result: ExtractionResult) -> dict[str, object]:
    return {
        "source_path": source_path,
        "page_count": result.page_count,
        "index_entries": result.index_entry_count,
        "articles": [article.to_record() for article in result.articles],
        "discarded": result.discarded.as_dict(),
    }


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Split newsclip archive bundles into articles")
    parser.add_argument("--path", required=True, help="Bundle file or directory of bundles")
    parser.add_argument("--format", choices=("json", "csv"), default="json", help="Output format")
    parser.add_argument("--output", help="Write output to this file instead of stdout")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    source_path = Path(args.path)
    if not source_path.exists():
        LOGGER.error("path does not exist: %s", source_path)
        return 2

    extractor = ArticleExtractor(ExtractionSettings.from_env())
    loader = _build_loader()

    results: list[dict[str, object]] = []
    rows: list[tuple[str, Article]] = []
    errors: list[dict[str, str]] = []

    for file_path in _collect_inputs(source_path):
        try:
            document = loader.load(file_path)
        except DecodeError as exc:
            LOGGER.error("Failed to decode %s: %s", file_path, exc.message)
            errors.append({"source_path": str(file_path), "error": str(exc)})
            continue

        result = extractor.extract(document.text, document.page_count)
        LOGGER.info(
            "%s: %d articles, %d discarded",
            file_path.name,
            len(result.articles),
            result.discarded.total,
        )
        results.append(_result_payload(document.source_path, result))
        rows.extend((document.source_path, article) for article in result.articles)

    output = open(args.output, "w", encoding="utf-8", newline="") if args.output else sys.stdout
    try:
        if args.format == "csv":
            write_articles_csv(rows, output)
        else:
            payload = {
                "path": str(source_path),
                "processed": len(results),
                "results": results,
                "errors": errors,
            }
            output.write(json.dumps(payload, ensure_ascii=False, indent=2))
            output.write("\n")
    finally:
        if output is not sys.stdout:
            output.close()

    return 0 if not errors else 1


if __name__ == "__main__":
    raise SystemExit(main())
