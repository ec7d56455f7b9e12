"""Command-line entry point: ``color-embeddings ingest|search``."""

from __future__ import annotations

import argparse
import asyncio
import logging

from color_embeddings.config import settings
from color_embeddings.errors import PersistenceError, ProviderError
from color_embeddings.ingestion.driver import BatchDriver
from color_embeddings.ingestion.loader import read_color_rows
from color_embeddings.ingestion.throttle import FixedIntervalLimiter
from color_embeddings.retrieval.search import ColorSearcher

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="color-embeddings",
        description="Embed color names into a vector store and search them",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    ingest = sub.add_parser("ingest", help="Embed and upsert every row of a colors CSV")
    ingest.add_argument("--csv", default=settings.colors_csv_path, help="Path to the colors CSV")
    ingest.add_argument(
        "--start-row",
        type=int,
        default=0,
        help="0-based data row to resume from",
    )
    ingest.add_argument(
        "--max-rows",
        type=int,
        default=None,
        help="Only consider the first N data rows of the file (0 means no cap)",
    )
    ingest.add_argument(
        "--include-header",
        action="store_true",
        help="Treat the first line as data",
    )

    search = sub.add_parser("search", help="Find colors nearest to a text query")
    search.add_argument("query", help="Free-text query, e.g. 'very fast car'")
    search.add_argument(
        "-k",
        type=int,
        default=settings.search_match_count,
        help="Number of matches to print",
    )
    return parser


def _build_driver() -> BatchDriver:
    from color_embeddings.ingestion.embedder import get_embedding_provider
    from color_embeddings.store.chroma_store import get_color_store

    return BatchDriver(
        get_embedding_provider(),
        get_color_store(),
        limiter=FixedIntervalLimiter(settings.pause_every_rows, settings.pause_seconds),
        delimiter=settings.row_delimiter,
        marker=settings.good_name_marker,
    )


def _build_searcher() -> ColorSearcher:
    from color_embeddings.ingestion.embedder import get_embedding_provider
    from color_embeddings.store.chroma_store import get_color_store

    return ColorSearcher(get_embedding_provider(), get_color_store())


async def _search(searcher: ColorSearcher, args: argparse.Namespace) -> int:
    try:
        matches = await searcher.search(args.query, k=args.k)
    except (ProviderError, PersistenceError) as exc:
        logger.error("Search failed: %s", exc)
        return 1
    for i, match in enumerate(matches, 1):
        print(f"{i}. {match}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if getattr(args, "start_row", 0) < 0:
        parser.error("--start-row must be >= 0")
    if getattr(args, "max_rows", None) is not None and args.max_rows < 0:
        parser.error("--max-rows must be >= 0")
    if getattr(args, "k", 1) < 1:
        parser.error("-k must be >= 1")

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Clients are built before the loop starts; the Chroma constructor blocks on I/O.
    if args.command == "ingest":
        driver = _build_driver()
        rows = read_color_rows(args.csv, include_header=args.include_header)
        asyncio.run(driver.run(rows, start_row=args.start_row, max_rows=args.max_rows))
        return 0
    return asyncio.run(_search(_build_searcher(), args))


if __name__ == "__main__":
    raise SystemExit(main())
