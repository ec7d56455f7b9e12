"""Batch driver — run the per-row pipeline over many raw lines.

Rows are processed strictly one at a time in input order, so persistence
order matches file order and only one request is ever in flight to the
embedding provider or the store.  A failing row is logged and skipped;
it never aborts the batch.

Usage::

    from color_embeddings.ingestion.driver import BatchDriver

    driver = BatchDriver(get_embedding_provider(), get_color_store())
    await driver.run(read_color_rows("data/colornames.csv"), start_row=2570)
"""

from __future__ import annotations

import logging
from typing import Sequence

from color_embeddings.errors import IngestionError
from color_embeddings.ingestion.embedder import EmbeddingProvider
from color_embeddings.ingestion.encoder import encode_color
from color_embeddings.ingestion.parser import parse_color_row
from color_embeddings.ingestion.throttle import FixedIntervalLimiter, RateLimiter
from color_embeddings.ingestion.validator import validate_color
from color_embeddings.models import EnrichedColor
from color_embeddings.store.base import ColorStoreBase

logger = logging.getLogger(__name__)


class BatchDriver:
    """Sequences parse → validate → embed → encode → upsert per row.

    Parameters
    ----------
    embedder:
        Embedding backend for color names.
    store:
        Destination store; upserts are keyed by color name.
    limiter:
        Pacing strategy applied after every attempted row.  Defaults to a
        200 ms pause after every 10 attempts.
    delimiter:
        Field separator of the raw lines.
    marker:
        Flag token meaning "good name".
    """

    def __init__(
        self,
        embedder: EmbeddingProvider,
        store: ColorStoreBase,
        *,
        limiter: RateLimiter | None = None,
        delimiter: str = ",",
        marker: str = "x",
    ) -> None:
        self._embedder = embedder
        self._store = store
        self._limiter = limiter if limiter is not None else FixedIntervalLimiter()
        self.delimiter = delimiter
        self.marker = marker

    # -- public API -----------------------------------------------------------

    async def process_row(self, row: str) -> EnrichedColor:
        """Run the full pipeline for one raw line and return what was stored.

        Raises
        ------
        IngestionError
            The stage-specific subclass for whichever stage failed.
        """
        raw = parse_color_row(row, delimiter=self.delimiter, marker=self.marker)
        color = validate_color(raw)
        embedding = await self._embedder.embed(color.name)
        enriched = encode_color(color, embedding, dimensions=self._embedder.dimensions)
        await self._store.upsert(enriched)
        logger.info("Saved color entry %s", enriched.name)
        return enriched

    async def run(
        self,
        rows: Sequence[str],
        *,
        start_row: int = 0,
        max_rows: int | None = None,
    ) -> None:
        """Process *rows* in order, skipping any row that fails.

        Parameters
        ----------
        rows:
            Raw data lines (header already removed).
        start_row:
            0-based index to resume from after a partial run.
        max_rows:
            Cap applied to *rows* before *start_row* is honoured, so a
            resumed run covers ``rows[start_row:max_rows]``.  ``None`` or
            ``0`` means no cap.
        """
        if start_row < 0:
            raise ValueError(f"start_row must be >= 0, got {start_row}")
        if max_rows is not None and max_rows < 0:
            raise ValueError(f"max_rows must be >= 0, got {max_rows}")

        self._limiter.reset()
        capped = rows[:max_rows] if max_rows else rows
        logger.info("Processing %d color entries...", len(capped))

        for i in range(start_row, len(capped)):
            try:
                await self.process_row(capped[i])
            except IngestionError as exc:
                logger.error("Error processing row %d: %s", i + 1, exc)
            except Exception:
                logger.exception("Unexpected error processing row %d", i + 1)
            await self._limiter.pace()

        logger.info("Ingestion completed!")
