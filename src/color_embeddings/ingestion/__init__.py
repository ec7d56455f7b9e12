"""
Ingestion — parse, validate, embed, and persist color records.

Rows flow strictly downward through the pipeline::

    raw line → RawColor → ValidatedColor → embedding → EnrichedColor → store

:class:`~color_embeddings.ingestion.driver.BatchDriver` sequences the
stages over a whole file, one row at a time.
"""

from color_embeddings.ingestion.driver import BatchDriver
from color_embeddings.ingestion.encoder import decode_embedding, encode_color
from color_embeddings.ingestion.loader import read_color_rows
from color_embeddings.ingestion.parser import parse_color_row
from color_embeddings.ingestion.throttle import (
    FixedIntervalLimiter,
    RateLimiter,
    TokenBucketLimiter,
)
from color_embeddings.ingestion.validator import validate_color

__all__ = [
    "BatchDriver",
    "FixedIntervalLimiter",
    "RateLimiter",
    "TokenBucketLimiter",
    "decode_embedding",
    "encode_color",
    "parse_color_row",
    "read_color_rows",
    "validate_color",
]
