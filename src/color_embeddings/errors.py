"""Error taxonomy for the ingestion pipeline.

Every error a single row can raise derives from :class:`IngestionError`,
which is the boundary :class:`~color_embeddings.ingestion.driver.BatchDriver`
catches to skip the row and carry on.
"""

from __future__ import annotations

from typing import Any


class IngestionError(Exception):
    """Base class for per-row pipeline failures."""


class ValidationError(IngestionError):
    """A record violates a structural invariant.

    Attributes
    ----------
    record:
        The offending candidate record (or raw line for format errors).
    """

    def __init__(self, message: str, record: Any = None) -> None:
        super().__init__(message)
        self.record = record


class RowFormatError(ValidationError):
    """A raw line does not split into the expected fields."""


class ProviderError(IngestionError):
    """The embedding provider failed or returned an unusable vector."""


class PersistenceError(IngestionError):
    """The store rejected or failed an upsert / search."""
