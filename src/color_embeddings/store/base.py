"""Abstract base class for color-store backends.

Adding a new backend (pgvector, Qdrant …) only requires subclassing
:class:`ColorStoreBase` and implementing the abstract methods.  The
ingestion driver and the searcher are backend-agnostic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from color_embeddings.models import ColorMatch, EnrichedColor


class ColorStoreBase(ABC):
    """Backend-agnostic color store.

    Parameters
    ----------
    collection_name:
        Logical name of the table / collection holding colors.
    """

    conflict_key = "name"

    def __init__(self, collection_name: str) -> None:
        self.collection_name = collection_name

    @abstractmethod
    async def upsert(self, color: EnrichedColor) -> None:
        """Insert *color* or overwrite the stored record with the same name.

        Repeating an identical upsert must leave the store unchanged.

        Raises
        ------
        PersistenceError
            When the backend reports a failure.
        """
        ...

    @abstractmethod
    async def search(self, query_embedding: str, match_count: int) -> list[ColorMatch]:
        """Return up to *match_count* colors nearest to *query_embedding*.

        *query_embedding* is the serialized vector produced by
        :func:`~color_embeddings.ingestion.encoder.encode_embedding`.
        Results are ordered by ascending distance.
        """
        ...

    @abstractmethod
    def health_check(self) -> bool:
        """Return ``True`` when the backend is reachable and ready."""
        ...
