"""Chroma implementation of the color-store abstraction."""

from __future__ import annotations

import asyncio
import logging

import chromadb

from color_embeddings.config import settings
from color_embeddings.errors import PersistenceError
from color_embeddings.ingestion.encoder import decode_embedding
from color_embeddings.models import ColorMatch, EnrichedColor
from color_embeddings.store.base import ColorStoreBase

logger = logging.getLogger(__name__)


class ChromaColorStore(ColorStoreBase):
    """Chroma-backed color store.

    The color name is used as the Chroma id, so re-running an ingestion
    overwrites records instead of duplicating them.

    Parameters
    ----------
    collection_name:
        Name of the Chroma collection.
    client:
        A chromadb client.  When *None*, an ``HttpClient`` is created from
        *host* and *port*.
    host:
        Chroma server hostname.
    port:
        Chroma server port.
    distance_metric:
        ``hnsw:space`` used when the collection is created.
    """

    def __init__(
        self,
        collection_name: str = settings.chroma_collection,
        *,
        client: chromadb.ClientAPI | None = None,
        host: str = settings.chroma_host,
        port: int = settings.chroma_port,
        distance_metric: str = settings.distance_metric,
    ) -> None:
        super().__init__(collection_name)
        self._client = client if client is not None else chromadb.HttpClient(host=host, port=port)
        self._collection = self._client.get_or_create_collection(
            name=collection_name,
            metadata={"hnsw:space": distance_metric},
        )

    # -- ColorStoreBase overrides ---------------------------------------------

    async def upsert(self, color: EnrichedColor) -> None:
        try:
            await asyncio.to_thread(
                self._collection.upsert,
                ids=[color.name],
                embeddings=[decode_embedding(color.embedding)],
                documents=[color.name],
                metadatas=[{"hex": color.hex, "is_good_name": color.is_good_name}],
            )
        except Exception as exc:
            raise PersistenceError(f"Upsert of {color.name!r} failed: {exc}") from exc

    async def search(self, query_embedding: str, match_count: int) -> list[ColorMatch]:
        try:
            results = await asyncio.to_thread(
                self._collection.query,
                query_embeddings=[decode_embedding(query_embedding)],
                n_results=match_count,
                include=["distances"],
            )
        except Exception as exc:
            raise PersistenceError(f"Search failed: {exc}") from exc

        ids = results.get("ids", [[]])[0]
        distances = results.get("distances", [[]])[0]
        return [ColorMatch(name=name, distance=dist) for name, dist in zip(ids, distances)]

    def health_check(self) -> bool:
        try:
            self._client.heartbeat()
            return True
        except Exception:
            logger.warning("Chroma health-check failed", exc_info=True)
            return False


def get_color_store() -> ChromaColorStore:
    """Return the Chroma store configured by the global settings."""
    return ChromaColorStore()
