"""Color searcher — embed a free-text query and rank stored colors.

Usage::

    from color_embeddings.retrieval.search import ColorSearcher

    searcher = ColorSearcher(get_embedding_provider(), get_color_store())
    for i, match in enumerate(await searcher.search("very fast car"), 1):
        print(f"{i}. {match}")
"""

from __future__ import annotations

import logging
import time

from color_embeddings.ingestion.embedder import EmbeddingProvider
from color_embeddings.ingestion.encoder import encode_embedding
from color_embeddings.models import ColorMatch
from color_embeddings.store.base import ColorStoreBase

logger = logging.getLogger(__name__)


class ColorSearcher:
    """Query-side counterpart of the ingestion driver.

    Parameters
    ----------
    embedder:
        Must be the same model used at ingestion time so query and stored
        vectors share one space.
    store:
        Store to search.
    default_k:
        Default number of matches returned by :meth:`search`.
    """

    def __init__(
        self,
        embedder: EmbeddingProvider,
        store: ColorStoreBase,
        *,
        default_k: int = 10,
    ) -> None:
        self._embedder = embedder
        self._store = store
        self.default_k = default_k

    async def search(self, query: str, *, k: int | None = None) -> list[ColorMatch]:
        """Return the *k* colors whose names are semantically nearest *query*.

        Provider and store errors propagate to the caller.
        """
        k = k or self.default_k
        start = time.perf_counter()
        embedding = await self._embedder.embed(query)
        checkpoint = time.perf_counter()
        matches = await self._store.search(encode_embedding(embedding), k)
        end = time.perf_counter()

        logger.info(
            "Query %r took %dms (embedding %dms, store %dms)",
            query,
            round((end - start) * 1000),
            round((checkpoint - start) * 1000),
            round((end - checkpoint) * 1000),
        )
        return matches
