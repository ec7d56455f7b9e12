"""Embedding providers — single place to swap the embedding backend.

Supports two modes, mirroring the settings:

1. **OpenAI cloud** (default) — set ``OPENAI_API_KEY``.
2. **OpenAI-compatible endpoint** — set ``OPENAI_BASE_URL`` to a
   self-hosted server exposing ``/v1/embeddings``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import openai
from openai import AsyncOpenAI

from color_embeddings.config import settings
from color_embeddings.errors import ProviderError

logger = logging.getLogger(__name__)

ENCODING_FORMAT = "float"


class EmbeddingProvider(ABC):
    """Converts text into a fixed-length embedding vector."""

    @property
    @abstractmethod
    def dimensions(self) -> int:
        """Length of every vector returned by :meth:`embed`."""
        ...

    @abstractmethod
    async def embed(self, text: str) -> list[float]:
        """Return the embedding of *text*.

        Raises
        ------
        ProviderError
            When the backend call fails for any reason.
        """
        ...


class OpenAIEmbeddingProvider(EmbeddingProvider):
    """OpenAI embeddings API backend.

    Parameters
    ----------
    client:
        An ``AsyncOpenAI`` client.  SDK-level retries should be disabled
        by the caller; failures surface once as :class:`ProviderError`.
    model:
        Pinned embedding model id.
    dimensions:
        Expected vector length for *model*.
    """

    def __init__(
        self,
        client: AsyncOpenAI,
        *,
        model: str = settings.embedding_model,
        dimensions: int = settings.embedding_dimensions,
    ) -> None:
        self._client = client
        self.model = model
        self._dimensions = dimensions

    @property
    def dimensions(self) -> int:
        return self._dimensions

    async def embed(self, text: str) -> list[float]:
        try:
            response = await self._client.embeddings.create(
                model=self.model,
                input=text,
                encoding_format=ENCODING_FORMAT,
            )
        except openai.OpenAIError as exc:
            raise ProviderError(f"Embedding request failed for {text!r}: {exc}") from exc

        if not response.data:
            raise ProviderError(f"Embedding response for {text!r} contained no data")
        embedding = list(response.data[0].embedding)
        if len(embedding) != self._dimensions:
            raise ProviderError(
                f"Embedding for {text!r} has {len(embedding)} dimensions, "
                f"expected {self._dimensions}"
            )
        return embedding


def get_embedding_provider() -> OpenAIEmbeddingProvider:
    """Return the configured embedding provider.

    When ``settings.openai_base_url`` is set the client is pointed at that
    OpenAI-compatible server instead of the OpenAI cloud API.
    """
    kwargs: dict = {"api_key": settings.openai_api_key, "max_retries": 0}

    if settings.openai_base_url:
        logger.info("Using OpenAI-compatible endpoint: %s", settings.openai_base_url)
        kwargs["base_url"] = settings.openai_base_url
        # Self-hosted servers often skip auth; the SDK requires a non-empty key.
        kwargs["api_key"] = settings.openai_api_key or "EMPTY"

    return OpenAIEmbeddingProvider(AsyncOpenAI(**kwargs))
