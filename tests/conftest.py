"""Shared pytest configuration and fixtures."""

from __future__ import annotations

import pytest

from color_embeddings.errors import PersistenceError, ProviderError
from color_embeddings.ingestion.embedder import EmbeddingProvider
from color_embeddings.ingestion.encoder import decode_embedding
from color_embeddings.models import ColorMatch, EnrichedColor
from color_embeddings.store.base import ColorStoreBase

DIMENSIONS = 1536


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests requiring external services")


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


# ── Fakes for deterministic testing ─────────────────────────────────────


class FakeEmbedder(EmbeddingProvider):
    """Returns a constant-per-text vector; fails for names in *fail_on*."""

    def __init__(self, fail_on: set[str] | None = None, dimensions: int = DIMENSIONS) -> None:
        self.fail_on = fail_on or set()
        self._dimensions = dimensions
        self.calls: list[str] = []

    @property
    def dimensions(self) -> int:
        return self._dimensions

    async def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        if text in self.fail_on:
            raise ProviderError(f"quota exceeded for {text!r}")
        return [float(len(text))] + [0.0] * (self._dimensions - 1)


class FakeStore(ColorStoreBase):
    """In-memory store keyed by color name."""

    def __init__(self, fail_on: set[str] | None = None) -> None:
        super().__init__("test-colors")
        self.fail_on = fail_on or set()
        self.rows: dict[str, EnrichedColor] = {}
        self.upserted: list[str] = []

    async def upsert(self, color: EnrichedColor) -> None:
        if color.name in self.fail_on:
            raise PersistenceError(f"constraint violated for {color.name!r}")
        self.rows[color.name] = color
        self.upserted.append(color.name)

    async def search(self, query_embedding: str, match_count: int) -> list[ColorMatch]:
        query = decode_embedding(query_embedding)
        ranked = sorted(
            (
                ColorMatch(name=name, distance=abs(decode_embedding(c.embedding)[0] - query[0]))
                for name, c in self.rows.items()
            ),
            key=lambda m: m.distance,
        )
        return ranked[:match_count]

    def health_check(self) -> bool:
        return True


class RecordingSleep:
    """Awaitable stand-in for ``asyncio.sleep`` that records every pause."""

    def __init__(self) -> None:
        self.pauses: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.pauses.append(seconds)


@pytest.fixture
def fake_embedder() -> FakeEmbedder:
    return FakeEmbedder()


@pytest.fixture
def fake_store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def make_embedder() -> type[FakeEmbedder]:
    """Factory for embedders with custom failure sets."""
    return FakeEmbedder


@pytest.fixture
def make_store() -> type[FakeStore]:
    """Factory for stores with custom failure sets."""
    return FakeStore
