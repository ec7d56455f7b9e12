"""FastAPI application exposing color search as a REST API."""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel

from color_embeddings.config import settings
from color_embeddings.errors import PersistenceError, ProviderError
from color_embeddings.models import ColorMatch
from color_embeddings.retrieval.search import ColorSearcher

app = FastAPI(
    title="Color Embeddings API",
    version="0.1.0",
    description="Semantic nearest-neighbour search over embedded color names.",
)


# ── Request / Response schemas ────────────────────────────────────────
class SearchResponse(BaseModel):
    """Ranked matches for a query."""

    query: str
    matches: list[ColorMatch] = []


# ── Dependencies ──────────────────────────────────────────────────────
@lru_cache
def get_searcher() -> ColorSearcher:
    """Build the production searcher once, on first request."""
    from color_embeddings.ingestion.embedder import get_embedding_provider
    from color_embeddings.store.chroma_store import get_color_store

    return ColorSearcher(
        get_embedding_provider(),
        get_color_store(),
        default_k=settings.search_match_count,
    )


# ── Routes ────────────────────────────────────────────────────────────
@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}


@app.get("/search", response_model=SearchResponse)
async def search(
    q: str = Query(..., min_length=1, description="Free-text query"),
    k: int | None = Query(None, ge=1, le=100, description="Number of matches"),
    searcher: ColorSearcher = Depends(get_searcher),
) -> SearchResponse:
    """Return the colors whose names are nearest to *q*."""
    try:
        matches = await searcher.search(q, k=k)
    except (ProviderError, PersistenceError) as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return SearchResponse(query=q, matches=matches)
