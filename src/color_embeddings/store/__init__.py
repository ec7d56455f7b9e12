"""
Store — persistence and nearest-neighbour search for enriched colors.

Public surface
--------------
- :class:`ColorStoreBase` — abstract backend (subclass for pgvector, etc.).
- :class:`ChromaColorStore` — default Chroma backend.
- :func:`get_color_store` — factory building the backend from settings.
"""

from color_embeddings.store.base import ColorStoreBase

__all__ = [
    "ChromaColorStore",
    "ColorStoreBase",
    "get_color_store",
]


def __getattr__(name: str):  # noqa: ANN001
    """Lazy-import the Chroma backend to avoid pulling in chromadb at import time."""
    if name in ("ChromaColorStore", "get_color_store"):
        from color_embeddings.store import chroma_store

        return getattr(chroma_store, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
