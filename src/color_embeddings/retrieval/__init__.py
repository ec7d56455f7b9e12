"""
Retrieval — nearest-neighbour color search by free-text query.

Public surface
--------------
- :class:`ColorSearcher` — embeds a query and ranks stored colors.
"""

from color_embeddings.retrieval.search import ColorSearcher

__all__ = ["ColorSearcher"]
