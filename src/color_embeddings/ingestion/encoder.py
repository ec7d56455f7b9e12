"""Combine a validated color and its embedding into a storage-ready record."""

from __future__ import annotations

import json

from color_embeddings.errors import ProviderError
from color_embeddings.models import EnrichedColor, ValidatedColor


def encode_embedding(embedding: list[float]) -> str:
    """Serialize *embedding* as compact JSON text (``[0.1,0.2,...]``).

    This is also the literal form pgvector columns accept.
    """
    return json.dumps(embedding, separators=(",", ":"))


def decode_embedding(text: str) -> list[float]:
    """Inverse of :func:`encode_embedding`."""
    return [float(v) for v in json.loads(text)]


def encode_color(
    color: ValidatedColor,
    embedding: list[float],
    *,
    dimensions: int | None = None,
) -> EnrichedColor:
    """Build the :class:`EnrichedColor` for *color*.

    Parameters
    ----------
    color:
        A record that already passed validation.
    embedding:
        The embedding of ``color.name``.
    dimensions:
        When given, the exact vector length required.

    Raises
    ------
    ProviderError
        If *dimensions* is set and *embedding* has another length.
    """
    if dimensions is not None and len(embedding) != dimensions:
        raise ProviderError(
            f"Embedding for {color.name!r} has {len(embedding)} dimensions, expected {dimensions}"
        )
    return EnrichedColor(
        name=color.name,
        hex=color.hex[1:],
        is_good_name=color.is_good_name,
        embedding=encode_embedding(embedding),
    )
