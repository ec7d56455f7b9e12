"""Domain models for color records as they move through the pipeline."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RawColor(BaseModel):
    """Candidate record produced from one delimited line.

    Attributes
    ----------
    name:
        Color name, the storage key downstream.
    hex:
        Hex code still carrying its leading ``#`` marker.
    is_good_name:
        ``True`` when the flag field matched the marker token.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    name: str
    hex: str
    is_good_name: bool


class ValidatedColor(RawColor):
    """A :class:`RawColor` that passed every structural check.

    Only :func:`~color_embeddings.ingestion.validator.validate_color`
    should construct these.
    """


class EnrichedColor(BaseModel):
    """Storage-ready record keyed by ``name``.

    ``hex`` is the 6-character form without the marker and ``embedding``
    is the JSON text of the name's embedding vector.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    name: str
    hex: str
    is_good_name: bool
    embedding: str


class ColorMatch(BaseModel):
    """A single nearest-neighbour search hit."""

    model_config = ConfigDict(frozen=True)

    name: str
    distance: float

    def __str__(self) -> str:  # noqa: D105
        return f"{self.name}, {self.distance}"
