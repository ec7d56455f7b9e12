"""Structural checks that gate a record before enrichment."""

from __future__ import annotations

from color_embeddings.errors import ValidationError
from color_embeddings.models import RawColor, ValidatedColor

MAX_NAME_LENGTH = 100
HEX_LENGTH = 7
HEX_MARKER = "#"


def validate_color(raw: RawColor) -> ValidatedColor:
    """Return *raw* as a :class:`ValidatedColor` or raise.

    Checks run in order: name length, hex shape, flag type.  Only the
    length and the leading ``#`` of the hex are checked, not its digits.

    Raises
    ------
    ValidationError
        On the first failing check; ``.record`` is *raw*.
    """
    if not 0 < len(raw.name) < MAX_NAME_LENGTH:
        raise ValidationError(
            f"Invalid name length {len(raw.name)}: {raw.model_dump_json()}", record=raw
        )
    if len(raw.hex) != HEX_LENGTH or not raw.hex.startswith(HEX_MARKER):
        raise ValidationError(f"Invalid hex {raw.hex!r}: {raw.model_dump_json()}", record=raw)
    if not isinstance(raw.is_good_name, bool):
        raise ValidationError(f"Invalid is_good_name: {raw.model_dump_json()}", record=raw)
    return ValidatedColor(name=raw.name, hex=raw.hex, is_good_name=raw.is_good_name)
