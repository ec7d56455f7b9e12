"""Turn one delimited line into a candidate :class:`RawColor`."""

from __future__ import annotations

from color_embeddings.errors import RowFormatError
from color_embeddings.models import RawColor

EXPECTED_FIELDS = 3


def parse_color_row(row: str, *, delimiter: str = ",", marker: str = "x") -> RawColor:
    """Split *row* into ``name``, ``hex`` and flag fields.

    The flag is ``True`` only when it equals *marker* exactly.  Fields are
    not quoted or escaped, so a name containing *delimiter* yields too many
    fields and is rejected rather than guessed at.

    Raises
    ------
    RowFormatError
        If the line does not split into exactly three fields.
    """
    fields = row.split(delimiter)
    if len(fields) != EXPECTED_FIELDS:
        raise RowFormatError(
            f"Expected {EXPECTED_FIELDS} fields, got {len(fields)}: {row!r}",
            record=row,
        )
    name, hex_code, flag = fields
    return RawColor(name=name, hex=hex_code, is_good_name=flag == marker)
