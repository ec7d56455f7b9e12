"""Raw row loading from a delimited text file."""

from __future__ import annotations

from pathlib import Path


def read_color_rows(
    path: str | Path,
    *,
    include_header: bool = False,
    max_rows: int | None = None,
) -> list[str]:
    """Read *path* and return its data lines in file order.

    Parameters
    ----------
    path:
        UTF-8 text file, one record per line, header first.
    include_header:
        Keep the first line instead of dropping it.
    max_rows:
        Return at most this many lines.  ``None`` or ``0`` means no cap.

    Returns
    -------
    list[str]
        Lines without their trailing newline.
    """
    rows = Path(path).read_text(encoding="utf-8").splitlines()
    content_rows = rows if include_header else rows[1:]
    return content_rows[:max_rows] if max_rows else content_rows
