"""Unit tests for the raw row loader."""

from pathlib import Path

import pytest

from color_embeddings.ingestion.loader import read_color_rows


@pytest.fixture
def colors_csv(tmp_path: Path) -> Path:
    path = tmp_path / "colors.csv"
    path.write_text("name,hex,good name\nRed,#ff0000,x\nTeal,#008080,\nNavy,#000080,x\n")
    return path


def test_header_skipped_by_default(colors_csv: Path) -> None:
    assert read_color_rows(colors_csv) == ["Red,#ff0000,x", "Teal,#008080,", "Navy,#000080,x"]


def test_include_header(colors_csv: Path) -> None:
    rows = read_color_rows(colors_csv, include_header=True)
    assert rows[0] == "name,hex,good name"
    assert len(rows) == 4


def test_max_rows_caps_result(colors_csv: Path) -> None:
    assert read_color_rows(colors_csv, max_rows=2) == ["Red,#ff0000,x", "Teal,#008080,"]


def test_zero_max_rows_means_no_cap(colors_csv: Path) -> None:
    assert len(read_color_rows(colors_csv, max_rows=0)) == 3


def test_crlf_line_endings(tmp_path: Path) -> None:
    path = tmp_path / "crlf.csv"
    path.write_bytes(b"name,hex,good name\r\nRed,#ff0000,x\r\n")
    assert read_color_rows(path) == ["Red,#ff0000,x"]


def test_bundled_sample_file_parses() -> None:
    from color_embeddings.ingestion.parser import parse_color_row

    sample = Path(__file__).resolve().parents[2] / "data" / "colornames.csv"
    rows = read_color_rows(sample)
    assert rows
    assert all(parse_color_row(row).hex.startswith("#") for row in rows)
