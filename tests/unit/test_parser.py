"""Unit tests for raw row parsing."""

import pytest

from color_embeddings.errors import RowFormatError, ValidationError
from color_embeddings.ingestion.parser import parse_color_row
from color_embeddings.models import RawColor


def test_marker_flag_parses_as_good_name() -> None:
    assert parse_color_row("Red,#ff0000,x") == RawColor(name="Red", hex="#ff0000", is_good_name=True)


def test_empty_flag_is_not_good_name() -> None:
    assert parse_color_row("Red,#ff0000,").is_good_name is False


@pytest.mark.parametrize("flag", ["X", "yes", "true", " x"])
def test_only_exact_marker_counts(flag: str) -> None:
    assert parse_color_row(f"Red,#ff0000,{flag}").is_good_name is False


def test_hex_keeps_marker() -> None:
    assert parse_color_row("Red,#ff0000,x").hex == "#ff0000"


def test_empty_name_still_parses() -> None:
    """Parsing is total for three fields; rejection is the validator's job."""
    raw = parse_color_row(",#ff0000,x")
    assert raw.name == ""


def test_custom_delimiter_and_marker() -> None:
    raw = parse_color_row("Red;#ff0000;y", delimiter=";", marker="y")
    assert raw.name == "Red"
    assert raw.is_good_name is True


@pytest.mark.parametrize("row", ["", "Red,#ff0000", "Red, Dark,#8b0000,x"])
def test_wrong_field_count_rejected(row: str) -> None:
    with pytest.raises(RowFormatError) as excinfo:
        parse_color_row(row)
    assert excinfo.value.record == row
    assert isinstance(excinfo.value, ValidationError)


def test_parsing_is_deterministic() -> None:
    assert parse_color_row("Teal,#008080,x") == parse_color_row("Teal,#008080,x")
