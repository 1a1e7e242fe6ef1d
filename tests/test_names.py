import pytest

from rollcall.errors import SourceUnavailable
from rollcall.names import normalize_names, read_profile_names


def test_header_is_skipped_and_second_column_is_read(tmp_path):
    p = tmp_path / "class.csv"
    p.write_text("id,name\n1,Alice\n2,Bob\n", encoding="utf-8")

    assert read_profile_names(p) == ["Alice", "Bob"]


def test_quotes_are_stripped_and_fields_trimmed(tmp_path):
    p = tmp_path / "class.csv"
    p.write_text('no,name,extra\n1,"Alice",x\n2,  Bob  \n3," Carol "\n', encoding="utf-8")

    assert read_profile_names(p) == ["Alice", "Bob", "Carol"]


def test_rows_without_a_name_column_yield_blank_candidates(tmp_path):
    p = tmp_path / "class.csv"
    p.write_text("id,name\n1\n\n2,Bob\n", encoding="utf-8")

    assert read_profile_names(p) == ["", "", "Bob"]


def test_comma_inside_quotes_is_not_escaped(tmp_path):
    p = tmp_path / "class.csv"
    p.write_text('id,name\n1,"Smith, Jane"\n', encoding="utf-8")

    # simple split: the name column stops at the first comma
    assert read_profile_names(p) == ["Smith"]


def test_windows_line_endings(tmp_path):
    p = tmp_path / "class.csv"
    p.write_bytes(b'id,name\r\n1,"Alice"\r\n2,Bob\r\n')

    assert read_profile_names(p) == ["Alice", "Bob"]


def test_empty_file_has_no_candidates(tmp_path):
    p = tmp_path / "class.csv"
    p.write_text("", encoding="utf-8")

    assert read_profile_names(p) == []


def test_missing_file_is_source_unavailable(tmp_path):
    with pytest.raises(SourceUnavailable) as exc:
        read_profile_names(tmp_path / "nope.csv")
    assert exc.value.kind == "SourceUnavailable"
    assert "nope.csv" in str(exc.value)
    assert isinstance(exc.value.__cause__, OSError)


def test_directory_is_source_unavailable(tmp_path):
    with pytest.raises(SourceUnavailable):
        read_profile_names(tmp_path)


def test_normalize_drops_blanks_and_duplicates_in_order():
    raw = ["  Bob", "Alice", "", "   ", "Bob", "alice", "Alice "]

    assert normalize_names(raw) == ["Bob", "Alice", "alice"]
