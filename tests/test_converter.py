from __future__ import annotations

import pytest

from becu_core.config import MULTIPLE_FILES_MESSAGE
from becu_core.converter import (
    ConversionError,
    MultipleFilesError,
    UnreadableFileError,
    build_groups,
    convert_files,
    convert_text,
)


def test_example_export_converts_exactly(sample_export, sample_grouped):
    assert convert_text(sample_export) == sample_grouped


def test_empty_and_header_only_input_give_empty_output():
    assert convert_text("") == ""
    assert convert_text("Date,Description,Original,Amount,Type,Parent,Category") == ""
    assert build_groups("") == []


def test_header_content_never_reaches_the_output():
    header = "SECRET-HEADER,Food,Dining,999.99,debit,Food,Dining"
    out = convert_text(header + "\n2023-01-01,Coffee,Shop,1,debit,Food,Dining")
    assert "SECRET-HEADER" not in out
    assert "999.99" not in out


def test_bad_rows_do_not_raise():
    text = "h\nonly-a-date\n,,,not-a-number,,,\n2023-01-01,Coffee,Shop,1,debit,Food,Dining,extra\n"
    out = convert_text(text)
    assert ",,Category Total,NaN" in out
    assert "Parent Category,Food" in out


def test_convert_files_reads_one_file(export_file, sample_grouped):
    assert convert_files([export_file]) == sample_grouped
    assert convert_files([str(export_file)]) == sample_grouped


def test_more_than_one_file_is_rejected_before_reading(tmp_path):
    missing = tmp_path / "does-not-exist.csv"
    with pytest.raises(MultipleFilesError) as exc:
        convert_files([missing, missing])
    assert exc.value.count == 2
    assert MULTIPLE_FILES_MESSAGE in str(exc.value)
    assert isinstance(exc.value, ValueError)
    assert isinstance(exc.value, ConversionError)


def test_no_file_is_rejected():
    with pytest.raises(MultipleFilesError):
        convert_files([])


def test_missing_file_is_unreadable(tmp_path):
    missing = tmp_path / "nope.csv"
    with pytest.raises(UnreadableFileError) as exc:
        convert_files([missing])
    assert exc.value.path == missing
    assert isinstance(exc.value, OSError)
    assert isinstance(exc.value.__cause__, FileNotFoundError)


def test_undecodable_bytes_are_replaced_not_rejected(tmp_path):
    p = tmp_path / "cp1252.csv"
    p.write_bytes(b"h\n2023-01-01,CAF\xc9,Shop,1,debit,Food,Dining")

    out = convert_files([p])

    assert "2023-01-01,CAF\ufffd,Shop,1,debit,Food,Dining" in out
    assert ",,Category Total,1.00" in out
    assert "CAFÉ" in convert_files([p], encoding="cp1252")
