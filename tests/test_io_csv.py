from __future__ import annotations

import math

from becu_core.io_csv import parse_records, read_text, rows_to_csv, write_text
from becu_core.records import Record


def test_parse_records_drops_header_and_maps_columns(sample_export):
    records = parse_records(sample_export)

    assert len(records) == 3
    assert records[0] == Record(
        date="2023-01-01",
        description="Coffee",
        original="Coffee Shop",
        amount=4.5,
        type="debit",
        parent="Food",
        category="Dining",
    )
    assert [r.category for r in records] == ["Dining", "Groceries", "Salary"]


def test_header_line_is_never_parsed_even_if_it_looks_like_data():
    text = "2023-01-01,Coffee,Coffee Shop,4.50,debit,Food,Dining\n2023-01-02,Tea,Tea Shop,3,debit,Food,Dining"
    records = parse_records(text)
    assert [r.description for r in records] == ["Tea"]


def test_fields_are_trimmed():
    text = "header\n 2023-01-01 ,  Coffee , Coffee Shop,  4.50 ,debit , Food ,Dining \r"
    (r,) = parse_records(text)
    assert r.cells() == ["2023-01-01", "Coffee", "Coffee Shop", "4.5", "debit", "Food", "Dining"]


def test_empty_and_header_only_input_give_no_records():
    assert parse_records("") == []
    assert parse_records("Date,Description,Original,Amount,Type,Parent,Category") == []


def test_trailing_blank_line_becomes_empty_record():
    records = parse_records("header\n2023-01-01,Coffee,Shop,1,debit,Food,Dining\n")

    assert len(records) == 2
    blank = records[1]
    assert (blank.date, blank.description, blank.original) == ("", "", "")
    assert (blank.type, blank.parent, blank.category) == ("", "", "")
    assert math.isnan(blank.amount)


def test_short_row_pads_missing_columns():
    (r,) = parse_records("header\n2023-01-01,Coffee")
    assert r.date == "2023-01-01"
    assert r.description == "Coffee"
    assert r.parent == "" and r.category == ""
    assert math.isnan(r.amount)


def test_extra_columns_are_ignored():
    (r,) = parse_records("header\na,b,c,1,debit,P,C,extra,more")
    assert r.category == "C"


def test_quoted_commas_are_split_naively():
    (r,) = parse_records('header\n2023-01-01,"Coffee, large",Shop,4,debit,Food,Dining')
    assert r.description == '"Coffee'
    assert r.original == 'large"'
    # columns shift right, so "Shop" lands in the amount slot
    assert math.isnan(r.amount)


def test_non_numeric_amount_is_kept_as_nan():
    (r,) = parse_records("header\n2023-01-01,Coffee,Shop,n/a,debit,Food,Dining")
    assert math.isnan(r.amount)
    assert r.cells()[3] == "NaN"


def test_rows_to_csv_joins_without_escaping():
    rows = [["Parent Category", "Food"], ["a,b", 'q"'], [], ["", "", "Category Total", "1.00"]]
    assert rows_to_csv(rows) == 'Parent Category,Food\na,b,q"\n\n,,Category Total,1.00'


def test_rows_to_csv_empty():
    assert rows_to_csv([]) == ""


def test_read_write_text_round_trip(tmp_path):
    p = tmp_path / "out.csv"
    write_text(p, "a,b\n\nc")
    assert read_text(p) == "a,b\n\nc"
