"""
becu_core.io_csv
BECU export text -> records, and row table -> CSV text.

Both directions are a plain comma split/join. Quoted fields are not
honored on the way in and cells are not escaped on the way out.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Sequence
from .config import DEFAULT_ENCODING, FIELD_SEP, LINE_SEP, RECORD_FIELDS
from .parsing import parse_amount
from .records import Record

log = logging.getLogger(__name__)

def split_line(line: str) -> List[str]:
    return [cell.strip() for cell in line.split(FIELD_SEP)]

def record_from_fields(fields: Sequence[str]) -> Record:
    # short rows pad with "" (amount -> NaN); extra columns are ignored
    padded = list(fields[:len(RECORD_FIELDS)])
    padded += [""] * (len(RECORD_FIELDS) - len(padded))
    values = dict(zip(RECORD_FIELDS, padded))
    values["amount"] = parse_amount(values["amount"])
    return Record(**values)

def parse_records(text: str) -> List[Record]:
    """
    Parse raw export text into records.

    The first line is always dropped as the header. Every remaining line,
    blank ones included, becomes exactly one record.
    """
    lines = text.split(LINE_SEP)
    records = [record_from_fields(split_line(line)) for line in lines[1:]]
    log.debug("Parsed %d record(s) from %d line(s)", len(records), len(lines))
    return records

def rows_to_csv(rows: Sequence[Sequence[str]]) -> str:
    return LINE_SEP.join(FIELD_SEP.join(row) for row in rows)

def read_text(path: Path, encoding: str = DEFAULT_ENCODING) -> str:
    # undecodable bytes become U+FFFD instead of failing the whole file
    with open(path, newline="", encoding=encoding, errors="replace") as f:
        return f.read()

def write_text(out_path: Path, text: str, encoding: str = DEFAULT_ENCODING) -> None:
    with open(out_path, "w", newline="", encoding=encoding, errors="replace") as f:
        f.write(text)
