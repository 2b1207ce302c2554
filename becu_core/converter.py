"""
becu_core.converter
Whole conversion: export text in, grouped CSV text out.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Sequence, Union
from .config import DEFAULT_ENCODING, MULTIPLE_FILES_MESSAGE
from .grouping import group_records
from .io_csv import parse_records, read_text, rows_to_csv
from .records import ParentGroup
from .summaries import build_rows

log = logging.getLogger(__name__)

PathLike = Union[str, Path]

class ConversionError(Exception):
    """Base class for conversion failures raised at the file boundary."""

class MultipleFilesError(ConversionError, ValueError):
    """Raised when a request does not carry exactly one file."""

    def __init__(self, count: int):
        super().__init__(f"{MULTIPLE_FILES_MESSAGE} (got {count})")
        self.count = count

class UnreadableFileError(ConversionError, OSError):
    """Raised when the input file cannot be read or decoded."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Could not read {path}: {reason}")
        self.path = path

def build_groups(text: str) -> List[ParentGroup]:
    return group_records(parse_records(text))

def convert_groups(parents: Sequence[ParentGroup]) -> str:
    return rows_to_csv(build_rows(parents))

def convert_text(text: str) -> str:
    """
    Parse, group, total and serialize in one call.

    Never raises on bad rows: short rows and non-numeric amounts come
    through as empty cells and NaN totals.
    """
    return convert_groups(build_groups(text))

def read_single_file(paths: Sequence[PathLike], encoding: str = DEFAULT_ENCODING) -> str:
    if len(paths) != 1:
        raise MultipleFilesError(len(paths))
    path = Path(paths[0])
    try:
        return read_text(path, encoding=encoding)
    except OSError as e:
        raise UnreadableFileError(path, str(e)) from e

def convert_files(paths: Sequence[PathLike], encoding: str = DEFAULT_ENCODING) -> str:
    """Convert the one file in ``paths``; any other count is rejected before reading."""
    text = read_single_file(paths, encoding=encoding)
    log.info("Read %d character(s) from %s", len(text), paths[0])
    return convert_text(text)
