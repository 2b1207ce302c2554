"""
becu_core.config
Central configuration/constants.
"""
from __future__ import annotations

# outputs (filename suffixes appended to the input stem)
DEFAULT_CSV_SUFFIX = "_grouped.csv"
DEFAULT_XLSX_SUFFIX = "_grouped.xlsx"
DEFAULT_PDF_SUFFIX = "_grouped.pdf"

DEFAULT_ENCODING = "utf-8"
CSV_MIME_TYPE = "text/csv"

# positional column order of a BECU export row
RECORD_FIELDS = (
    "date",
    "description",
    "original",
    "amount",
    "type",
    "parent",
    "category",
)

# row labels in the grouped output
PARENT_LABEL = "Parent Category"
CATEGORY_LABEL = "Category"
CATEGORY_TOTAL_LABEL = "Category Total"
PARENT_TOTAL_LABEL = "Parent Total"

NAN_TEXT = "NaN"
INF_TEXT = "Infinity"

FIELD_SEP = ","
LINE_SEP = "\n"

MULTIPLE_FILES_MESSAGE = "only one file may be uploaded at a time"
