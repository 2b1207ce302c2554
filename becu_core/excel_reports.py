"""
becu_core.excel_reports
Excel creation (openpyxl).
"""
from __future__ import annotations
from pathlib import Path
from typing import Sequence
from .config import CATEGORY_LABEL, CATEGORY_TOTAL_LABEL, PARENT_LABEL, PARENT_TOTAL_LABEL
from .utils import timestamp_line

def require_openpyxl():
    try:
        from openpyxl import Workbook  # noqa
        from openpyxl.styles import Font  # noqa
        return Workbook, Font
    except ImportError:
        raise SystemExit("Missing dependency: openpyxl\nInstall with: pip3 install openpyxl\n")

def write_excel_grouped(rows: Sequence[Sequence[str]], xlsx_path: Path, title: str = "Grouped") -> None:
    """
    Same table as the CSV output, one row per sheet row.

    Cells stay text so totals read exactly as in the CSV ('NaN' included).
    Label cells and total values are bold.
    """
    Workbook, Font = require_openpyxl()
    BOLD = Font(bold=True)

    wb = Workbook()
    ws = wb.active
    ws.title = title[:31]

    ws.append([timestamp_line("Generated")])
    ws.cell(row=1, column=1).font = BOLD
    ws.append([])

    for row in rows:
        ws.append(list(row))
        if not row:
            continue
        rr = ws.max_row
        for c, value in enumerate(row, start=1):
            # keep '=...' text literal instead of letting openpyxl store a formula
            if isinstance(value, str) and value.startswith("="):
                ws.cell(row=rr, column=c).data_type = "s"
        if len(row) == 2 and row[0] in (PARENT_LABEL, CATEGORY_LABEL):
            ws.cell(row=rr, column=1).font = BOLD
        elif len(row) == 4 and row[2] in (CATEGORY_TOTAL_LABEL, PARENT_TOTAL_LABEL):
            ws.cell(row=rr, column=3).font = BOLD
            ws.cell(row=rr, column=4).font = BOLD

    ws.column_dimensions["A"].width = 18
    ws.column_dimensions["B"].width = 32
    ws.column_dimensions["C"].width = 32
    ws.column_dimensions["D"].width = 14

    wb.save(xlsx_path)
