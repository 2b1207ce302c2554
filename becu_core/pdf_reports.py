"""
becu_core.pdf_reports
PDF creation (reportlab).
"""
from __future__ import annotations
from pathlib import Path
from typing import Sequence
from .config import CATEGORY_LABEL, CATEGORY_TOTAL_LABEL, PARENT_LABEL, PARENT_TOTAL_LABEL
from .parsing import fixed2
from .records import ParentGroup
from .summaries import category_total
from .utils import timestamp_line

DETAIL_HEADER = ["Date", "Description", "Original", "Amount", "Type"]

def require_reportlab():
    try:
        from reportlab.lib.pagesizes import letter  # noqa
        from reportlab.lib.units import inch  # noqa
        from reportlab.lib import colors  # noqa
        from reportlab.lib.styles import getSampleStyleSheet  # noqa
        from reportlab.platypus import (  # noqa
            SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle, PageBreak
        )
        return (letter, inch, colors, getSampleStyleSheet,
                SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle, PageBreak)
    except ImportError:
        raise SystemExit("Missing dependency: reportlab\nInstall with: pip3 install reportlab\n")

def _pdf_doc(pdf_path: Path, margin_in: float = 0.6):
    (letter, inch, colors, getSampleStyleSheet,
     SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle, PageBreak) = require_reportlab()
    doc = SimpleDocTemplate(
        str(pdf_path),
        pagesize=letter,
        leftMargin=margin_in * inch,
        rightMargin=margin_in * inch,
        topMargin=margin_in * inch,
        bottomMargin=margin_in * inch,
    )
    styles = getSampleStyleSheet()
    return (doc, styles, inch, colors, Paragraph, Spacer, Table, TableStyle, PageBreak)

def _style_detail_table(TableStyle, colors):
    return TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("ALIGN", (3, 1), (3, -1), "RIGHT"),
        ("ROWBACKGROUNDS", (0, 1), (-1, -2), [colors.whitesmoke, colors.white]),
    ])

def write_pdf_grouped(parents: Sequence[ParentGroup], pdf_path: Path,
                      title: str = "Transactions by Category") -> None:
    doc, styles, inch, colors, Paragraph, Spacer, Table, TableStyle, PageBreak = _pdf_doc(pdf_path)

    story = []
    story.append(Paragraph(title, styles["Title"]))
    story.append(Spacer(1, 0.08 * inch))
    story.append(Paragraph(timestamp_line("Generated"), styles["Normal"]))
    story.append(Spacer(1, 0.18 * inch))

    if not parents:
        story.append(Paragraph("No transactions found.", styles["Normal"]))

    for i, p in enumerate(parents):
        if i:
            story.append(PageBreak())
        story.append(Paragraph(f"<b>{PARENT_LABEL}:</b> {_esc(p.name)}", styles["Heading2"]))
        story.append(Spacer(1, 0.06 * inch))

        parent_total = 0.0
        for c in p.categories:
            cat_total = category_total(c)
            parent_total += cat_total

            story.append(Paragraph(
                f"<b>{CATEGORY_LABEL}:</b> {_esc(c.name)} &nbsp;&nbsp; <b>Txns:</b> {len(c.items)}",
                styles["Heading3"]
            ))

            table_data = [DETAIL_HEADER]
            for r in c.items:
                table_data.append(r.cells()[:len(DETAIL_HEADER)])
            table_data.append(["", "", CATEGORY_TOTAL_LABEL, fixed2(cat_total), ""])

            tbl = Table(table_data,
                        colWidths=[0.9 * inch, 2.3 * inch, 2.3 * inch, 0.9 * inch, 0.8 * inch],
                        repeatRows=1)
            tbl.setStyle(_style_detail_table(TableStyle, colors))
            story.append(tbl)
            story.append(Spacer(1, 0.12 * inch))

        story.append(Paragraph(
            f"<b>{PARENT_TOTAL_LABEL}:</b> {fixed2(parent_total)}",
            styles["Heading3"]
        ))

    doc.build(story)

def _esc(text: str) -> str:
    # Paragraph markup is XML-ish
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
