"""
becu_core.summaries
Subtotals + the flat row table for the grouped report.
"""
from __future__ import annotations
import logging
import math
from typing import List, Sequence, Tuple
from .config import CATEGORY_LABEL, CATEGORY_TOTAL_LABEL, PARENT_LABEL, PARENT_TOTAL_LABEL
from .parsing import fixed2
from .records import CategoryGroup, ParentGroup

log = logging.getLogger(__name__)

Row = List[str]

def category_total(group: CategoryGroup) -> float:
    # plain left fold; NaN in any amount makes the total NaN
    total = 0.0
    for r in group.items:
        total += r.amount
    return total

def total_row(label: str, total: float) -> Row:
    return ["", "", label, fixed2(total)]

def build_rows(parents: Sequence[ParentGroup]) -> List[Row]:
    """
    Flatten the hierarchy into report rows.

    Per parent: a 'Parent Category' row, then per category a 'Category'
    row, one row per record, a 'Category Total' row and a blank row, then
    a 'Parent Total' row and two blank rows. The parent total is summed
    from the category totals, not from the records.
    """
    rows: List[Row] = []
    for p in parents:
        rows.append([PARENT_LABEL, p.name])
        parent_total = 0.0
        for c in p.categories:
            rows.append([CATEGORY_LABEL, c.name])
            for r in c.items:
                rows.append(r.cells())
            cat_total = category_total(c)
            if math.isnan(cat_total):
                log.warning("Category %r under %r has a non-numeric amount; total is NaN", c.name, p.name)
            rows.append(total_row(CATEGORY_TOTAL_LABEL, cat_total))
            rows.append([])
            parent_total += cat_total
        rows.append(total_row(PARENT_TOTAL_LABEL, parent_total))
        rows.append([])
        rows.append([])
    log.debug("Built %d report row(s)", len(rows))
    return rows

def summarize_parents(
    parents: Sequence[ParentGroup],
) -> List[Tuple[str, List[Tuple[str, int, float]], float]]:
    """(parent, [(category, txns, total), ...], parent_total) per parent, input order."""
    out: List[Tuple[str, List[Tuple[str, int, float]], float]] = []
    for p in parents:
        cats: List[Tuple[str, int, float]] = []
        parent_total = 0.0
        for c in p.categories:
            t = category_total(c)
            cats.append((c.name, len(c.items), t))
            parent_total += t
        out.append((p.name, cats, parent_total))
    return out
