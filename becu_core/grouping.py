"""
becu_core.grouping
Grouping rules: parent category -> category, in first-seen order.
"""
from __future__ import annotations
import logging
from typing import Iterable, List, Optional
from .records import CategoryGroup, ParentGroup, Record

log = logging.getLogger(__name__)

def find_parent(parents: List[ParentGroup], name: str) -> Optional[ParentGroup]:
    for p in parents:
        if p.name == name:
            return p
    return None

def find_category(parent: ParentGroup, name: str) -> Optional[CategoryGroup]:
    for c in parent.categories:
        if c.name == name:
            return c
    return None

def group_records(records: Iterable[Record]) -> List[ParentGroup]:
    """
    Bucket records by (parent, category).

    Names compare exactly (case-sensitive). Groups are created the first
    time a name is seen and records keep their input order inside a group.
    """
    parents: List[ParentGroup] = []
    for r in records:
        parent = find_parent(parents, r.parent)
        if parent is None:
            parent = ParentGroup(name=r.parent)
            parents.append(parent)

        category = find_category(parent, r.category)
        if category is None:
            category = CategoryGroup(name=r.category)
            parent.categories.append(category)

        category.items.append(r)

    log.debug(
        "Grouped into %d parent(s), %d category group(s)",
        len(parents),
        sum(len(p.categories) for p in parents),
    )
    return parents
