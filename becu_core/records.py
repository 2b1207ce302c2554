"""
becu_core.records
Transaction record and the two-level group containers.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List
from .parsing import number_text

@dataclass
class Record:
    date: str
    description: str
    original: str
    amount: float
    type: str
    parent: str
    category: str

    def cells(self) -> List[str]:
        """The seven attributes as text, in export column order."""
        return [
            self.date,
            self.description,
            self.original,
            number_text(self.amount),
            self.type,
            self.parent,
            self.category,
        ]

@dataclass
class CategoryGroup:
    name: str
    items: List[Record] = field(default_factory=list)

@dataclass
class ParentGroup:
    name: str
    categories: List[CategoryGroup] = field(default_factory=list)
