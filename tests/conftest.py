"""Shared fixtures: a small BECU export and a helper to put it on disk."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest


def dedent_csv(s: str) -> str:
    return textwrap.dedent(s).lstrip("\n").rstrip("\n")


SAMPLE_EXPORT = dedent_csv(
    """
    Date,Description,Original,Amount,Type,Parent,Category
    2023-01-01,Coffee,Coffee Shop,4.50,debit,Food,Dining
    2023-01-02,Groceries,Market,60.00,debit,Food,Groceries
    2023-01-03,Paycheck,Employer,-1000.00,credit,Income,Salary
    """
)

SAMPLE_GROUPED = (
    "Parent Category,Food\n"
    "Category,Dining\n"
    "2023-01-01,Coffee,Coffee Shop,4.5,debit,Food,Dining\n"
    ",,Category Total,4.50\n"
    "\n"
    "Category,Groceries\n"
    "2023-01-02,Groceries,Market,60,debit,Food,Groceries\n"
    ",,Category Total,60.00\n"
    "\n"
    ",,Parent Total,64.50\n"
    "\n"
    "\n"
    "Parent Category,Income\n"
    "Category,Salary\n"
    "2023-01-03,Paycheck,Employer,-1000,credit,Income,Salary\n"
    ",,Category Total,-1000.00\n"
    "\n"
    ",,Parent Total,-1000.00\n"
    "\n"
)


@pytest.fixture
def sample_export() -> str:
    return SAMPLE_EXPORT


@pytest.fixture
def sample_grouped() -> str:
    return SAMPLE_GROUPED


@pytest.fixture
def export_file(tmp_path: Path) -> Path:
    p = tmp_path / "export.csv"
    p.write_text(SAMPLE_EXPORT, encoding="utf-8")
    return p
