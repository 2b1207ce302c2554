"""
becu_core.paths
Output folder helpers.
"""
from __future__ import annotations
from pathlib import Path
from typing import Optional

OUTPUT_DIR = Path("output")

KINDS = ("csv", "xlsx", "pdf", "logs")

def output_dir(kind: str, base_dir: Optional[Path] = None) -> Path:
    k = kind.lower()
    if k not in KINDS:
        raise ValueError(f"Unknown output kind: {kind}")
    root = OUTPUT_DIR if base_dir is None else Path(base_dir) / OUTPUT_DIR
    return root / k

def out_path(kind: str, filename: str, base_dir: Optional[Path] = None) -> Path:
    d = output_dir(kind, base_dir)
    d.mkdir(parents=True, exist_ok=True)
    return d / filename
