"""
becu_core.utils
Small reusable helpers.
"""
from __future__ import annotations
from datetime import datetime

def now_local() -> datetime:
    return datetime.now().astimezone()

def timestamp_line(prefix: str = "Generated") -> str:
    dt = now_local()
    return f"{prefix}: {dt.strftime('%Y-%m-%d %H:%M:%S %Z')}".rstrip()
