"""
becu_core.parsing
Amount parsing and number-to-text rendering.

Amounts are parsed leniently: a bad value becomes NaN and is carried
through every sum, so a broken row shows up as ``NaN`` in the totals
instead of aborting the conversion.
"""
from __future__ import annotations
import math
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional
from .config import INF_TEXT, NAN_TEXT

_NUMERIC_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)

_TWO_PLACES = Decimal("0.01")

def parse_amount(value: Optional[str]) -> float:
    """
    Parse the longest numeric prefix of ``value``.

    '4.50' -> 4.5, '12abc' -> 12.0, '1e3' -> 1000.0, '' / 'abc' / None -> nan.
    """
    if value is None:
        return math.nan
    s = str(value).lstrip()
    m = _NUMERIC_PREFIX.match(s)
    if not m:
        return math.nan
    token = m.group(0)
    if token.endswith(INF_TEXT):
        return -math.inf if token.startswith("-") else math.inf
    return float(token)

def number_text(n: float) -> str:
    """
    Shortest round-trip text for a number.

    Integral values print without a fraction ('60', '-1000'), fractions
    keep only significant digits ('4.5'), and very large or very small
    magnitudes switch to exponent form ('1e+21', '1e-7').
    """
    if math.isnan(n):
        return NAN_TEXT
    if math.isinf(n):
        return INF_TEXT if n > 0 else f"-{INF_TEXT}"
    if n == 0:
        return "0"

    sign, digits, exponent = Decimal(repr(n)).normalize().as_tuple()
    ds = "".join(str(d) for d in digits)
    k = len(ds)
    point = exponent + k  # decimal point position relative to the digits
    neg = "-" if sign else ""

    if k <= point <= 21:
        return f"{neg}{ds}{'0' * (point - k)}"
    if 0 < point <= 21:
        return f"{neg}{ds[:point]}.{ds[point:]}"
    if -6 < point <= 0:
        return f"{neg}0.{'0' * -point}{ds}"

    e = point - 1
    esign = "+" if e >= 0 else "-"
    mantissa = ds if k == 1 else f"{ds[0]}.{ds[1:]}"
    return f"{neg}{mantissa}e{esign}{abs(e)}"

def fixed2(n: float) -> str:
    """
    Two-decimal text for a total.

    Rounds the exact binary value half away from zero ('0.125' -> '0.13').
    NaN renders as 'NaN'; infinities and magnitudes >= 1e21 fall back to
    number_text().
    """
    if math.isnan(n) or math.isinf(n) or abs(n) >= 1e21:
        return number_text(n)
    if n == 0:
        return "0.00"
    return str(Decimal(n).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))
