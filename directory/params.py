"""Helpers for reading identifiers out of URL path segments."""
from __future__ import annotations

import math
import re
from typing import Optional

# ASCII decimal literal; no digit separators, no non-ASCII digits
_NUMBER_RE = re.compile(r'[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?', re.ASCII)


def parse_numeric_id(value) -> Optional[int]:
    """Return ``value`` as an integer id, or ``None`` when it is not one.

    Accepts plain decimal literals ("12", " 12 ", "1e2", "3.0") as long as
    the result is finite and integral.  NaN, infinities, fractions,
    underscore separators, non-ASCII digits and other non-numeric strings
    are rejected.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not _NUMBER_RE.fullmatch(text):
        return None
    number = float(text)
    if not math.isfinite(number) or not number.is_integer():
        return None
    return int(number)
