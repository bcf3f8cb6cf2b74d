# rounding.py
from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any, Optional

# Optional minus, digits, optional dot + digits. ASCII digits only: \d would
# also accept other Unicode decimal digits.
NUMERIC_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")

# What normalize_numeric_string accepts: no nan/inf spellings, no underscores.
_FLOAT_TEXT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def is_numeric_string(s: str) -> bool:
    return NUMERIC_RE.fullmatch(s) is not None


def decimal_places(s: str) -> int:
    """Number of digits after the decimal point (0 when there is none)."""
    _, dot, frac = s.partition(".")
    return len(frac) if dot else 0


def round_half_up(s: str, places: int) -> str:
    """
    Round a pre-validated numeric string to exactly ``places`` decimals.

    Only the digit right after position ``places`` decides the rounding
    (>= 5 rounds away from zero). The increment runs on Python ints, so
    integer parts of any length are carried without precision loss.
    A result whose magnitude is zero never keeps its minus sign.
    """
    if places < 0:
        raise ValueError("places must be >= 0")

    negative = s.startswith("-")
    magnitude = s[1:] if negative else s
    int_part, _, frac_part = magnitude.partition(".")
    frac_part = frac_part.ljust(places + 1, "0")

    kept = frac_part[:places]
    if frac_part[places] >= "5":
        width = len(int_part) + places
        bumped = str(int(int_part + kept) + 1).zfill(width)
        split = len(bumped) - places
        int_part, kept = bumped[:split], bumped[split:]

    out = int_part + ("." + kept if places else "")
    if negative and (int_part + kept).strip("0"):
        return "-" + out
    return out


def num_to_clean_str(x: float) -> str:
    if not math.isfinite(x):
        return repr(float(x))
    if float(x).is_integer():
        return str(int(x))
    # plain decimal, never exponent notation (1e-05 -> 0.00001)
    return format(Decimal(repr(float(x))), "f")


def to_answer_text(value: Any) -> Optional[str]:
    """
    Coerce a submitted or stored answer to text.

    ``None`` stays ``None``; numbers render the way they would be typed
    (``15.0`` -> ``"15"``); everything else goes through ``str``.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return num_to_clean_str(value)
    return str(value)


def normalize_numeric_string(s: str) -> str:
    """
    Re-render a number without insignificant trailing zeros.

    >>> normalize_numeric_string("10.123000")
    '10.123'
    >>> normalize_numeric_string("5.")
    '5'
    """
    text = s.strip() if isinstance(s, str) else None
    if text is None or _FLOAT_TEXT_RE.fullmatch(text) is None:
        raise ValueError(f"Not a number: {s!r}")
    val = float(text)
    if not math.isfinite(val):
        raise ValueError(f"Not a finite number: {s!r}")
    return num_to_clean_str(val)
