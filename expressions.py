# expressions.py
from __future__ import annotations

import math
import re

from sympy import Rational
from sympy.parsing.sympy_parser import parse_expr, standard_transformations

LEN_LIMIT = 100
_INVALID_CHARS_MSG = "Only digits, spaces, + - * / . and parentheses are allowed."
_NON_FINITE_MSG = "Expression is not finite (e.g., division by zero)."
_ALLOWED_RE = re.compile(r"[0-9+\-*/().\s]+")


def exact_value(expr: str) -> Rational:
    """Evaluate a question's expression exactly. Raises ValueError with a readable message."""
    if not isinstance(expr, str) or not expr.strip():
        raise ValueError("Expression required.")
    if len(expr) > LEN_LIMIT:
        raise ValueError(f"Expression too long (> {LEN_LIMIT}).")
    if _ALLOWED_RE.fullmatch(expr) is None:
        raise ValueError(_INVALID_CHARS_MSG)
    try:
        val = parse_expr(expr, transformations=standard_transformations, evaluate=True)
    except Exception:
        raise ValueError(_INVALID_CHARS_MSG)
    if getattr(val, "is_finite", None) is False:
        raise ValueError(_NON_FINITE_MSG)
    if not isinstance(val, Rational):
        # "2.5 * 2" parses to a Float
        try:
            val = Rational(str(val))
        except (TypeError, ValueError):
            raise ValueError(_INVALID_CHARS_MSG)
    return val


def evaluate_expression(expr: str) -> float:
    val = float(exact_value(expr))
    if not math.isfinite(val):
        raise ValueError(_NON_FINITE_MSG)
    return val


def format_fixed(value: Rational, places: int) -> str:
    """Render an exact rational with ``places`` decimals, ties away from zero."""
    value = Rational(value)
    scale = 10**places
    num, den = abs(value.p) * scale, value.q
    scaled = (2 * num + den) // (2 * den)
    digits = str(scaled).zfill(places + 1)
    text = digits[: len(digits) - places] + ("." + digits[len(digits) - places :] if places else "")
    if value < 0 and scaled:
        return "-" + text
    return text
