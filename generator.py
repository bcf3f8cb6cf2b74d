# generator.py
from __future__ import annotations

import logging
import random
from typing import Any, List, Mapping, Optional, Sequence, Union

from sympy import Integer, Rational

import config as _cfg
from expressions import format_fixed
from schemas.config import NumberRange, QuizConfig
from schemas.questions import Question

logger = logging.getLogger("math-captcha")

UNSATISFIABLE_MSG = "Could not generate question within constraints"


class UnsatisfiableConstraintsError(RuntimeError):
    """No candidate met the result bounds within the configured attempt budget."""

    def __init__(self, message: str = UNSATISFIABLE_MSG, attempts: int = 0):
        super().__init__(message)
        self.attempts = attempts


# --- Low-level helpers ------------------------------------------------------------


def _exact_result(a: int, b: int, op: str) -> Rational:
    if op == "+":
        return Integer(a + b)
    if op == "-":
        return Integer(a - b)
    if op == "*":
        return Integer(a * b)
    if b == 0:
        raise ZeroDivisionError(f"division by zero in generated question {a} / {b}")
    return Rational(a, b)


def _build(a: int, b: int, op: str, precision: int) -> Question:
    value = _exact_result(a, b, op)
    if op == "/":
        answer = format_fixed(value, precision)
        numeric = float(answer)
    else:
        answer = str(int(value))
        numeric = float(int(value))
    return Question(
        expression=f"{a} {op} {b}",
        canonical_answer=answer,
        numeric_answer=numeric,
        operation=op,
        operands=(a, b),
    )


def _roll(cfg: QuizConfig, rng: random.Random):
    a = rng.randint(cfg.number_range.min, cfg.number_range.max)
    b = rng.randint(cfg.number_range.min, cfg.number_range.max)
    op = rng.choice(cfg.operations)
    if op == "-" and cfg.avoid_negative_results and a < b:
        a, b = b, a
    return a, b, op


def _check_precision(precision: int) -> int:
    if precision < 0:
        raise ValueError("precision must be >= 0")
    return precision


def _try_once(cfg: QuizConfig, rng, precision: int, attempt: int) -> Optional[Question]:
    a, b, op = _roll(cfg, rng)
    if op == "/" and b == 0 and cfg.avoid_division_by_zero:
        logger.debug("attempt %d: zero divisor, re-rolling", attempt)
        return None
    if cfg.avoid_negative_results and _exact_result(a, b, op) < 0:
        logger.debug("attempt %d: %s %s %s is negative, re-rolling", attempt, a, op, b)
        return None
    return _build(a, b, op, precision)


# --- Public API -------------------------------------------------------------------


def generate_question(
    precision: Optional[int] = None,
    *,
    config: Optional[QuizConfig] = None,
    rng: Optional[random.Random] = None,
) -> Question:
    """
    Roll one question from ``config`` (the process-wide settings by default).

    A zero divisor is re-rolled when ``avoid_division_by_zero`` is set. If the
    attempt budget runs out the result is a plain ``1 + 1`` question; with the
    flag off a zero divisor raises ZeroDivisionError.
    """
    cfg = config if config is not None else _cfg.get_config()
    rng = rng or random
    precision = _check_precision(cfg.division_precision if precision is None else precision)

    for attempt in range(1, cfg.max_attempts + 1):
        q = _try_once(cfg, rng, precision, attempt)
        if q is not None:
            return q

    logger.warning(
        "no usable question after %d attempts; falling back to 1 + 1", cfg.max_attempts
    )
    return _build(1, 1, "+", precision)


def generate_questions(
    count: int,
    precision: Optional[int] = None,
    *,
    config: Optional[QuizConfig] = None,
    rng: Optional[random.Random] = None,
) -> List[Question]:
    if count < 0:
        raise ValueError("count must be >= 0")
    cfg = config if config is not None else _cfg.get_config()
    return [generate_question(precision, config=cfg, rng=rng) for _ in range(count)]


def generate_question_with_constraints(
    operations: Optional[Sequence[str]] = None,
    number_range: Optional[Union[NumberRange, Mapping[str, Any]]] = None,
    max_result: Optional[float] = None,
    min_result: Optional[float] = None,
    precision: Optional[int] = None,
    *,
    config: Optional[QuizConfig] = None,
    rng: Optional[random.Random] = None,
) -> Question:
    """
    Generate a question whose numeric answer lies in [min_result, max_result].

    ``operations`` and ``number_range`` override the settings for this call
    only. Raises UnsatisfiableConstraintsError once ``max_attempts`` candidates
    have missed the bounds.
    """
    changes: dict = {}
    if operations is not None:
        changes["operations"] = list(operations)
    if number_range is not None:
        if isinstance(number_range, NumberRange):
            number_range = number_range.model_dump()
        changes["number_range"] = dict(number_range)

    if config is not None:
        cfg = QuizConfig.model_validate({**config.model_dump(), **changes})
        return _constrained(cfg, max_result, min_result, precision, rng)

    with _cfg.config_override(**changes) as cfg:
        return _constrained(cfg, max_result, min_result, precision, rng)


def _constrained(
    cfg: QuizConfig,
    max_result: Optional[float],
    min_result: Optional[float],
    precision: Optional[int],
    rng: Optional[random.Random],
) -> Question:
    rng = rng or random
    precision = _check_precision(cfg.division_precision if precision is None else precision)

    for attempt in range(1, cfg.max_attempts + 1):
        q = _try_once(cfg, rng, precision, attempt)
        if q is None:
            continue
        if max_result is not None and q.numeric_answer > max_result:
            continue
        if min_result is not None and q.numeric_answer < min_result:
            continue
        logger.debug("constrained question found on attempt %d: %s", attempt, q.expression)
        return q
    raise UnsatisfiableConstraintsError(attempts=cfg.max_attempts)
