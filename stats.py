# stats.py
from __future__ import annotations

import re
from typing import Any, Mapping, Optional, Tuple, Union

from expressions import evaluate_expression
from rounding import is_numeric_string
from schemas.questions import Operands, Question, QuestionStats

# Difficulty = base score for the operation + bonuses, clamped to 1..10.
_BASE_SCORE = {"+": 1, "-": 2, "*": 3, "/": 4}
_MAX_DIFFICULTY = 10
_LARGE_RESULT = 1000

_EXPR_RE = re.compile(r"^\s*(-?\d+)\s*([+\-*/])\s*(-?\d+)\s*$")


def _parse_expression(expr: Optional[str]) -> Optional[Tuple[int, str, int]]:
    if not expr:
        return None
    m = _EXPR_RE.match(expr)
    if not m:
        return None
    return int(m.group(1)), m.group(2), int(m.group(3))


def _coerce(question: Union[Question, Mapping[str, Any]]) -> Question:
    if isinstance(question, Question):
        return question
    return Question.model_validate(dict(question))


def difficulty_score(a: int, b: int, op: str, result: float) -> int:
    score = _BASE_SCORE[op]

    biggest = max(abs(a), abs(b))
    if biggest > 50:
        score += 2
    elif biggest > 10:
        score += 1

    if not float(result).is_integer():
        score += 2
    if abs(result) > _LARGE_RESULT:
        score += 1

    return max(1, min(score, _MAX_DIFFICULTY))


def get_question_stats(question: Union[Question, Mapping[str, Any]]) -> QuestionStats:
    """
    Summarise a question: operands, numeric result, operation and a 1..10
    difficulty. Missing operands/operation are read back from the expression,
    and so is the result when the stored answer is not a plain number.
    """
    q = _coerce(question)

    operands, op = q.operands, q.operation
    if operands is None or op is None:
        parsed = _parse_expression(q.expression)
        if parsed is None:
            raise ValueError(f"Cannot read operands from expression {q.expression!r}")
        a, parsed_op, b = parsed
        operands = operands or (a, b)
        op = op or parsed_op

    if q.numeric_answer is not None:
        result = q.numeric_answer
    elif is_numeric_string(q.canonical_answer.strip()):
        result = float(q.canonical_answer)
    else:
        result = evaluate_expression(q.expression)
    a, b = operands
    return QuestionStats(
        operands=Operands(num1=a, num2=b),
        result=result,
        operation=op,
        difficulty=difficulty_score(a, b, op, result),
        has_decimals=not float(result).is_integer(),
    )
