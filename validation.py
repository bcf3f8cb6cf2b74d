# validation.py
from __future__ import annotations

import math
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

import config as _cfg
from rounding import decimal_places, is_numeric_string, round_half_up, to_answer_text
from schemas.config import QuizConfig
from schemas.marking import AnswerCheck, Reason, ValidationResult
from schemas.questions import Question

QuestionLike = Union[Question, Mapping[str, Any]]

# legacy key names sent by older clients
_CAMEL = {"numeric_answer": "numericAnswer", "expression": "question"}


# --- Question accessors -----------------------------------------------------------


def _get_raw_expected(q: QuestionLike) -> Optional[str]:
    """
    Be tolerant to different question shapes: a Question, or a mapping carrying
    the expected value under answer, canonical_answer or expected.
    Numbers are rendered to text. Returns None when nothing usable is found.
    """
    if isinstance(q, Question):
        return q.canonical_answer.strip() or None
    if not isinstance(q, Mapping):
        return None
    for key in ("answer", "canonical_answer", "expected"):
        v = q.get(key)
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return to_answer_text(v)
        if isinstance(v, str) and v.strip():
            return v.strip()
    return None


def _get_field(q: QuestionLike, name: str) -> Any:
    if isinstance(q, Question):
        return getattr(q, name)
    if isinstance(q, Mapping):
        for key in (name, _CAMEL.get(name, name)):
            if key in q:
                return q[key]
    return None


def _user_text(user_answer: Any) -> Optional[str]:
    text = to_answer_text(user_answer)
    return None if text is None else text.strip()


def _to_finite(s: Optional[str]) -> Optional[float]:
    if s is None:
        return None
    try:
        val = float(s)
    except (TypeError, ValueError):
        return None
    return val if math.isfinite(val) else None


# --- Strict ---------------------------------------------------------------------


def validate_answer(question: QuestionLike, user_answer: Any) -> bool:
    """
    Strict check of ``user_answer`` against the question's canonical answer.

    The canonical answer's decimal places set the required precision:
      - no decimals: the input must have no decimal point and equal the
        canonical answer ("5.0" is wrong for "5"; "-0" is right for "0").
      - d decimals: the input is rounded half-up to d places and compared as
        text ("1.334" is right for "1.33", "1.335" is not).
    Negative inputs with a decimal point are always rejected against a
    decimal answer, even when numerically equal. This is a business rule.
    """
    user = _user_text(user_answer)
    if user is None or not is_numeric_string(user):
        return False

    expected = _get_raw_expected(question)
    if expected is None or not is_numeric_string(expected):
        return False

    places = decimal_places(expected)
    if places == 0:
        if "." in user:
            return False
        return round_half_up(user, 0) == expected

    if user.startswith("-") and "." in user:
        return False

    return round_half_up(user, places) == expected


validate_answer_strict = validate_answer


def check_if_solved_correctly(question: QuestionLike, user_answer: Any) -> bool:
    return validate_answer(question, user_answer)


# --- Flexible -------------------------------------------------------------------


def validate_answer_with_feedback(
    question: QuestionLike,
    user_answer: Any,
    *,
    config: Optional[QuizConfig] = None,
) -> ValidationResult:
    """
    Tolerance-based comparison with a reason attached.

    Division answers are rounded on both sides to ``division_precision + 2``
    places before the tolerance check.
    """
    cfg = config if config is not None else _cfg.get_config()
    user = _user_text(user_answer)
    expected = _get_raw_expected(question)

    if user is None or not is_numeric_string(user):
        return ValidationResult(
            is_valid=False,
            reason=Reason.INVALID_FORMAT,
            user_input=user or "",
            expected=expected,
        )

    user_val = _to_finite(user)
    if user_val is None:
        return ValidationResult(
            is_valid=False, reason=Reason.USER_NOT_FINITE, user_input=user, expected=expected
        )

    exp_val = _expected_number(question, expected)
    if exp_val is None:
        return ValidationResult(
            is_valid=False, reason=Reason.EXPECTED_NOT_FINITE, user_input=user, expected=expected
        )

    a, b = user_val, exp_val
    if _get_field(question, "operation") == "/":
        digits = cfg.division_precision + 2
        a, b = round(a, digits), round(b, digits)
    correct = math.isclose(a, b, rel_tol=0, abs_tol=cfg.tolerance)

    return ValidationResult(
        is_valid=correct,
        reason=Reason.CORRECT if correct else Reason.INCORRECT,
        user_input=user,
        expected=expected,
        user_number=user_val,
        expected_number=exp_val,
    )


def validate_answer_flexible(
    question: QuestionLike, user_answer: Any, *, config: Optional[QuizConfig] = None
) -> bool:
    return validate_answer_with_feedback(question, user_answer, config=config).is_valid


def _expected_number(question: QuestionLike, expected: Optional[str]) -> Optional[float]:
    raw = _get_field(question, "numeric_answer")
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return float(raw) if math.isfinite(raw) else None
    return _to_finite(expected)


# --- Batch ----------------------------------------------------------------------


def _unpack_pair(pair: Any) -> Tuple[QuestionLike, Any]:
    if isinstance(pair, Mapping):
        return pair.get("question"), pair.get("answer")
    question, answer = pair
    return question, answer


def validate_answers(pairs: Iterable[Any]) -> List[AnswerCheck]:
    """
    Strict-check every (question, answer) pair, in order.

    Pairs may be 2-tuples or mappings with "question" and "answer" keys.
    Every pair is evaluated; one bad pair never stops the rest.
    """
    results: List[AnswerCheck] = []
    for idx, pair in enumerate(pairs):
        question, answer = _unpack_pair(pair)
        expression = _get_field(question, "expression")
        results.append(
            AnswerCheck(
                index=idx,
                expression=expression if isinstance(expression, str) else None,
                user_input=_user_text(answer),
                expected=_get_raw_expected(question),
                is_valid=validate_answer(question, answer),
            )
        )
    return results
