# mathcaptcha.py
"""
Arithmetic captcha questions and answer checking.

    >>> from mathcaptcha import generate_question, validate_answer
    >>> q = generate_question()
    >>> validate_answer(q, q.canonical_answer)
    True
"""

from config import config_override, get_config, reset_config, set_config
from expressions import evaluate_expression
from generator import (
    UnsatisfiableConstraintsError,
    generate_question,
    generate_question_with_constraints,
    generate_questions,
)
from rounding import normalize_numeric_string, round_half_up
from schemas.config import NumberRange, QuizConfig
from schemas.marking import AnswerCheck, Reason, ValidationResult
from schemas.questions import Question, QuestionStats
from stats import get_question_stats
from validation import (
    check_if_solved_correctly,
    validate_answer,
    validate_answer_flexible,
    validate_answer_strict,
    validate_answer_with_feedback,
    validate_answers,
)

# Older names, kept for callers of the first release.
generate_random_math_question = generate_question
generate_multiple_questions = generate_questions

__all__ = [
    "AnswerCheck",
    "NumberRange",
    "Question",
    "QuestionStats",
    "QuizConfig",
    "Reason",
    "UnsatisfiableConstraintsError",
    "ValidationResult",
    "check_if_solved_correctly",
    "config_override",
    "evaluate_expression",
    "generate_multiple_questions",
    "generate_question",
    "generate_question_with_constraints",
    "generate_questions",
    "generate_random_math_question",
    "get_config",
    "get_question_stats",
    "normalize_numeric_string",
    "reset_config",
    "round_half_up",
    "set_config",
    "validate_answer",
    "validate_answer_flexible",
    "validate_answer_strict",
    "validate_answer_with_feedback",
    "validate_answers",
]
