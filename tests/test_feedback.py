from schemas.marking import Reason
from validation import validate_answer_with_feedback

Q = {"question": "10 + 5", "answer": "15", "numericAnswer": 15, "operation": "+"}


def test_feedback_correct():
    r = validate_answer_with_feedback(Q, "15")
    assert r.is_valid is True
    assert r.reason == Reason.CORRECT
    assert r.reason == "Correct"
    assert r.user_input == "15"
    assert r.expected == "15"
    assert r.user_number == 15.0 and r.expected_number == 15.0


def test_feedback_incorrect():
    r = validate_answer_with_feedback(Q, " 16 ")
    assert r.is_valid is False
    assert r.reason == "Incorrect value"
    assert r.user_input == "16"
    assert r.expected == "15"
    assert r.user_number == 16.0


def test_feedback_malformed():
    r = validate_answer_with_feedback({"question": "10 + 5", "answer": "15"}, "abc")
    assert r.is_valid is False
    assert r.reason == "Invalid numeric format"
    assert r.user_input == "abc"
    assert r.expected == "15"
    assert r.user_number is None and r.expected_number is None


def test_feedback_none_input():
    r = validate_answer_with_feedback(Q, None)
    assert r.reason == Reason.INVALID_FORMAT
    assert r.user_input == ""


def test_feedback_user_overflow_is_not_finite():
    r = validate_answer_with_feedback(Q, "1" * 400)
    assert r.is_valid is False
    assert r.reason == "User input is not a finite number"
    assert r.user_number is None


def test_feedback_expected_not_finite():
    r = validate_answer_with_feedback({"question": "1 / 0", "answer": "undefined"}, "1")
    assert r.is_valid is False
    assert r.reason == "Expected answer is not a finite number"
    assert r.expected == "undefined"
    assert r.user_number is None and r.expected_number is None
