import pytest
from sympy import Rational

from expressions import evaluate_expression, exact_value, format_fixed


def test_evaluate_valid():
    assert abs(evaluate_expression("(3 + 4) * 5 - 10") - 25.0) < 1e-9
    assert evaluate_expression("87 - -3") == 90
    assert evaluate_expression("10 / 4") == 2.5


def test_exact_value_is_rational():
    assert exact_value("10 / 7") == Rational(10, 7)
    assert exact_value("2.5 * 2") == 5


def test_evaluate_invalid_chars():
    with pytest.raises(ValueError, match="allowed"):
        evaluate_expression("abc")
    with pytest.raises(ValueError, match="allowed"):
        evaluate_expression("3^2")


def test_evaluate_len_limit():
    with pytest.raises(ValueError):
        evaluate_expression("1" * 101)


def test_evaluate_division_by_zero():
    with pytest.raises(ValueError, match="not finite"):
        evaluate_expression("1 / 0")


def test_format_fixed_ties_away_from_zero():
    assert format_fixed(Rational(1, 8), 2) == "0.13"
    assert format_fixed(Rational(10, 7), 2) == "1.43"
    assert format_fixed(Rational(8, 2), 2) == "4.00"
    assert format_fixed(Rational(7, 2), 0) == "4"
    assert format_fixed(Rational(-5, 2), 2) == "-2.50"
    assert format_fixed(Rational(-1, 1000), 2) == "0.00"
