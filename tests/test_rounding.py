import pytest

from rounding import (
    decimal_places,
    is_numeric_string,
    normalize_numeric_string,
    round_half_up,
    to_answer_text,
)


def test_numeric_pattern_accepts_plain_numbers():
    for s in ("0", "42", "-7", "3.14", "-0.50", "10000000000000000"):
        assert is_numeric_string(s), s


def test_numeric_pattern_rejects_malformed():
    for s in ("", " ", "3.1.4", "4,14", "--5", "+5", "5.", ".5", "abc", "1e3", "٣"):
        assert not is_numeric_string(s), s


def test_decimal_places():
    assert decimal_places("5") == 0
    assert decimal_places("4.00") == 2
    assert decimal_places("-2.125") == 3


def test_round_half_up_boundaries():
    assert round_half_up("1.334", 2) == "1.33"
    assert round_half_up("1.335", 2) == "1.34"
    assert round_half_up("0.3349", 2) == "0.33"
    assert round_half_up("0.3350", 2) == "0.34"


def test_round_half_up_pads_short_fractions():
    assert round_half_up("4", 2) == "4.00"
    assert round_half_up("2.5", 2) == "2.50"


def test_round_half_up_carries_into_integer_part():
    assert round_half_up("0.995", 2) == "1.00"
    assert round_half_up("99.999", 2) == "100.00"
    assert round_half_up("9.5", 0) == "10"


def test_round_half_up_zero_places():
    assert round_half_up("7.49", 0) == "7"
    assert round_half_up("7", 0) == "7"


def test_round_half_up_large_integer_part_is_exact():
    assert round_half_up("10000000000000000.5", 0) == "10000000000000001"
    assert round_half_up("99999999999999999999.995", 2) == "100000000000000000000.00"


def test_round_half_up_negative():
    assert round_half_up("-1.335", 2) == "-1.34"
    assert round_half_up("-3", 0) == "-3"


def test_round_half_up_drops_sign_of_zero():
    assert round_half_up("-0", 0) == "0"
    assert round_half_up("-0", 2) == "0.00"
    assert round_half_up("-0.004", 2) == "0.00"
    assert round_half_up("-0.005", 2) == "-0.01"


def test_round_half_up_rejects_negative_places():
    with pytest.raises(ValueError):
        round_half_up("1.5", -1)


def test_to_answer_text():
    assert to_answer_text(None) is None
    assert to_answer_text(15) == "15"
    assert to_answer_text(15.0) == "15"
    assert to_answer_text(2.5) == "2.5"
    assert to_answer_text(" 7 ") == " 7 "
    assert to_answer_text(0.00001) == "0.00001"
    assert to_answer_text(-1.5e-07) == "-0.00000015"


def test_normalize_numeric_string():
    assert normalize_numeric_string("5.00") == "5"
    assert normalize_numeric_string("3.40") == "3.4"
    assert normalize_numeric_string("10.123000") == "10.123"
    assert normalize_numeric_string("42") == "42"
    assert normalize_numeric_string("0") == "0"
    assert normalize_numeric_string("5.") == "5"


def test_normalize_numeric_string_rejects_text():
    for bad in ("abc", "", "nan", "inf", "-inf", "Infinity", "1_000", "1e400"):
        with pytest.raises(ValueError):
            normalize_numeric_string(bad)


def test_normalize_numeric_string_small_values_stay_plain():
    assert normalize_numeric_string("0.0000100") == "0.00001"
    assert normalize_numeric_string(" 2.50 ") == "2.5"
