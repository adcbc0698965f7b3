# tests/test_smart_fill.py
import pytest

from modules.smart_fill import (
    CHINESE_NUMERALS,
    HEAVENLY_STEMS,
    classify,
    predict,
    tokenize,
)


# ---------------------------------------------------------
# Numbers
# ---------------------------------------------------------
def test_single_number_steps_by_one():
    assert predict([5], 3) == [6, 7, 8]


def test_two_numbers_set_the_step():
    assert predict([2, 4], 3) == [6, 8, 10]


def test_numeric_strings_and_decimals():
    assert predict(["1.5", "2"], 2) == [2.5, 3]
    assert predict([0.1, 0.2], 3) == [0.3, 0.4, 0.5]


def test_integral_results_come_back_as_int():
    out = predict([1, 3], 2)
    assert out == [5, 7]
    assert all(isinstance(v, int) for v in out)


def test_eight_digit_numeral_is_a_number():
    assert classify(["20240101"]).kind == "number"
    assert predict(["20240101"], 1) == [20240102]


def test_thousands_separator_is_not_a_number():
    assert classify(["1,000", "2,000"]).kind == "text"
    assert predict(["1,000", "2,000"], 2) == ["3,000", "4,000"]


def test_bools_are_not_numbers():
    assert predict([True, False], 3) == [True, False, True]


# ---------------------------------------------------------
# Dates
# ---------------------------------------------------------
def test_date_progression():
    assert predict(["2024-01-01", "2024-01-03"], 2) == ["2024-01-05", "2024-01-07"]


def test_single_date_steps_one_day_across_month_end():
    assert predict(["2024-01-31"], 2) == ["2024-02-01", "2024-02-02"]


def test_leap_day_span():
    assert predict(["2024-02-28", "2024-03-01"], 1) == ["2024-03-03"]


def test_date_step_uses_first_and_last_and_rounds_half_up():
    # 3 days over 2 gaps -> 1.5 -> 2
    assert predict(["2024-01-01", "whatever", "2024-01-04"], 1) == ["2024-01-06"]


def test_date_shaped_strings_never_take_number_branch():
    assert classify(["2024-01-01"]).kind == "date"
    assert classify(["2024-01-01", "2024-02-01"]).kind == "date"


def test_invalid_calendar_date_falls_to_text():
    assert classify(["2024-02-30", "2024-02-31"]).kind == "text"
    assert predict(["2024-02-30", "2024-02-31"], 1) == ["2024-02-32"]


def test_projection_past_year_9999_is_not_a_date():
    samples = ["9999-12-30", "9999-12-31"]
    assert classify(samples).kind == "date"
    assert classify(samples, 1).kind == "text"
    assert len(predict(samples, 3)) == 3


# ---------------------------------------------------------
# Structured text
# ---------------------------------------------------------
def test_tokenize():
    assert tokenize("Class A1") == ["Class", " ", "A", "1"]
    assert tokenize("第3课") == ["第", "3", "课"]
    assert tokenize("R-12/b") == ["R", "-", "12", "/", "b"]
    assert tokenize("") == []


def test_zero_padded_codes():
    assert predict(["007", "009"], 2) == ["011", "013"]
    assert predict(["010", "008"], 2) == ["006", "004"]


def test_mixed_text_keeps_literals():
    assert predict(["Class A1", "Class A3"], 2) == ["Class A5", "Class A7"]


def test_padded_number_inside_text():
    assert predict(["Lesson 01", "Lesson 02"], 2) == ["Lesson 03", "Lesson 04"]


def test_fractional_token_steps_accumulate_and_round_half_up():
    # 1 -> 4 over 2 gaps: 1.5 per step, rendered 5.5->6, 7, 8.5->9
    assert predict(["Row 1", "Row 2", "Row 4"], 3) == ["Row 6", "Row 7", "Row 9"]


def test_letter_inside_code_advances():
    assert predict(["A1"], 2) == ["B2", "C3"]


def test_letters_do_not_wrap_past_z():
    assert predict(["Y1", "Z2"], 2) == ["[3", "\\4"]


def test_stems_wrap_within_enumeration():
    out = predict(["甲", "癸"], 5)
    assert out == ["壬", "辛", "庚", "己", "戊"]
    assert all(v in HEAVENLY_STEMS for v in out)


def test_stems_wrap_backwards_without_negative_index():
    assert predict(["丙", "乙"], 3) == ["甲", "癸", "壬"]


def test_chinese_numerals():
    assert predict(["第一课", "第三课"], 2) == ["第五课", "第七课"]
    out = predict(["九", "十"], 2)
    assert out == ["一", "二"]
    assert all(v in CHINESE_NUMERALS for v in out)


# ---------------------------------------------------------
# Fallbacks
# ---------------------------------------------------------
def test_empty_samples_give_blank_cells():
    assert predict([], 3) == ["", "", ""]


def test_bare_letters_cycle():
    assert predict(["x", "y", "z"], 5) == ["x", "y", "z", "x", "y"]
    assert predict(["A"], 2) == ["A", "A"]


def test_plain_words_cycle():
    assert predict(["foo", "bar"], 3) == ["foo", "bar", "foo"]


def test_token_count_mismatch_cycles():
    assert classify(["Room 1", "Room 1B"]).kind == "cycle"
    assert predict(["Room 1", "Room 1B"], 3) == ["Room 1", "Room 1B", "Room 1"]


def test_mixed_types_cycle():
    assert predict([1, "a"], 3) == [1, "a", 1]
    assert predict([None], 2) == [None, None]


@pytest.mark.parametrize("count", [0, -2])
def test_non_positive_count_gives_nothing(count):
    assert predict([1, 2], count) == []


@pytest.mark.parametrize("samples", [
    [],
    [5],
    ["2024-01-01", "2024-01-03"],
    ["Class A1", "Class A3"],
    ["甲", "癸"],
    ["x", "y", "z"],
    [None, 3.5, "??"],
])
def test_deterministic_and_exact_length(samples):
    first = predict(samples, 7)
    assert len(first) == 7
    assert predict(samples, 7) == first


# ---------------------------------------------------------
# Numeric edges
# ---------------------------------------------------------
def test_two_decimal_ties_round_away_from_zero():
    assert predict([0.125], 1) == [1.13]
    assert predict([-2.125], 1) == [-1.13]


def test_overflowing_number_does_not_raise():
    assert predict([1e30], 1) == [1e30]
    out = predict([1e308, 1.7e308], 2)
    assert len(out) == 2


def test_very_long_digit_run_is_kept_verbatim():
    code = "ID" + "1" * 5000
    assert classify([code]).kind == "cycle"
    assert predict([code], 1) == [code]


def test_very_long_digit_run_next_to_a_counter():
    code = "ID" + "1" * 5000 + "-"
    assert predict([code + "1"], 2) == [code + "2", code + "3"]


def test_letter_codes_are_raw_16_bit_units():
    from fractions import Fraction
    from modules.smart_fill import TokenStep, _render

    # no wrap back to letters; surrogate range is emitted as-is
    assert _render(TokenStep("letter", Fraction(0xD800))) == "\ud800"
    assert _render(TokenStep("letter", Fraction(0x10041))) == "A"
