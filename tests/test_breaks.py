"""Tests for boundary detection and line measurement."""

from textflow.breaks import is_boundary, measure_line


def test_end_of_paragraph_is_boundary():
    assert is_boundary("abc", 3)


def test_start_of_whitespace_run_is_boundary():
    assert is_boundary("ab  cd", 2)
    assert not is_boundary("ab  cd", 3)
    assert not is_boundary("ab  cd", 4)


def test_break_before_opening_brackets():
    for ch in "[({<|":
        assert is_boundary(f"a{ch}b", 1)


def test_break_after_closing_brackets_and_punctuation():
    for ch in "])}>.,:;*+-=&/\\":
        assert is_boundary(f"a{ch}b", 2)


def test_no_break_inside_word():
    assert not is_boundary("word", 2)


def test_measure_takes_short_remainder_whole():
    assert measure_line("a b ", 0, 10) == (4, False)


def test_measure_trims_trailing_whitespace():
    assert measure_line("alpha    beta", 0, 8) == (5, False)


def test_measure_hyphenates_without_boundary():
    assert measure_line("unbreakable", 0, 8) == (7, True)
    assert measure_line("unbreakable", 7, 8) == (4, False)
