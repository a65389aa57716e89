"""Tests for answer parsing and grading."""

import pytest

from multitainment.core.answer_evaluator import (
    QuestionParseError,
    expected_product,
    is_correct,
    parse_answer,
    parse_question,
)
from multitainment.core.models import Question


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  42 ", 42),
        ("-3", -3),
        ("+8", 8),
        ("", 0),
        ("   ", 0),
        (None, 0),
        ("abc", 0),
        ("4.5", 0),
        ("1 2", 0),
    ],
)
def test_parse_answer(text, expected):
    assert parse_answer(text) == expected


def test_parse_question():
    assert parse_question("7 * 8") == Question(7, 8)
    assert parse_question("12*3") == Question(12, 3)


@pytest.mark.parametrize("expression", ["", "7 x 8", "7 * ", "seven * 8", "7 + 8"])
def test_parse_question_rejects_malformed(expression):
    with pytest.raises(QuestionParseError):
        parse_question(expression)


def test_expected_product_accepts_expression_or_question():
    assert expected_product("6 * 7") == 42
    assert expected_product(Question(6, 7)) == 42


def test_is_correct():
    question = Question(9, 9)
    assert is_correct(question, 81)
    assert is_correct(question, " 81 ")
    assert not is_correct(question, 80)
    assert not is_correct(question, "")


def test_empty_answer_counts_as_zero():
    assert is_correct(Question(0, 5), "")
