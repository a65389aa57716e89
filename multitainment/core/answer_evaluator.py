"""Parsing and checking of answers and question expressions.

Answers come straight from a text field, so parsing is forgiving: anything
that is not a whole number (including an empty field) counts as ``0`` and is
then graded like any other answer. Question expressions are produced by
:class:`~multitainment.core.models.Question` itself and are parsed strictly.
"""

from __future__ import annotations

import re

from multitainment.core.models import Question


class QuestionParseError(ValueError):
    """Raised when a question expression is not of the form ``a * b``."""


_EXPRESSION_PATTERN = re.compile(r"^\s*(\d+)\s*\*\s*(\d+)\s*$")
_ANSWER_PATTERN = re.compile(r"^[+-]?\d+$")


def parse_answer(text: str | None) -> int:
    if text is None:
        return 0
    cleaned = text.strip()
    if not _ANSWER_PATTERN.match(cleaned):
        return 0
    return int(cleaned)


def parse_question(expression: str) -> Question:
    match = _EXPRESSION_PATTERN.match(expression or "")
    if match is None:
        raise QuestionParseError(f"Not a multiplication question: {expression!r}")
    return Question(multiplicand=int(match.group(1)), multiplier=int(match.group(2)))


def expected_product(question: Question | str) -> int:
    """Return the correct answer for a question or its ``a * b`` expression."""
    if isinstance(question, str):
        question = parse_question(question)
    return question.product


def is_correct(question: Question | str, answer: int | str | None) -> bool:
    if not isinstance(answer, int):
        answer = parse_answer(answer)
    return answer == expected_product(question)
