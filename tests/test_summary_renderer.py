"""Tests for the end-of-round summary."""

from multitainment.core.models import Question, RoundSummary
from multitainment.core.summary_renderer import SummaryRenderer, format_results_message


def _summary():
    return RoundSummary(
        questions=(Question(3, 4), Question(6, 7)),
        mistakes=3,
        mistakes_per_question=[1, 2],
        duration_seconds=12.4,
    )


def test_results_message():
    assert format_results_message(_summary()) == (
        "You answered 2 questions correctly and got 3 mistakes."
    )


def test_markdown_lists_each_question():
    markdown = SummaryRenderer().build_markdown(_summary())
    assert "| 1 | 3 \\* 4 | 12 | 1 |" in markdown
    assert "| 2 | 6 \\* 7 | 42 | 2 |" in markdown
    assert "Time: 12 s" in markdown


def test_html_contains_table_and_literal_expression():
    html = SummaryRenderer().render_html(_summary())
    assert "<table>" in html
    assert "6 * 7" in html
    assert "<em>" not in html
