"""Markdown rendering of the end-of-round summary.

The summary is written as Markdown and converted to an HTML fragment that
QMessageBox can show as rich text.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt

from multitainment.constants.ui_constants import RESULTS_MESSAGE_TEMPLATE
from multitainment.core.models import RoundSummary


def format_results_message(summary: RoundSummary) -> str:
    return RESULTS_MESSAGE_TEMPLATE.format(count=summary.question_count, mistakes=summary.mistakes)


@dataclass(slots=True)
class SummaryRenderer:
    """Converts a RoundSummary into Markdown and HTML."""

    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": False}).enable("table")

    def build_markdown(self, summary: RoundSummary) -> str:
        lines = [format_results_message(summary), ""]
        if summary.questions:
            lines.append("| # | Question | Answer | Mistakes |")
            lines.append("|---|---|---|---|")
            counts = summary.mistakes_per_question or [0] * summary.question_count
            for position, (question, mistakes) in enumerate(zip(summary.questions, counts), start=1):
                # Escape "*" so the expression is not read as emphasis.
                expression = question.expression.replace("*", "\\*")
                lines.append(f"| {position} | {expression} | {question.product} | {mistakes} |")
            lines.append("")
        lines.append(f"Time: {summary.duration_seconds:.0f} s")
        return "\n".join(lines)

    def render_html(self, summary: RoundSummary) -> str:
        return self._markdown.render(self.build_markdown(summary))


renderer = SummaryRenderer()
