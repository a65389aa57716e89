"""Business logic tying round settings, generation and the game session together."""

from __future__ import annotations

import logging

from multitainment.constants.quiz_constants import (
    DEFAULT_QUESTION_COUNT,
    DEFAULT_TABLE_MAX,
    DEFAULT_TABLE_MIN,
    QUESTION_COUNT_CHOICES,
    TABLE_MAX_LIMIT,
    TABLE_MIN_LIMIT,
)
from multitainment.core.answer_evaluator import parse_answer
from multitainment.core.models import (
    GamePhase,
    Question,
    RoundConfig,
    SubmissionOutcome,
    SubmissionResult,
)
from multitainment.core.question_generator import QuestionGenerator
from multitainment.core.services.game_session import GameSession

logger = logging.getLogger(__name__)


def _clamp_table(value: int) -> int:
    return max(TABLE_MIN_LIMIT, min(TABLE_MAX_LIMIT, value))


class QuizManager:
    """Facade for the UI: round settings, QuestionGenerator and GameSession."""

    def __init__(self, generator: QuestionGenerator | None = None) -> None:
        self._generator = generator or QuestionGenerator()
        self._session = GameSession()

        self._table_min: int = DEFAULT_TABLE_MIN
        self._table_max: int = DEFAULT_TABLE_MAX
        self._question_count: int = DEFAULT_QUESTION_COUNT

    # --- Round settings ---

    def set_table_min(self, value: int) -> int:
        """Set the lowest table, kept one below the maximum.

        Returns the value actually stored so the caller can sync its widget.
        """
        self._table_min = _clamp_table(value)
        if self._table_min >= self._table_max:
            self._table_min = self._table_max - 1
        return self._table_min

    def set_table_max(self, value: int) -> int:
        """Set the highest table, kept one above the minimum."""
        self._table_max = _clamp_table(value)
        if self._table_min >= self._table_max:
            self._table_max = self._table_min + 1
        return self._table_max

    def get_table_range(self) -> tuple[int, int]:
        return self._table_min, self._table_max

    def set_question_count(self, count: int | str) -> int:
        try:
            parsed = int(count)
        except (TypeError, ValueError):
            parsed = DEFAULT_QUESTION_COUNT
        self._question_count = parsed if parsed in QUESTION_COUNT_CHOICES else DEFAULT_QUESTION_COUNT
        return self._question_count

    def get_question_count(self) -> int:
        return self._question_count

    def set_seed(self, seed: int | None) -> None:
        self._generator.set_seed(seed)

    # --- Round lifecycle ---

    def start_round(self) -> Question:
        config = RoundConfig(
            table_min=self._table_min,
            table_max=self._table_max,
            question_count=self._question_count,
        )
        questions = self._generator.generate_round(config)
        self._session.start(questions)
        logger.info(
            "Started round: %d questions from tables %d-%d",
            config.question_count,
            config.table_min,
            config.table_max,
        )
        return questions[0]

    def submit_answer(self, text: str | None) -> SubmissionResult:
        """Grade the raw answer text; a completed round resets to not started."""
        result = self._session.submit(parse_answer(text))
        if result.outcome is SubmissionOutcome.ROUND_COMPLETE and result.summary is not None:
            logger.info(
                "Round complete: %d questions, %d mistakes, %.1fs",
                result.summary.question_count,
                result.summary.mistakes,
                result.summary.duration_seconds,
            )
            self.reset_round()
        return result

    def reset_round(self) -> None:
        self._session.reset()

    # --- Queries ---

    def is_round_active(self) -> bool:
        return self._session.is_active()

    def get_phase(self) -> GamePhase:
        return self._session.get_phase()

    def get_current_question(self) -> Question | None:
        return self._session.get_current_question()

    def get_current_expression(self) -> str:
        question = self._session.get_current_question()
        return question.expression if question is not None else ""

    def get_current_index(self) -> int:
        return self._session.get_current_index()

    def get_round_length(self) -> int:
        return len(self._session.get_round())

    def get_mistakes(self) -> int:
        return self._session.get_mistakes()
