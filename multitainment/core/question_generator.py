"""Random multiplication question generation."""

from __future__ import annotations

import random

from multitainment.constants.quiz_constants import MULTIPLIER_MAX, MULTIPLIER_MIN
from multitainment.core.models import Question, Round, RoundConfig


class QuestionGenerator:
    """Draws rounds of questions from a configurable table range."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def set_seed(self, seed: int | None) -> None:
        """Reseed the generator; ``None`` reseeds from system entropy."""
        self._rng.seed(seed)

    def generate_question(self, table_min: int, table_max: int) -> Question:
        return Question(
            multiplicand=self._rng.randint(table_min, table_max),
            multiplier=self._rng.randint(MULTIPLIER_MIN, MULTIPLIER_MAX),
        )

    def generate_round(self, config: RoundConfig) -> Round:
        """Return ``config.question_count`` questions for the configured tables."""
        return tuple(
            self.generate_question(config.table_min, config.table_max)
            for _ in range(config.question_count)
        )
