"""Domain models for the multiplication quiz."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from multitainment.constants.quiz_constants import (
    QUESTION_COUNT_CHOICES,
    TABLE_MAX_LIMIT,
    TABLE_MIN_LIMIT,
)


class InvalidRoundConfig(ValueError):
    """Raised when a round cannot be generated from the requested settings."""


@dataclass(frozen=True, slots=True)
class Question:
    """A single multiplication question: multiplicand times multiplier."""

    multiplicand: int
    multiplier: int

    @property
    def expression(self) -> str:
        return f"{self.multiplicand} * {self.multiplier}"

    @property
    def product(self) -> int:
        return self.multiplicand * self.multiplier


Round = tuple[Question, ...]


@dataclass(frozen=True, slots=True)
class RoundConfig:
    """Validated settings used to generate one round."""

    table_min: int
    table_max: int
    question_count: int

    def __post_init__(self) -> None:
        for name, value in (("table_min", self.table_min), ("table_max", self.table_max)):
            if not TABLE_MIN_LIMIT <= value <= TABLE_MAX_LIMIT:
                raise InvalidRoundConfig(
                    f"{name} must be between {TABLE_MIN_LIMIT} and {TABLE_MAX_LIMIT}, got {value}."
                )
        if self.table_min > self.table_max:
            raise InvalidRoundConfig(
                f"table_min ({self.table_min}) cannot be greater than table_max ({self.table_max})."
            )
        if self.question_count not in QUESTION_COUNT_CHOICES:
            choices = ", ".join(str(choice) for choice in QUESTION_COUNT_CHOICES)
            raise InvalidRoundConfig(f"question_count must be one of {choices}, got {self.question_count}.")


class GamePhase(Enum):
    """Lifecycle of a round."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    VERIFYING = auto()
    FINISHED = auto()


class SubmissionOutcome(Enum):
    """What a single answer submission did to the round."""

    NOT_STARTED = auto()
    INCORRECT = auto()
    CORRECT = auto()
    ROUND_COMPLETE = auto()


@dataclass(slots=True)
class RoundSummary:
    """Final report for a completed round."""

    questions: Round
    mistakes: int
    mistakes_per_question: list[int] = field(default_factory=list)
    duration_seconds: float = 0.0

    @property
    def question_count(self) -> int:
        return len(self.questions)


@dataclass(slots=True)
class SubmissionResult:
    """Result of checking one answer against the current question."""

    outcome: SubmissionOutcome
    question: Question | None = None
    answer: int | None = None
    summary: RoundSummary | None = None

    @property
    def expected(self) -> int | None:
        return self.question.product if self.question is not None else None

    @property
    def is_correct(self) -> bool:
        return self.outcome in (SubmissionOutcome.CORRECT, SubmissionOutcome.ROUND_COMPLETE)
