"""Service for managing the active round and its state transitions."""

from __future__ import annotations

from datetime import datetime, timezone
import logging

from multitainment.core.answer_evaluator import is_correct
from multitainment.core.models import (
    GamePhase,
    Question,
    Round,
    RoundSummary,
    SubmissionOutcome,
    SubmissionResult,
)
from multitainment.core.services.mistake_tally import MistakeTally

logger = logging.getLogger(__name__)


class GameSession:
    """State machine for one round: not started, in progress, verifying, finished."""

    def __init__(self) -> None:
        self._phase: GamePhase = GamePhase.NOT_STARTED
        self._round: Round = ()
        self._current_index: int = 0
        self._mistakes: int = 0
        self._answer_verified: bool = False
        self._last_answer_correct: bool = False
        self._started_at: datetime | None = None
        self._tally = MistakeTally()

    def start(self, questions: Round) -> None:
        if not questions:
            raise ValueError("Cannot start a round without questions.")
        self.reset()
        self._round = tuple(questions)
        self._tally.initialize(len(self._round))
        self._started_at = datetime.now(timezone.utc)
        self._phase = GamePhase.IN_PROGRESS

    def reset(self) -> None:
        self._phase = GamePhase.NOT_STARTED
        self._round = ()
        self._current_index = 0
        self._mistakes = 0
        self._answer_verified = False
        self._last_answer_correct = False
        self._started_at = None
        self._tally.clear()

    def is_active(self) -> bool:
        return self._phase in (GamePhase.IN_PROGRESS, GamePhase.VERIFYING)

    def get_phase(self) -> GamePhase:
        return self._phase

    def get_round(self) -> Round:
        return self._round

    def get_current_index(self) -> int:
        return self._current_index

    def get_current_question(self) -> Question | None:
        if not self.is_active():
            return None
        return self._round[self._current_index]

    def get_mistakes(self) -> int:
        return self._mistakes

    def is_answer_verified(self) -> bool:
        return self._answer_verified

    def was_last_answer_correct(self) -> bool:
        return self._last_answer_correct

    def submit(self, answer: int) -> SubmissionResult:
        """Check ``answer`` against the current question and advance the round."""
        if not self.is_active():
            return SubmissionResult(outcome=SubmissionOutcome.NOT_STARTED, answer=answer)

        question = self._round[self._current_index]
        # VERIFYING only lasts for this call; callers see the phase it settles on.
        self._phase = GamePhase.VERIFYING
        correct = is_correct(question, answer)
        self._answer_verified = True
        self._last_answer_correct = correct
        logger.debug("Answer %s to %s is %s", answer, question.expression, "correct" if correct else "wrong")

        if not correct:
            self._mistakes += 1
            self._tally.record_mistake(self._current_index)
            self._phase = GamePhase.IN_PROGRESS
            return SubmissionResult(outcome=SubmissionOutcome.INCORRECT, question=question, answer=answer)

        if self._current_index + 1 < len(self._round):
            self._current_index += 1
            self._answer_verified = False
            self._phase = GamePhase.IN_PROGRESS
            return SubmissionResult(outcome=SubmissionOutcome.CORRECT, question=question, answer=answer)

        self._phase = GamePhase.FINISHED
        return SubmissionResult(
            outcome=SubmissionOutcome.ROUND_COMPLETE,
            question=question,
            answer=answer,
            summary=self._build_summary(),
        )

    def _build_summary(self) -> RoundSummary:
        duration = 0.0
        if self._started_at is not None:
            duration = (datetime.now(timezone.utc) - self._started_at).total_seconds()
        return RoundSummary(
            questions=self._round,
            mistakes=self._tally.get_total(),
            mistakes_per_question=self._tally.get_counts(),
            duration_seconds=duration,
        )
