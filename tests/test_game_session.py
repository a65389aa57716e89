"""Tests for the round state machine."""

import pytest

from multitainment.core.models import GamePhase, SubmissionOutcome
from multitainment.core.services.game_session import GameSession


@pytest.fixture
def session(sample_round):
    session = GameSession()
    session.start(sample_round)
    return session


def test_new_session_is_not_started():
    session = GameSession()
    assert session.get_phase() is GamePhase.NOT_STARTED
    assert session.get_current_question() is None
    assert session.submit(6).outcome is SubmissionOutcome.NOT_STARTED
    assert session.get_mistakes() == 0


def test_start_rejects_empty_round():
    with pytest.raises(ValueError):
        GameSession().start(())


def test_start_enters_first_question(session, sample_round):
    assert session.get_phase() is GamePhase.IN_PROGRESS
    assert session.get_current_index() == 0
    assert session.get_current_question() == sample_round[0]


def test_correct_answer_advances(session, sample_round):
    result = session.submit(6)
    assert result.outcome is SubmissionOutcome.CORRECT
    assert result.is_correct
    assert session.get_current_index() == 1
    assert session.get_current_question() == sample_round[1]
    assert session.get_phase() is GamePhase.IN_PROGRESS
    assert session.get_mistakes() == 0


def test_incorrect_answer_counts_mistake_without_advancing(session):
    result = session.submit(7)
    assert result.outcome is SubmissionOutcome.INCORRECT
    assert result.expected == 6
    assert session.get_current_index() == 0
    assert session.get_mistakes() == 1
    assert session.is_answer_verified()
    assert not session.was_last_answer_correct()
    assert session.get_phase() is GamePhase.IN_PROGRESS


def test_mistakes_never_decrease(session):
    history = []
    for answer in (0, 1, 6, 2, 20, 0, 84):
        session.submit(answer)
        history.append(session.get_mistakes())
    assert history == sorted(history)


def test_last_correct_answer_finishes_round(session):
    session.submit(6)
    session.submit(1)
    session.submit(20)
    session.submit(99)
    result = session.submit(84)

    assert result.outcome is SubmissionOutcome.ROUND_COMPLETE
    assert session.get_phase() is GamePhase.FINISHED
    assert result.summary.mistakes == 2
    assert result.summary.question_count == 3
    assert result.summary.mistakes_per_question == [0, 1, 1]
    assert result.summary.duration_seconds >= 0


def test_finished_round_rejects_further_answers(session):
    for answer in (6, 20, 84):
        session.submit(answer)
    assert session.submit(84).outcome is SubmissionOutcome.NOT_STARTED


def test_restart_clears_previous_progress(session, sample_round):
    session.submit(0)
    session.submit(6)
    session.start(sample_round)
    assert session.get_current_index() == 0
    assert session.get_mistakes() == 0


def test_reset(session):
    session.submit(0)
    session.reset()
    assert session.get_phase() is GamePhase.NOT_STARTED
    assert session.get_round() == ()
    assert session.get_mistakes() == 0
    assert not session.is_answer_verified()


def test_summary_mistakes_match_per_question_tally(session):
    result = None
    for answer in (0, 5, 6, 19, 20, 83, 0, 1, 84):
        result = session.submit(answer)

    summary = result.summary
    assert summary.mistakes_per_question == [2, 1, 3]
    assert sum(summary.mistakes_per_question) == summary.mistakes == 6
    assert session.get_mistakes() == summary.mistakes
