import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from multitainment.core.models import Question
from multitainment.core.question_generator import QuestionGenerator
from multitainment.core.quiz_manager import QuizManager


@pytest.fixture
def generator():
    return QuestionGenerator(seed=1234)


@pytest.fixture
def quiz_manager(generator):
    return QuizManager(generator=generator)


@pytest.fixture
def sample_round():
    return (Question(2, 3), Question(4, 5), Question(7, 12))
