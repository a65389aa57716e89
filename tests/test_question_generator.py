"""Tests for random round generation."""

import pytest

from multitainment.constants.quiz_constants import (
    MULTIPLIER_MAX,
    MULTIPLIER_MIN,
    QUESTION_COUNT_CHOICES,
    TABLE_MAX_LIMIT,
    TABLE_MIN_LIMIT,
)
from multitainment.core.models import InvalidRoundConfig, RoundConfig
from multitainment.core.question_generator import QuestionGenerator


class TestGenerateRound:

    @pytest.mark.parametrize("count", QUESTION_COUNT_CHOICES)
    def test_round_length_matches_count(self, generator, count):
        questions = generator.generate_round(RoundConfig(2, 12, count))
        assert len(questions) == count

    @pytest.mark.parametrize("table_min, table_max", [(1, 2), (2, 12), (5, 5), (19, 20), (1, 20)])
    def test_values_stay_in_range(self, generator, table_min, table_max):
        for _ in range(20):
            for question in generator.generate_round(RoundConfig(table_min, table_max, 20)):
                assert table_min <= question.multiplicand <= table_max
                assert MULTIPLIER_MIN <= question.multiplier <= MULTIPLIER_MAX

    def test_every_table_in_range_can_appear(self, generator):
        seen = set()
        for _ in range(50):
            seen.update(q.multiplicand for q in generator.generate_round(RoundConfig(3, 6, 20)))
        assert seen == {3, 4, 5, 6}

    def test_same_seed_gives_same_round(self):
        config = RoundConfig(2, 12, 10)
        first = QuestionGenerator(seed=7).generate_round(config)
        second = QuestionGenerator(seed=7).generate_round(config)
        assert first == second

    def test_set_seed_restarts_sequence(self, generator):
        config = RoundConfig(2, 12, 10)
        generator.set_seed(99)
        first = generator.generate_round(config)
        generator.set_seed(99)
        assert generator.generate_round(config) == first

    def test_expression_format(self, generator):
        question = generator.generate_question(4, 4)
        assert question.expression == f"4 * {question.multiplier}"


class TestRoundConfig:

    def test_rejects_unknown_count(self):
        with pytest.raises(InvalidRoundConfig):
            RoundConfig(2, 12, 7)

    def test_rejects_inverted_range(self):
        with pytest.raises(InvalidRoundConfig):
            RoundConfig(10, 3, 5)

    @pytest.mark.parametrize("table_min, table_max", [(TABLE_MIN_LIMIT - 1, 5), (2, TABLE_MAX_LIMIT + 1)])
    def test_rejects_out_of_bounds_tables(self, table_min, table_max):
        with pytest.raises(InvalidRoundConfig):
            RoundConfig(table_min, table_max, 5)

    def test_invalid_config_is_value_error(self):
        with pytest.raises(ValueError):
            RoundConfig(0, 0, 0)
