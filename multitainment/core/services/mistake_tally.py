"""Service for tracking mistakes per question within a round."""

from __future__ import annotations


class MistakeTally:
    """Counts wrong answers for each question position of the active round."""

    def __init__(self) -> None:
        self._counts: list[int] = []

    def initialize(self, question_count: int) -> None:
        self._counts = [0] * question_count

    def record_mistake(self, index: int) -> None:
        if not 0 <= index < len(self._counts):
            raise IndexError(f"Question index {index} outside round of {len(self._counts)}.")
        self._counts[index] += 1

    def get_total(self) -> int:
        return sum(self._counts)

    def get_counts(self) -> list[int]:
        return list(self._counts)

    def clear(self) -> None:
        self._counts = []
