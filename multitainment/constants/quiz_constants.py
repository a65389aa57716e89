"""Round-related constants shared across UI and core layers."""

TABLE_MIN_LIMIT: int = 1
TABLE_MAX_LIMIT: int = 20
DEFAULT_TABLE_MIN: int = 2
DEFAULT_TABLE_MAX: int = 12

MULTIPLIER_MIN: int = 1
MULTIPLIER_MAX: int = 12

QUESTION_COUNT_CHOICES: tuple[int, ...] = (5, 10, 15, 20)
DEFAULT_QUESTION_COUNT: int = 5
