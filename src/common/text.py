"""Display strings shared by the report format and the desktop shell."""
from __future__ import annotations

from typing import Tuple

TEXT_HEADER = "Текст:"
RESULTS_HEADER = "Результаты анализа:"

# Field name -> label, in report order. Reports written by earlier releases use the same order.
RESULT_LABELS: Tuple[Tuple[str, str], ...] = (
    ("sentence_count", "Количество предложений"),
    ("word_count", "Количество слов"),
    ("declarative_count", "Повествовательные предложения"),
    ("question_count", "Вопросительные предложения"),
    ("exclamatory_count", "Восклицательные предложения"),
)


def format_count_line(label: str, value: int) -> str:
    return f"{label}: {value}"
