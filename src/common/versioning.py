"""Centralized version constants and release notes."""
from __future__ import annotations

from typing import Tuple

APP_VERSION = "1.1.2"
APP_BUILD = "1.1.2.2024"

# (version, notes) shown under the "Об версиях" menu, oldest first.
RELEASE_NOTES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (
        "1.0.0",
        (
            "Созданы все основные окна",
            "Добавлен базовый функционал",
            "Добавлены переходы между окнами",
        ),
    ),
    (
        "1.1.0",
        (
            "Добавлен расширенный функционал",
            "Обновлен интерфейс",
            "Добавлена защита от пустых файлов",
        ),
    ),
    (
        "1.1.1",
        (
            "Добавлены вкладки \"Информация\" и \"Помощь\"",
            "Добавлена информация об авторе и программе",
        ),
    ),
    (
        "1.1.2",
        (
            "Добавлена вкладка \"Об версиях\"",
            "Исправлены баги с анализом текста",
            "Добавлена защита от пустых файлов",
        ),
    ),
)


def release_notes_text(version: str) -> str:
    for name, notes in RELEASE_NOTES:
        if name == version:
            lines = [f"Версия {name}:"] + [f"- {note}" for note in notes]
            return "\n".join(lines)
    raise KeyError(version)
