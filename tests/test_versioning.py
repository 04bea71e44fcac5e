from __future__ import annotations

import pytest

from common.versioning import APP_VERSION, RELEASE_NOTES, release_notes_text


def test_current_version_has_release_notes() -> None:
    assert RELEASE_NOTES[-1][0] == APP_VERSION


def test_release_notes_text() -> None:
    text = release_notes_text("1.1.0")
    assert text.splitlines()[0] == "Версия 1.1.0:"
    assert "- Обновлен интерфейс" in text


def test_unknown_version() -> None:
    with pytest.raises(KeyError):
        release_notes_text("9.9.9")
