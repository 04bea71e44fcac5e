"""Tests for text file loading and save-path resolution."""
from __future__ import annotations

from pathlib import Path

import pytest

from common.errors import FileReadError
from storage import load_text_file, resolve_save_path


def test_lines_are_joined_with_trailing_newline(tmp_path: Path) -> None:
    path = tmp_path / "input.txt"
    path.write_text("First line.\nSecond line?", encoding="utf-8")

    assert load_text_file(path) == "First line.\nSecond line?\n"


def test_crlf_line_endings_are_normalized(tmp_path: Path) -> None:
    path = tmp_path / "input.txt"
    path.write_bytes("Один.\r\nДва!\r\n".encode("utf-8"))

    assert load_text_file(path) == "Один.\nДва!\n"


def test_empty_file_loads_as_empty_text(tmp_path: Path) -> None:
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")

    assert load_text_file(path) == ""


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileReadError) as exc:
        load_text_file(tmp_path / "missing.txt")
    assert exc.value.path == tmp_path / "missing.txt"


def test_decode_error_respects_policy(tmp_path: Path) -> None:
    path = tmp_path / "cp1251.txt"
    path.write_bytes("Привет.".encode("cp1251"))

    with pytest.raises(FileReadError):
        load_text_file(path, error_policy="fail-fast")
    assert "�" in load_text_file(path, error_policy="replace")
    assert load_text_file(path, encoding="cp1251") == "Привет.\n"


@pytest.mark.parametrize(
    "chosen, expected",
    [
        ("report", "report.txt"),
        ("report.txt", "report.txt"),
        ("REPORT.TXT", "REPORT.TXT"),
        ("report.md", "report.md.txt"),
    ],
)
def test_resolve_save_path(tmp_path: Path, chosen: str, expected: str) -> None:
    assert resolve_save_path(tmp_path / chosen) == tmp_path / expected
