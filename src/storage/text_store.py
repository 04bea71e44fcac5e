"""Plain-text file loading and save-path helpers."""
from __future__ import annotations

from pathlib import Path

from common.config import error_mode_from_policy
from common.errors import FileReadError

TEXT_SUFFIX = ".txt"


def load_text_file(path: Path, *, encoding: str = "utf-8", error_policy: str = "fail-fast") -> str:
    """Read ``path`` line by line; every line keeps a trailing newline."""

    errors = error_mode_from_policy(error_policy)
    try:
        with path.open("r", encoding=encoding, errors=errors, newline=None) as handle:
            return "".join(line.rstrip("\n") + "\n" for line in handle)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise FileReadError(path, str(exc)) from exc


def resolve_save_path(path: Path) -> Path:
    """Append ``.txt`` when the chosen name lacks it (case-insensitive)."""

    if path.name.lower().endswith(TEXT_SUFFIX):
        return path
    return path.with_name(path.name + TEXT_SUFFIX)
