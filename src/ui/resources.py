"""Lookup of optional image and font assets for the desktop shell."""
from __future__ import annotations

from pathlib import Path

from common.errors import MissingResourceError

APP_ICON = "icon.png"
AUTHOR_PHOTO = "author.jpg"
UI_FONT = "font.ttf"


def resolve_asset(name: str, assets_dir: str | Path) -> Path:
    """Return the path of ``name`` inside ``assets_dir`` or raise MissingResourceError."""

    base = Path(assets_dir)
    path = base / name
    if not path.is_file():
        raise MissingResourceError(name, base)
    return path
