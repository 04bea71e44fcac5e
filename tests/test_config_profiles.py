"""Smoke tests for the shipped default configuration."""
from __future__ import annotations

import json
from pathlib import Path


REQUIRED_SECTIONS = {"global", "session", "watchdog"}
REQUIRED_WATCHDOG_FIELDS = {"enabled", "idle_timeout_ms", "screens"}


def load_defaults() -> dict:
    root = Path(__file__).resolve().parents[1]
    with (root / "config" / "defaults.json").open("r", encoding="utf-8") as handle:
        return json.load(handle)


def test_sections_present() -> None:
    defaults = load_defaults()
    missing = REQUIRED_SECTIONS - set(defaults)
    assert not missing, f"Missing sections: {sorted(missing)}"


def test_watchdog_fields_complete() -> None:
    watchdog = load_defaults()["watchdog"]
    missing = REQUIRED_WATCHDOG_FIELDS - set(watchdog)
    assert not missing, f"watchdog missing fields: {sorted(missing)}"
    assert watchdog["idle_timeout_ms"] == 60000
