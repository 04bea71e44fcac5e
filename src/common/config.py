"""Helpers for loading runtime configuration."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .errors import BackendError, ErrorCode
from .models import AppConfig, GlobalSettings, SessionSettings, WatchdogSettings

DEFAULT_CONFIG_PATH = Path("config/defaults.json")
ALLOWED_ERROR_POLICIES = {"fail-fast", "strict", "replace"}
KNOWN_SCREENS = {"start", "main", "about_program", "about_author"}


def load_app_config(
    *,
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Dict[str, Any]]] = None,
) -> AppConfig:
    """Load configuration JSON, validate it, and apply per-section overrides.

    Without an explicit ``config_path`` a missing default file falls back to the
    built-in defaults; an explicit path that does not exist is an error.
    """

    if config_path is None and not DEFAULT_CONFIG_PATH.exists():
        raw: Dict[str, Any] = {"version": 1}
        cfg_path = DEFAULT_CONFIG_PATH
    else:
        cfg_path = config_path or DEFAULT_CONFIG_PATH
        raw = _read_config_json(cfg_path)

    version = _require_positive_int(raw.get("version"), "version", cfg_path)
    overrides = overrides or {}
    sections = {}
    for name in ("global", "session", "watchdog"):
        section = raw.get(name, {})
        if not isinstance(section, Mapping):
            raise BackendError(ErrorCode.CONFIG_ERROR, f"'{name}' section must be an object in {cfg_path}")
        sections[name] = {**section, **(overrides.get(name) or {})}

    return AppConfig(
        global_settings=_build_global_settings(sections["global"], cfg_path),
        session=_build_session_settings(sections["session"], cfg_path),
        watchdog=_build_watchdog_settings(sections["watchdog"], cfg_path),
        version=version,
    )


def error_mode_from_policy(policy: str) -> str:
    """Translate human-friendly error policy into Python's encoding error handler."""

    return "strict" if policy.lower() in {"fail-fast", "strict"} else "replace"


# ---------------------------------------------------------------------------
# Internal helpers


def _read_config_json(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError as exc:
        raise BackendError(ErrorCode.CONFIG_ERROR, f"Config file '{path}' not found") from exc
    except json.JSONDecodeError as exc:
        raise BackendError(ErrorCode.CONFIG_ERROR, f"Config file '{path}' is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise BackendError(ErrorCode.CONFIG_ERROR, f"Config file '{path}' must contain an object")
    return data


def _build_global_settings(data: Mapping[str, Any], source: Path) -> GlobalSettings:
    defaults = GlobalSettings()
    encoding = _require_string(data.get("encoding", defaults.encoding), "global.encoding", source)
    error_policy = _normalize_error_policy(data.get("error_policy", defaults.error_policy), source)
    assets_dir = _require_string(data.get("assets_dir", defaults.assets_dir), "global.assets_dir", source)
    event_log = data.get("event_log", defaults.event_log)
    if event_log is not None:
        event_log = _require_string(event_log, "global.event_log", source)
    return GlobalSettings(
        encoding=encoding,
        error_policy=error_policy,
        assets_dir=assets_dir,
        event_log=event_log,
    )


def _build_session_settings(data: Mapping[str, Any], source: Path) -> SessionSettings:
    return SessionSettings(
        clear_result_on_load=_require_bool(
            data.get("clear_result_on_load", SessionSettings().clear_result_on_load),
            "session.clear_result_on_load",
            source,
        )
    )


def _build_watchdog_settings(data: Mapping[str, Any], source: Path) -> WatchdogSettings:
    defaults = WatchdogSettings()
    enabled = _require_bool(data.get("enabled", defaults.enabled), "watchdog.enabled", source)
    timeout = _require_positive_int(
        data.get("idle_timeout_ms", defaults.idle_timeout_ms), "watchdog.idle_timeout_ms", source
    )
    screens_raw = data.get("screens", list(defaults.screens))
    if not isinstance(screens_raw, list):
        raise BackendError(ErrorCode.CONFIG_ERROR, f"watchdog.screens must be a list in {source}")
    screens = tuple(_require_string(item, "watchdog.screens[]", source) for item in screens_raw)
    unknown = sorted(set(screens) - KNOWN_SCREENS)
    if unknown:
        allowed = ", ".join(sorted(KNOWN_SCREENS))
        raise BackendError(
            ErrorCode.CONFIG_ERROR,
            f"Unknown watchdog screens {unknown} in {source}. Allowed: {allowed}",
        )
    return WatchdogSettings(enabled=enabled, idle_timeout_ms=timeout, screens=screens)


def _normalize_error_policy(value: Any, source: Path) -> str:
    policy = _require_string(value, "global.error_policy", source).lower()
    if policy not in ALLOWED_ERROR_POLICIES:
        allowed = ", ".join(sorted(ALLOWED_ERROR_POLICIES))
        raise BackendError(
            ErrorCode.CONFIG_ERROR,
            f"Unsupported error_policy '{value}' in {source}. Allowed: {allowed}",
        )
    return "fail-fast" if policy in {"fail-fast", "strict"} else "replace"


def _require_string(value: Any, field: str, source: Path) -> str:
    if not isinstance(value, str):
        raise BackendError(ErrorCode.CONFIG_ERROR, f"{field} must be a string in {source}")
    text = value.strip()
    if not text:
        raise BackendError(ErrorCode.CONFIG_ERROR, f"{field} must be non-empty in {source}")
    return text


def _require_bool(value: Any, field: str, source: Path) -> bool:
    if not isinstance(value, bool):
        raise BackendError(ErrorCode.CONFIG_ERROR, f"{field} must be true or false in {source}")
    return value


def _require_positive_int(value: Any, field: str, source: Path) -> int:
    if isinstance(value, bool):
        raise BackendError(ErrorCode.CONFIG_ERROR, f"{field} must be an integer in {source}")
    try:
        num = int(value)
    except (TypeError, ValueError) as exc:
        raise BackendError(
            ErrorCode.CONFIG_ERROR,
            f"{field} must be an integer in {source}",
        ) from exc
    if num <= 0:
        raise BackendError(
            ErrorCode.CONFIG_ERROR,
            f"{field} must be greater than zero in {source}",
        )
    return num
