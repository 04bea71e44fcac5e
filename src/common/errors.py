"""Shared error codes and exceptions for the analyzer, session and shell."""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    CONFIG_ERROR = "CONFIG_ERROR"
    SCHEMA_ERROR = "SCHEMA_ERROR"
    IO_ERROR = "IO_ERROR"
    STATE_ERROR = "STATE_ERROR"
    EMPTY_INPUT = "EMPTY_INPUT"
    NOTHING_TO_EXPORT = "NOTHING_TO_EXPORT"
    RESOURCE_MISSING = "RESOURCE_MISSING"


class BackendError(RuntimeError):
    """Exception carrying a structured error code for CLI/GUI handlers."""

    def __init__(self, code: ErrorCode, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.code = code
        self.context = context or {}

    def __str__(self) -> str:  # pragma: no cover - formatting sugar
        base = super().__str__()
        return f"[{self.code.value}] {base}" if base else self.code.value


class EmptyInputError(BackendError):
    """Raised when analysis is requested on blank or whitespace-only text."""

    def __init__(self, message: str = "Text is empty; nothing to analyze") -> None:
        super().__init__(ErrorCode.EMPTY_INPUT, message)


class NothingToExportError(BackendError):
    """Raised when export is requested without text or a non-empty analysis."""

    def __init__(self, reason: str) -> None:
        super().__init__(ErrorCode.NOTHING_TO_EXPORT, f"Nothing to export: {reason}", context={"reason": reason})
        self.reason = reason


class FileReadError(BackendError):
    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(
            ErrorCode.IO_ERROR,
            f"Cannot read '{path}': {detail}",
            context={"path": str(path), "detail": detail},
        )
        self.path = path
        self.detail = detail


class FileWriteError(BackendError):
    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(
            ErrorCode.IO_ERROR,
            f"Cannot write '{path}': {detail}",
            context={"path": str(path), "detail": detail},
        )
        self.path = path
        self.detail = detail


class MissingResourceError(BackendError):
    """Raised when a bundled asset (image, icon) cannot be located or decoded."""

    def __init__(self, name: str, searched: Optional[Path] = None) -> None:
        super().__init__(
            ErrorCode.RESOURCE_MISSING,
            f"Resource '{name}' not found" + (f" in {searched}" if searched else ""),
            context={"name": name},
        )
        self.name = name


class ReportFormatError(BackendError):
    def __init__(self, message: str, *, source: Optional[Path] = None) -> None:
        super().__init__(
            ErrorCode.SCHEMA_ERROR,
            f"{message} ({source})" if source else message,
            context={"source": str(source) if source else None},
        )
