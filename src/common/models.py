"""Data models shared across UI, core engine, and storage layers."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple


class SentenceType(str, Enum):
    """Sentence kinds keyed by their terminal character."""

    DECLARATIVE = "."
    QUESTION = "?"
    EXCLAMATORY = "!"


TERMINAL_CHARACTERS = frozenset(kind.value for kind in SentenceType)


class SessionState(str, Enum):
    """Lifecycle states of an interactive text session."""

    EMPTY = "EMPTY"
    LOADED = "LOADED"
    ANALYZED = "ANALYZED"


@dataclass(slots=True, frozen=True)
class AnalysisResult:
    """Counts produced by a single analysis run."""

    sentence_count: int = 0
    word_count: int = 0
    declarative_count: int = 0
    question_count: int = 0
    exclamatory_count: int = 0

    def __post_init__(self) -> None:
        for name, value in self.as_counts():
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        typed = self.declarative_count + self.question_count + self.exclamatory_count
        if typed != self.sentence_count:
            raise ValueError(
                f"sentence types ({typed}) do not add up to sentence_count ({self.sentence_count})"
            )

    @property
    def is_empty(self) -> bool:
        return all(value == 0 for _, value in self.as_counts())

    def as_counts(self) -> Tuple[Tuple[str, int], ...]:
        """Counts in report order."""

        return (
            ("sentence_count", self.sentence_count),
            ("word_count", self.word_count),
            ("declarative_count", self.declarative_count),
            ("question_count", self.question_count),
            ("exclamatory_count", self.exclamatory_count),
        )

    def to_dict(self) -> Dict[str, int]:
        return dict(self.as_counts())


@dataclass(slots=True, frozen=True)
class ExportPayload:
    """Raw text paired with its analysis, ready for a report writer."""

    text: str
    result: AnalysisResult


@dataclass(slots=True)
class GlobalSettings:
    encoding: str = "utf-8"
    error_policy: str = "fail-fast"
    assets_dir: str = "assets"
    event_log: str | None = None


@dataclass(slots=True)
class SessionSettings:
    clear_result_on_load: bool = True


@dataclass(slots=True)
class WatchdogSettings:
    enabled: bool = True
    idle_timeout_ms: int = 60_000
    screens: Tuple[str, ...] = ("start",)


@dataclass(slots=True)
class AppConfig:
    """Resolved runtime configuration."""

    global_settings: GlobalSettings = field(default_factory=GlobalSettings)
    session: SessionSettings = field(default_factory=SessionSettings)
    watchdog: WatchdogSettings = field(default_factory=WatchdogSettings)
    version: int = 1
