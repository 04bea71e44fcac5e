"""Backend for the desktop shell: maps button actions onto the text session.

Every action returns an optional ``Feedback`` that the shell renders as a dialog,
so the whole workflow can be exercised without a window.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from common.errors import EmptyInputError, FileReadError, FileWriteError, NothingToExportError
from common.models import AnalysisResult, AppConfig
from common.progress import SessionEventLogger
from common.text import RESULT_LABELS, format_count_line
from core.session import TextSession
from storage import load_text_file, resolve_save_path, write_report

INFO = "info"
WARNING = "warning"
ERROR = "error"

EMPTY_TEXT_MESSAGE = "Текстовое поле пусто! Пожалуйста, введите текст для анализа."
NOTHING_TO_SAVE_MESSAGE = "Нельзя сохранить пустой файл. Проверьте, что текст заполнен и выполнен анализ."
READ_ERROR_MESSAGE = "Ошибка при чтении файла"
WRITE_ERROR_PREFIX = "Ошибка при сохранении файла: "
SAVED_MESSAGE = "Файл успешно сохранён!"
OVERWRITE_TITLE = "Подтверждение"
OVERWRITE_MESSAGE = "Файл уже существует. Перезаписать?"


@dataclass(slots=True, frozen=True)
class Feedback:
    level: str
    title: str
    message: str


class SessionController:
    """Glue between shell widgets and ``TextSession``."""

    def __init__(
        self,
        config: AppConfig,
        *,
        session: Optional[TextSession] = None,
        event_logger: Optional[SessionEventLogger] = None,
    ) -> None:
        self.config = config
        if event_logger is None:
            log_path = config.global_settings.event_log
            event_logger = SessionEventLogger(Path(log_path) if log_path else None)
        self.event_logger = event_logger
        self.session = session or TextSession(
            clear_result_on_load=config.session.clear_result_on_load,
            on_transition=event_logger.on_transition,
        )

    @property
    def text(self) -> str:
        return self.session.raw_text

    def result_lines(self) -> List[str]:
        """Label text for the results panel; zeros until something is analyzed."""

        counts = (self.session.last_result or AnalysisResult()).to_dict()
        return [format_count_line(label, counts[name]) for name, label in RESULT_LABELS]

    def edit(self, text: str) -> None:
        self.session.edit(text)

    def analyze(self, text: Optional[str] = None) -> Optional[Feedback]:
        if text is not None:
            self.session.edit(text)
        try:
            result = self.session.analyze()
        except EmptyInputError:
            self.event_logger.emit("analyze_rejected", reason="empty")
            return Feedback(WARNING, "Ошибка", EMPTY_TEXT_MESSAGE)
        self.event_logger.emit("analyze", **result.to_dict())
        return None

    def load_file(self, path: Path) -> Optional[Feedback]:
        settings = self.config.global_settings
        try:
            text = load_text_file(path, encoding=settings.encoding, error_policy=settings.error_policy)
        except FileReadError as exc:
            print(f"[load] {exc}")
            self.event_logger.emit("load_failed", path=str(path), detail=exc.detail)
            return Feedback(ERROR, "Ошибка", READ_ERROR_MESSAGE)
        self.session.load(text)
        self.event_logger.emit("load", path=str(path), chars=len(text))
        return None

    def clear(self) -> None:
        self.session.clear()

    def check_export(self, text: Optional[str] = None) -> Optional[Feedback]:
        """Run the export guard before any save dialog is shown."""

        if text is not None:
            self.session.edit(text)
        try:
            self.session.export()
        except NothingToExportError as exc:
            self.event_logger.emit("save_rejected", reason=exc.reason)
            return Feedback(WARNING, "Ошибка сохранения", NOTHING_TO_SAVE_MESSAGE)
        return None

    def save_target(self, chosen: Path) -> Path:
        return resolve_save_path(chosen)

    def needs_overwrite_confirmation(self, chosen: Path) -> bool:
        return self.save_target(chosen).exists()

    def save(self, chosen: Path) -> Feedback:
        try:
            payload = self.session.export()
        except NothingToExportError as exc:
            self.event_logger.emit("save_rejected", reason=exc.reason)
            return Feedback(WARNING, "Ошибка сохранения", NOTHING_TO_SAVE_MESSAGE)
        target = self.save_target(chosen)
        try:
            write_report(payload, target, encoding=self.config.global_settings.encoding)
        except FileWriteError as exc:
            print(f"[save] {exc}")
            self.event_logger.emit("save_failed", path=str(target), detail=exc.detail)
            return Feedback(ERROR, "Ошибка", WRITE_ERROR_PREFIX + exc.detail)
        self.event_logger.emit("save", path=str(target))
        return Feedback(INFO, "Успех", SAVED_MESSAGE)
