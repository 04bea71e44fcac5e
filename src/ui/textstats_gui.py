"""
DearPyGui shell for the text analyzer.
Start screen, main analysis screen and the two "about" screens; the idle
watchdog closes the application when a watched screen sees no input.
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Optional

import dearpygui.dearpygui as dpg

from common.errors import MissingResourceError
from common.models import AppConfig
from common.text import RESULT_LABELS
from common.versioning import APP_BUILD, RELEASE_NOTES, release_notes_text
from core.watchdog import IdleWatchdog
from ui.resources import APP_ICON, AUTHOR_PHOTO, UI_FONT, resolve_asset
from ui.session_controller import (
    INFO,
    OVERWRITE_MESSAGE,
    OVERWRITE_TITLE,
    WARNING,
    Feedback,
    SessionController,
)

START = "start"
MAIN = "main"
ABOUT_PROGRAM = "about_program"
ABOUT_AUTHOR = "about_author"

AUTHOR_EMAIL = "klimukm24@gmail.com"

TEXT = {
    "app_title": f"Анализатор текста  ver. {APP_BUILD}",
    "main_title": "Анализ текста",
    "university": "Белорусский национальный технический университет",
    "faculty": "Факультет информационных технологий и робототехники",
    "department": "Кафедра программного обеспечения информационных систем и технологий",
    "course": "Курсовая работа",
    "discipline": "по дисциплине «Программирование на языке Java»",
    "student": "Выполнил: Студент группы 10702322\nКлимук Максим Николаевич",
    "supervisor": "Преподаватель: к.ф.-м.н., доц.\nСидорик Валерий Владимирович",
    "city_year": "Минск 2024",
    "image_missing": "Изображение не найдено",
    "photo_missing": "Фото не найдено",
    "text_panel": "Текст для анализа",
    "results_panel": "Результаты анализа",
    "actions_panel": "Действия",
    "program_features": "Функции программы",
    "version": f"Версия программы: ver. {APP_BUILD}",
    "idle_title": "Бездействие",
    "idle_message": "Приложение закрывается из-за бездействия.",
    "help": (
        "Инструкция:\n"
        "1. Введите текст в поле сверху или загрузите файл.\n"
        "2. Нажмите \"Анализировать\", чтобы выполнить анализ.\n"
        "3. Сохраните результаты в файл, если нужно.\n"
        "4. Для очистки текста нажмите \"Очистить\"."
    ),
}

PROGRAM_FEATURES = (
    "Анализировать текстовые данные.",
    "Подсчитывать количество слов, предложений, типов предложений.",
    "Загружать текст из файлов.",
    "Очищать текстовое окно.",
    "Выполнять анализ с выводом результатов.",
    "Сохранять результаты анализа в отдельный текстовый файл.",
)

TEXT_AREA = "main.text"
OPEN_DIALOG = "main.open_dialog"
SAVE_DIALOG = "main.save_dialog"


class TextAnalyzerShell:
    """Owns the DearPyGui context, the screens and the active idle watchdog."""

    def __init__(self, config: AppConfig, controller: Optional[SessionController] = None) -> None:
        self.config = config
        self.controller = controller or SessionController(config)
        self.current_screen: Optional[str] = None
        self.previous_screen: Optional[str] = None
        self.watchdog: Optional[IdleWatchdog] = None
        self._textures: Optional[int] = None
        self._screens: Dict[str, int | str] = {}

    # ------------------------------------------------------------------
    # Lifecycle

    def run(self) -> int:
        dpg.create_context()
        try:
            self._setup_viewport()
            self._textures = dpg.add_texture_registry()
            self._bind_font()
            self._screens = {
                START: self._build_start_screen(),
                MAIN: self._build_main_screen(),
                ABOUT_PROGRAM: self._build_about_program_screen(),
                ABOUT_AUTHOR: self._build_about_author_screen(),
            }
            self._build_file_dialogs()
            with dpg.handler_registry():
                dpg.add_key_press_handler(callback=self._on_input)
                dpg.add_mouse_click_handler(callback=self._on_input)
            dpg.setup_dearpygui()
            dpg.show_viewport()
            self.show_screen(START)
            while dpg.is_dearpygui_running():
                if self.watchdog is not None:
                    self.watchdog.poll()
                dpg.render_dearpygui_frame()
        finally:
            self._stop_watchdog()
            dpg.destroy_context()
        return 0

    def exit(self) -> None:
        print("[gui] exit requested")
        self._stop_watchdog()
        dpg.stop_dearpygui()

    def show_screen(self, name: str) -> None:
        self._stop_watchdog()
        for screen, tag in self._screens.items():
            dpg.configure_item(tag, show=screen == name)
        dpg.set_primary_window(self._screens[name], True)
        self.previous_screen, self.current_screen = self.current_screen, name
        watchdog_cfg = self.config.watchdog
        if watchdog_cfg.enabled and name in watchdog_cfg.screens:
            self.watchdog = IdleWatchdog(watchdog_cfg.idle_timeout_ms, self._on_idle_timeout)
            self.watchdog.start()
            print(f"[watchdog] started on '{name}' ({watchdog_cfg.idle_timeout_ms} ms)")

    def _stop_watchdog(self) -> None:
        if self.watchdog is not None:
            self.watchdog.stop()
            print(f"[watchdog] stopped on '{self.current_screen}'")
            self.watchdog = None

    def _on_input(self) -> None:
        if self.watchdog is not None:
            self.watchdog.reset()

    def _on_idle_timeout(self) -> None:
        print("[watchdog] idle timeout reached, closing")
        self.controller.event_logger.emit("idle_timeout", screen=self.current_screen)
        self.show_message(
            Feedback(WARNING, TEXT["idle_title"], TEXT["idle_message"]),
            on_close=self.exit,
        )

    # ------------------------------------------------------------------
    # Screens

    def _setup_viewport(self) -> None:
        icon = ""
        try:
            icon = str(resolve_asset(APP_ICON, self.config.global_settings.assets_dir))
        except MissingResourceError as exc:
            print(f"[gui] {exc}")
        dpg.create_viewport(
            title=TEXT["app_title"],
            width=900,
            height=900,
            small_icon=icon,
            large_icon=icon,
        )

    def _bind_font(self) -> None:
        try:
            font_path = resolve_asset(UI_FONT, self.config.global_settings.assets_dir)
        except MissingResourceError as exc:
            print(f"[gui] {exc}; Cyrillic labels need a TTF font with Cyrillic glyphs")
            return
        with dpg.font_registry():
            with dpg.font(str(font_path), 18) as font:
                dpg.add_font_range_hint(dpg.mvFontRangeHint_Cyrillic)
        dpg.bind_font(font)

    def _build_start_screen(self) -> int | str:
        with dpg.window(label=TEXT["app_title"], show=False, no_collapse=True) as window:
            for key in ("university", "faculty", "department"):
                dpg.add_text(TEXT[key])
            dpg.add_spacer(height=20)
            dpg.add_text(TEXT["course"])
            dpg.add_text(TEXT["discipline"])
            dpg.add_spacer(height=10)
            dpg.add_text(TEXT["main_title"])
            dpg.add_spacer(height=30)
            with dpg.group(horizontal=True):
                self._add_image(APP_ICON, 130, 130, TEXT["image_missing"])
                dpg.add_spacer(width=100)
                with dpg.group():
                    dpg.add_text(TEXT["student"])
                    dpg.add_spacer(height=20)
                    dpg.add_text(TEXT["supervisor"])
            dpg.add_spacer(height=20)
            dpg.add_text(TEXT["city_year"])
            dpg.add_spacer(height=20)
            with dpg.group(horizontal=True):
                dpg.add_button(label="Начать", callback=lambda: self.show_screen(MAIN))
                dpg.add_button(label="О программе", callback=lambda: self.show_screen(ABOUT_PROGRAM))
                dpg.add_button(label="Об авторе", callback=lambda: self.show_screen(ABOUT_AUTHOR))
                dpg.add_spacer(width=150)
                dpg.add_button(label="Выход", callback=self.exit)
        return window

    def _build_main_screen(self) -> int | str:
        with dpg.window(label=TEXT["main_title"], show=False, no_collapse=True) as window:
            self._build_menu_bar()
            dpg.add_text(TEXT["text_panel"])
            dpg.add_input_text(
                tag=TEXT_AREA,
                multiline=True,
                width=-1,
                height=420,
                callback=lambda sender, app_data: self.controller.edit(app_data),
            )
            dpg.add_separator()
            with dpg.group(horizontal=True):
                with dpg.child_window(width=440, height=200):
                    dpg.add_text(TEXT["results_panel"])
                    for name, _label in RESULT_LABELS:
                        dpg.add_text(tag=f"main.result.{name}")
                with dpg.child_window(width=-1, height=200):
                    dpg.add_text(TEXT["actions_panel"])
                    with dpg.group(horizontal=True):
                        dpg.add_button(label="Анализировать", width=180, callback=self._on_analyze)
                        dpg.add_button(
                            label="Загрузить файл", width=180, callback=lambda: dpg.show_item(OPEN_DIALOG)
                        )
                    with dpg.group(horizontal=True):
                        dpg.add_button(label="Сохранить", width=180, callback=self._on_save_clicked)
                        dpg.add_button(label="Очистить", width=180, callback=self._on_clear)
            dpg.add_spacer(height=20)
            with dpg.group(horizontal=True):
                dpg.add_button(label="Назад", callback=lambda: self.show_screen(START))
                dpg.add_spacer(width=600)
                dpg.add_button(label="Выход", callback=self.exit)
        self._refresh_results()
        return window

    def _build_menu_bar(self) -> None:
        with dpg.menu_bar():
            with dpg.menu(label="Информация"):
                dpg.add_menu_item(label="О программе", callback=lambda: self.show_screen(ABOUT_PROGRAM))
                dpg.add_menu_item(label="Об авторе", callback=lambda: self.show_screen(ABOUT_AUTHOR))
            with dpg.menu(label="Об версиях"):
                for version, _notes in RELEASE_NOTES:
                    dpg.add_menu_item(
                        label=f"Версия {version}",
                        user_data=version,
                        callback=lambda sender, app_data, user_data: self.show_message(
                            Feedback(INFO, f"Версия {user_data}", release_notes_text(user_data))
                        ),
                    )
            with dpg.menu(label="Помощь"):
                dpg.add_menu_item(
                    label="Как пользоваться",
                    callback=lambda: self.show_message(Feedback(INFO, "Помощь", TEXT["help"])),
                )

    def _build_about_program_screen(self) -> int | str:
        with dpg.window(label="О программе", show=False, no_collapse=True) as window:
            dpg.add_text(TEXT["main_title"])
            dpg.add_spacer(height=20)
            with dpg.group(horizontal=True):
                self._add_image(APP_ICON, 100, 100, TEXT["image_missing"])
                with dpg.group():
                    dpg.add_text(TEXT["program_features"])
                    for index, feature in enumerate(PROGRAM_FEATURES, start=1):
                        dpg.add_text(f"{index}. {feature}")
            dpg.add_spacer(height=20)
            self._add_navigation(TEXT["version"])
        return window

    def _build_about_author_screen(self) -> int | str:
        with dpg.window(label="Об авторе", show=False, no_collapse=True) as window:
            self._add_image(AUTHOR_PHOTO, 350, 350, TEXT["photo_missing"])
            dpg.add_spacer(height=10)
            dpg.add_text("Автор:")
            dpg.add_text("Климук Максим Николаевич")
            dpg.add_text("Студент группы 10702322")
            dpg.add_button(label=AUTHOR_EMAIL, callback=self._copy_email)
            dpg.add_spacer(height=10)
            self._add_navigation()
        return window

    def _add_navigation(self, caption: Optional[str] = None) -> None:
        with dpg.group(horizontal=True):
            dpg.add_button(label="Назад", callback=self._go_back)
            if caption:
                dpg.add_spacer(width=40)
                dpg.add_text(caption)
            dpg.add_spacer(width=40)
            dpg.add_button(label="Выход", callback=self.exit)

    def _build_file_dialogs(self) -> None:
        with dpg.file_dialog(
            tag=OPEN_DIALOG,
            directory_selector=False,
            show=False,
            width=600,
            height=400,
            callback=self._on_open_selected,
        ):
            dpg.add_file_extension(".txt")
        with dpg.file_dialog(
            tag=SAVE_DIALOG,
            label="Сохранить файл",
            directory_selector=False,
            show=False,
            width=600,
            height=400,
            callback=self._on_save_selected,
        ):
            dpg.add_file_extension(".txt")

    # ------------------------------------------------------------------
    # Main screen actions

    def _go_back(self) -> None:
        self.show_screen(self.previous_screen or START)

    def _on_analyze(self) -> None:
        feedback = self.controller.analyze(dpg.get_value(TEXT_AREA))
        self._refresh_results()
        if feedback:
            self.show_message(feedback)

    def _on_clear(self) -> None:
        self.controller.clear()
        dpg.set_value(TEXT_AREA, "")
        self._refresh_results()

    def _on_open_selected(self, sender, app_data) -> None:
        chosen = app_data.get("file_path_name") if app_data else None
        if not chosen:
            return
        feedback = self.controller.load_file(Path(chosen))
        if feedback:
            self.show_message(feedback)
            return
        dpg.set_value(TEXT_AREA, self.controller.text)
        self._refresh_results()

    def _on_save_clicked(self) -> None:
        feedback = self.controller.check_export(dpg.get_value(TEXT_AREA))
        if feedback:
            self.show_message(feedback)
            return
        dpg.show_item(SAVE_DIALOG)

    def _on_save_selected(self, sender, app_data) -> None:
        chosen = app_data.get("file_path_name") if app_data else None
        if not chosen:
            return
        path = Path(chosen)
        if self.controller.needs_overwrite_confirmation(path):
            self.confirm(OVERWRITE_TITLE, OVERWRITE_MESSAGE, on_yes=lambda: self._save(path))
            return
        self._save(path)

    def _save(self, path: Path) -> None:
        self.show_message(self.controller.save(path))

    def _refresh_results(self) -> None:
        for (name, _label), line in zip(RESULT_LABELS, self.controller.result_lines()):
            dpg.set_value(f"main.result.{name}", line)

    def _copy_email(self) -> None:
        dpg.set_clipboard_text(AUTHOR_EMAIL)
        self.show_message(Feedback(INFO, "Скопировано", "Почта скопирована в буфер обмена"))

    # ------------------------------------------------------------------
    # Dialog helpers

    def show_message(self, feedback: Feedback, *, on_close: Optional[Callable[[], None]] = None) -> None:
        with dpg.window(label=feedback.title, modal=True, no_close=True, width=460, autosize=True) as dialog:
            dpg.add_text(feedback.message, wrap=420)
            dpg.add_button(
                label="OK",
                width=80,
                callback=lambda: self._close_dialog(dialog, on_close),
            )

    def confirm(self, title: str, message: str, *, on_yes: Callable[[], None]) -> None:
        with dpg.window(label=title, modal=True, no_close=True, width=360, autosize=True) as dialog:
            dpg.add_text(message)
            with dpg.group(horizontal=True):
                dpg.add_button(label="Да", width=80, callback=lambda: self._close_dialog(dialog, on_yes))
                dpg.add_button(label="Нет", width=80, callback=lambda: self._close_dialog(dialog, None))

    def _close_dialog(self, dialog: int | str, then: Optional[Callable[[], None]]) -> None:
        dpg.delete_item(dialog)
        if then is not None:
            then()

    def _add_image(self, name: str, width: int, height: int, placeholder: str) -> None:
        try:
            path = resolve_asset(name, self.config.global_settings.assets_dir)
            loaded = dpg.load_image(str(path))
            if loaded is None:
                raise MissingResourceError(name, path.parent)
        except MissingResourceError as exc:
            print(f"[gui] {exc}")
            dpg.add_text(placeholder)
            return
        image_width, image_height, _channels, data = loaded
        texture = dpg.add_static_texture(image_width, image_height, data, parent=self._textures)
        dpg.add_image(texture, width=width, height=height)


def run_gui(config: AppConfig) -> int:
    return TextAnalyzerShell(config).run()
