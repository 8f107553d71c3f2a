from __future__ import annotations

import os

# Run Qt headless when no display is available.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from pathlib import Path
from typing import Any

import pytest
from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import QApplication

from mdpad.services.file_gateway import FileGateway
from mdpad.services.file_service import FileService
from mdpad.services.markdown_renderer import MarkdownRenderer
from mdpad.services.recent_files import RecentFilesRegistry
from mdpad.services.session_controller import SessionController
from mdpad.services.settings_service import SettingsService
from mdpad.ui.ports.messages import Question


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()


# --- Fake UI ports ---


class FakeDialogs:
    """Scripted file dialogs: returns queued answers and records each request."""

    def __init__(self) -> None:
        self.open_answers: list[Path | None] = []
        self.save_answers: list[Path | None] = []
        self.open_calls: list[tuple[str, str | None, str]] = []
        self.save_calls: list[tuple[str, str | None, str]] = []

    def get_open_file(
        self, parent: Any | None, caption: str, start_dir: str | None, filter_str: str
    ) -> Path | None:
        self.open_calls.append((caption, start_dir, filter_str))
        return self.open_answers.pop(0) if self.open_answers else None

    def get_save_file(
        self, parent: Any | None, caption: str, start_path: str | None, filter_str: str
    ) -> Path | None:
        self.save_calls.append((caption, start_path, filter_str))
        return self.save_answers.pop(0) if self.save_answers else None


class FakeMessages:
    def __init__(self, answer: bool = True) -> None:
        self.answer = answer
        self.errors: list[tuple[str, str]] = []
        self.questions: list[str] = []

    def info(self, parent: Any | None, title: str, text: str) -> None:
        pass

    def warning(self, parent: Any | None, title: str, text: str) -> None:
        pass

    def error(self, parent: Any | None, title: str, text: str) -> None:
        self.errors.append((title, text))

    def ask(
        self, parent: Any | None, title: str, text: str, kind: Question = Question.YES_NO
    ) -> bool:
        self.questions.append(text)
        return self.answer


# --- Other common fixtures ---


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def renderer() -> MarkdownRenderer:
    return MarkdownRenderer()


@pytest.fixture()
def dialogs() -> FakeDialogs:
    return FakeDialogs()


@pytest.fixture()
def messages() -> FakeMessages:
    return FakeMessages()


@pytest.fixture()
def gateway(file_service: FileService, dialogs: FakeDialogs) -> FileGateway:
    return FileGateway(file_service, dialogs)


@pytest.fixture()
def registry(settings_service: SettingsService) -> RecentFilesRegistry:
    return RecentFilesRegistry(settings_service)


@pytest.fixture()
def session(qapp, gateway: FileGateway, registry: RecentFilesRegistry) -> SessionController:
    return SessionController(files=gateway, recents=registry)
