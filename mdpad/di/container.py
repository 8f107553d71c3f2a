from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QSettings

from mdpad.domain.interfaces import IFileService, IMarkdownRenderer, ISettingsService
from mdpad.services.config.ini_config_service import IniConfigService
from mdpad.services.file_gateway import FileGateway
from mdpad.services.file_service import FileService
from mdpad.services.markdown_renderer import MarkdownRenderer
from mdpad.services.recent_files import RecentFilesRegistry
from mdpad.services.session_controller import SessionController
from mdpad.services.settings_service import SettingsService
from mdpad.ui.adapters import QtFileDialogService, QtMessageService
from mdpad.ui.main_window import MainWindow
from mdpad.ui.ports import IFileDialogService, IMessageService
from mdpad.utils.constants import APP_NAME, APP_ORG

logger = logging.getLogger(__name__)


class Container:
    """
    Lightweight DI container (composition root):
      - Wires default services if not provided
      - Owns the single SessionController handed to the main window
    """

    def __init__(
        self,
        *,
        config: IniConfigService | None = None,
        renderer: IMarkdownRenderer | None = None,
        files: IFileService | None = None,
        settings: ISettingsService | None = None,
        qsettings: QSettings | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
        web_preview: bool | None = None,
    ) -> None:
        self.config = config or IniConfigService()
        self.web_preview = self.config.web_preview() if web_preview is None else web_preview
        self.renderer: IMarkdownRenderer = renderer or MarkdownRenderer(
            self.config.math_engine()  # type: ignore[arg-type]
        )
        self.file_service: IFileService = files or FileService()
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()

        self.file_gateway = FileGateway(self.file_service, self.dialogs)
        self.recent_files = RecentFilesRegistry(self.settings_service)
        self.session = SessionController(files=self.file_gateway, recents=self.recent_files)

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        config: IniConfigService | None = None,
        organization: str = APP_ORG,
        application: str = APP_NAME,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(qsettings=qsettings, config=config)

    # ---------- UI factories ----------

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
    ) -> MainWindow:
        window = MainWindow(
            session=self.session,
            renderer=self.renderer,
            settings=self.settings_service,
            messages=self.messages,
            start_path=start_path,
            app_title=app_title,
            use_web_engine=self.web_preview,
        )
        # Dialogs opened on the session's behalf are parented to the window.
        self.file_gateway.parent = window
        logger.debug("Main window built (start_path=%s)", start_path)
        return window
