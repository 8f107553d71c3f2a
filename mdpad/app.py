from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QApplication

from mdpad.di.container import Container
from mdpad.logging_setup import default_log_path, install_excepthook, setup_logging
from mdpad.services.config.ini_config_service import IniConfigService
from mdpad.utils.constants import APP_NAME, APP_ORG

logger = logging.getLogger(__name__)


def run_app(argv: Sequence[str]) -> int:
    """
    Configures logging, bootstraps Qt, composes the application via the DI
    container and launches the main window.
    """
    config = IniConfigService()
    log = setup_logging(
        config.log_level(),
        default_log_path() if config.log_to_file() else None,
    )
    install_excepthook(log)
    logger.info("Starting %s %s (config: %s)", APP_NAME, config.app_version(), config.loaded_from)

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    if config.web_preview():
        # Qt WebEngine needs shared GL contexts before the QApplication exists.
        QApplication.setAttribute(Qt.ApplicationAttribute.AA_ShareOpenGLContexts, True)
    app = QApplication(list(argv))

    container = Container.default(config=config)

    # Optional file path to open passed as first CLI argument
    start_path = Path(argv[1]) if len(argv) > 1 else None

    win = container.build_main_window(start_path=start_path, app_title=APP_NAME)
    win.show()

    code = app.exec()
    logger.info("Exiting with code %s", code)
    return code
