from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

from mdpad.utils.constants import APP_NAME

LOGGER_NAME = "mdpad"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def default_log_path() -> Path:
    return Path(user_log_dir(APP_NAME)) / f"{APP_NAME}.log"


def setup_logging(level: str | int = "INFO", log_file: Path | None = None) -> logging.Logger:
    """
    Configure the package logger: console always, rotating file when ``log_file`` is given.
    Calling it again only adjusts the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    fmt = logging.Formatter(LOG_FORMAT)

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            fh = RotatingFileHandler(
                log_file,
                maxBytes=2 * 1024 * 1024,
                backupCount=5,
                encoding="utf-8",
            )
        except OSError:
            logger.warning("File logging disabled: cannot open %s", log_file, exc_info=True)
        else:
            fh.setFormatter(fmt)
            logger.addHandler(fh)
            logger.debug("Logging to %s", log_file)

    return logger


def install_excepthook(logger: logging.Logger) -> None:
    """Send uncaught exceptions to the log before the default hook runs."""

    def _excepthook(exc_type, exc, tb):
        logger.critical("Uncaught exception", exc_info=(exc_type, exc, tb))
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _excepthook
