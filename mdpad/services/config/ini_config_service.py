# mdpad/services/config/ini_config_service.py
from __future__ import annotations

import configparser
import logging
from collections.abc import Mapping
from pathlib import Path

from platformdirs import user_config_dir

from mdpad.utils.constants import APP_NAME

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "y", "on"}
_FALSY = {"0", "false", "no", "n", "off"}


class IniConfigService:
    r"""
    INI-backed configuration reader.

    Load order (first hit wins):
      1. Explicit path provided at construction
      2. User config dir (e.g. ~/.config/mdpad/config.ini or %APPDATA%\mdpad\config.ini)
      3. Project default at <repo>/config/config.ini (optional)

    Example::

        [logging]
        level = DEBUG
        to_file = false

        [preview]
        math_engine = katex
    """

    DEFAULT_FILE = "config.ini"

    def __init__(
        self,
        explicit_path: Path | None = None,
        project_root: Path | None = None,
        *,
        app_dir: str = APP_NAME,
    ) -> None:
        self._parser = configparser.ConfigParser()
        self._loaded_from: Path | None = None

        candidates: list[Path] = []
        if explicit_path:
            candidates.append(explicit_path)
        candidates.append(Path(user_config_dir(app_dir)) / self.DEFAULT_FILE)
        if project_root:
            candidates.append(project_root / "config" / self.DEFAULT_FILE)

        for path in candidates:
            if not path.is_file():
                continue
            parser = configparser.ConfigParser()
            try:
                with path.open("r", encoding="utf-8") as fh:
                    parser.read_file(fh)
            except (OSError, configparser.Error):
                # A broken file must not stop the app; try the next candidate.
                logger.warning("Ignoring unreadable config file %s", path, exc_info=True)
                continue
            self._parser = parser
            self._loaded_from = path
            break

        if "app" not in self._parser:
            self._parser["app"] = {}
        self._parser["app"].setdefault("version", "0.0.0")

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        if section not in self._parser:
            return default
        return self._parser[section].get(key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        val = self.get(section, key, None)
        if val is None:
            return default
        try:
            return int(val.strip())
        except ValueError:
            return default

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        val = self.get(section, key, None)
        if val is None:
            return default
        s = val.strip().lower()
        if s in _TRUTHY:
            return True
        if s in _FALSY:
            return False
        return default

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        return {sect: dict(self._parser[sect]) for sect in self._parser.sections()}

    def app_version(self) -> str:
        return self.get("app", "version", "0.0.0") or "0.0.0"

    # ----- typed app settings -----

    def log_level(self) -> str:
        return (self.get("logging", "level", "INFO") or "INFO").strip().upper()

    def log_to_file(self) -> bool:
        return bool(self.get_bool("logging", "to_file", True))

    def math_engine(self) -> str:
        engine = (self.get("preview", "math_engine", "mathjax") or "").strip().lower()
        return engine if engine in ("mathjax", "katex") else "mathjax"

    def web_preview(self) -> bool:
        return bool(self.get_bool("preview", "web_engine", True))

    @property
    def loaded_from(self) -> Path | None:
        """For diagnostics."""
        return self._loaded_from
