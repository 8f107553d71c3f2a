from __future__ import annotations

from PyQt6.QtCore import QByteArray, QSettings

from mdpad.domain.interfaces import ISettingsService
from mdpad.utils.constants import SETTINGS_GEOMETRY, SETTINGS_SPLITTER


class SettingsService(ISettingsService):
    """Persist small UI bits (geometry, splitter) and raw string records."""

    def __init__(self, qsettings: QSettings) -> None:
        self._s = qsettings

    # ---- key-value store ----

    def get_string(self, key: str) -> str | None:
        v = self._s.value(key)
        return v if isinstance(v, str) else None

    def set_string(self, key: str, value: str) -> None:
        self._s.setValue(key, value)
        self._s.sync()

    def remove(self, key: str) -> None:
        self._s.remove(key)
        self._s.sync()

    # ---- window state ----

    def get_geometry(self) -> bytes | None:
        v = self._s.value(SETTINGS_GEOMETRY)
        return bytes(v) if isinstance(v, QByteArray) else None

    def set_geometry(self, blob: bytes) -> None:
        self._s.setValue(SETTINGS_GEOMETRY, QByteArray(blob))

    def get_splitter(self) -> bytes | None:
        v = self._s.value(SETTINGS_SPLITTER)
        return bytes(v) if isinstance(v, QByteArray) else None

    def set_splitter(self, blob: bytes) -> None:
        self._s.setValue(SETTINGS_SPLITTER, QByteArray(blob))
