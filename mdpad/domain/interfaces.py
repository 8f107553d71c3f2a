from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from mdpad.domain.models import RecentEntry


class IMarkdownRenderer(Protocol):
    """Convert Markdown text to HTML."""

    def to_html(self, markdown_text: str) -> str:
        """Full preview page (template + CSS)."""
        ...

    def to_html_body(self, markdown_text: str) -> str:
        """Rendered body fragment only."""
        ...


class IFileService(Protocol):
    """Read/write text files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...
    def exists(self, path: Path) -> bool: ...


class IFileGateway(Protocol):
    """File access plus the interactive pickers, as seen by the session."""

    def pick_open_path(self, extensions: Sequence[str]) -> Path | None: ...
    def pick_save_path(
        self, suggested_name: str, extensions: Sequence[str], *, caption: str = "Save As"
    ) -> Path | None: ...
    def read_text(self, path: Path) -> str: ...
    def write_text(self, path: Path, text: str) -> None: ...
    def exists(self, path: Path) -> bool: ...


class IKeyValueStore(Protocol):
    """Durable string store (QSettings-backed in the app)."""

    def get_string(self, key: str) -> str | None: ...
    def set_string(self, key: str, value: str) -> None: ...
    def remove(self, key: str) -> None: ...


class ISettingsService(IKeyValueStore, Protocol):
    """Persist and retrieve lightweight UI state."""

    def get_geometry(self) -> bytes | None: ...
    def set_geometry(self, blob: bytes) -> None: ...
    def get_splitter(self) -> bytes | None: ...
    def set_splitter(self, blob: bytes) -> None: ...


class IRecentFilesRegistry(Protocol):
    def list(self) -> list[RecentEntry]: ...
    def record(self, entry: RecentEntry) -> None: ...
    def clear(self) -> None: ...
