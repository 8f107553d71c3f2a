from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from mdpad.domain.interfaces import IFileGateway, IFileService
from mdpad.ui.ports.dialogs import IFileDialogService


def build_filter(extensions: Sequence[str]) -> str:
    """Qt name filter, e.g. ``Markdown (*.md *.markdown);;All files (*)``."""
    patterns = " ".join(f"*.{ext}" for ext in extensions)
    return f"Documents ({patterns});;All files (*)"


class FileGateway(IFileGateway):
    """Joins the file service and the dialog port behind one narrow surface."""

    def __init__(
        self,
        files: IFileService,
        dialogs: IFileDialogService,
        *,
        parent: Any | None = None,
    ) -> None:
        self._files = files
        self._dialogs = dialogs
        self.parent = parent

    def pick_open_path(self, extensions: Sequence[str]) -> Path | None:
        return self._dialogs.get_open_file(
            self.parent, "Open Markdown", None, build_filter(extensions)
        )

    def pick_save_path(
        self,
        suggested_name: str,
        extensions: Sequence[str],
        *,
        caption: str = "Save As",
    ) -> Path | None:
        return self._dialogs.get_save_file(
            self.parent, caption, suggested_name, build_filter(extensions)
        )

    def read_text(self, path: Path) -> str:
        return self._files.read_text(path)

    def write_text(self, path: Path, text: str) -> None:
        self._files.write_text_atomic(path, text)

    def exists(self, path: Path) -> bool:
        return self._files.exists(path)
