from __future__ import annotations

import logging
import re
from datetime import datetime
from pathlib import Path

from PyQt6.QtCore import QObject, pyqtSignal

from mdpad.domain.interfaces import IFileGateway, IRecentFilesRegistry
from mdpad.domain.models import Document, RecentEntry
from mdpad.services.html_export import build_html_document
from mdpad.utils.constants import EXPORT_EXTENSIONS, OPEN_EXTENSIONS, SAVE_EXTENSIONS

logger = logging.getLogger(__name__)

_TITLE_SUFFIX_RE = re.compile(r"\.(md|markdown|txt)$")


def title_from_path(path: Path) -> str:
    return _TITLE_SUFFIX_RE.sub("", path.name)


def ensure_suffix(path: Path, suffix: str) -> Path:
    """Append ``suffix`` unless the name already ends with it."""
    if path.name.endswith(suffix):
        return path
    return path.with_name(path.name + suffix)


class SessionController(QObject):
    """
    Owns the single open Document and the recent-files snapshot.

    Every mutating operation emits ``state_changed`` once its state is fully
    applied; listeners read ``current``, ``recent_files`` and ``loading``
    directly. I/O failures are logged, announced through ``operation_failed``
    and reported as ``False``/``None``, never raised. A cancelled dialog is not
    a failure and emits nothing. Unsaved-changes prompts are the caller's job.
    """

    state_changed = pyqtSignal()
    operation_failed = pyqtSignal(str, str)  # title, message

    def __init__(
        self,
        *,
        files: IFileGateway,
        recents: IRecentFilesRegistry,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._files = files
        self._recents = recents

        self._current: Document | None = None
        self._recent_files: list[RecentEntry] = []
        self._loading = False

    # ----------------------------- state -----------------------------

    @property
    def current(self) -> Document | None:
        return self._current

    @property
    def recent_files(self) -> list[RecentEntry]:
        return list(self._recent_files)

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def has_document(self) -> bool:
        return self._current is not None

    @property
    def has_unsaved_changes(self) -> bool:
        return self._current is not None and self._current.has_unsaved_changes

    # ----------------------------- recents -----------------------------

    def load_recent_files(self) -> None:
        self._loading = True
        self.state_changed.emit()
        try:
            self._recent_files = self._recents.list()
        except Exception:
            logger.exception("Error loading recent files")
            self._recent_files = []
        finally:
            self._loading = False
            self.state_changed.emit()

    def clear_recent_files(self) -> None:
        self._recents.clear()
        # Re-read so a failed clear keeps showing what is still persisted.
        self._recent_files = self._recents.list()
        self.state_changed.emit()

    def _fail(self, title: str, message: str) -> None:
        self.operation_failed.emit(title, message)

    def _remember(self, doc: Document) -> None:
        self._recents.record(RecentEntry.from_document(doc))
        self._recent_files = self._recents.list()

    # ----------------------------- lifecycle -----------------------------

    def create_new(self) -> None:
        self._current = Document.new()
        self.state_changed.emit()

    def close(self) -> None:
        self._current = None
        self.state_changed.emit()

    def open_from_picker(self) -> bool:
        try:
            path = self._files.pick_open_path(OPEN_EXTENSIONS)
        except Exception:
            logger.exception("Open dialog failed")
            self._fail("Open Error", "Could not show the open dialog.")
            return False
        if path is None:
            logger.debug("Open cancelled")
            return False
        return self.open_path(path) is not None

    def open_path(self, path: Path | str) -> Document | None:
        path = Path(path)
        try:
            if not self._files.exists(path):
                logger.warning("File not found: %s", path)
                self._fail("Open Error", f"File not found:\n{path}")
                return None
            content = self._files.read_text(path)
        except Exception as e:
            logger.exception("Error loading %s", path)
            self._fail("Open Error", f"Failed to open file:\n{path}\n\n{e}")
            return None

        doc = Document.new(title=title_from_path(path), content=content).copy_with(
            file_path=str(path)
        )
        self._remember(doc)
        self._current = doc
        logger.info("Opened %s", path)
        self.state_changed.emit()
        return doc

    def open_recent(self, entry: RecentEntry) -> Document | None:
        if entry.file_path is None:
            return None
        return self.open_path(entry.file_path)

    # ----------------------------- edits -----------------------------

    def update_content(self, text: str) -> None:
        if self._current is None:
            return
        self._current = self._current.copy_with(
            content=text, updated_at=datetime.now(), saved=False
        )
        self.state_changed.emit()

    def update_title(self, text: str) -> None:
        if self._current is None:
            return
        self._current = self._current.copy_with(
            title=text, updated_at=datetime.now(), saved=False
        )
        self.state_changed.emit()

    # ----------------------------- saving -----------------------------

    def save(self) -> bool:
        doc = self._current
        if doc is None:
            return False
        if doc.file_path is None:
            return self.save_as() is not None

        path = Path(doc.file_path)
        try:
            self._files.write_text(path, doc.content)
        except Exception as e:
            logger.exception("Error saving %s", path)
            self._fail("Save Error", f"Failed to save file:\n{path}\n\n{e}")
            return False

        self._current = doc.copy_with(saved=True)
        self._remember(self._current)
        logger.info("Saved %s", path)
        self.state_changed.emit()
        return True

    def save_as(self) -> str | None:
        doc = self._current
        if doc is None:
            return None

        try:
            picked = self._files.pick_save_path(
                f"{doc.title}.md", SAVE_EXTENSIONS, caption="Save Markdown File"
            )
        except Exception:
            logger.exception("Save dialog failed")
            self._fail("Save Error", "Could not show the save dialog.")
            return None
        if picked is None:
            logger.debug("Save As cancelled")
            return None

        path = ensure_suffix(Path(picked), ".md")
        try:
            self._files.write_text(path, doc.content)
        except Exception as e:
            logger.exception("Error saving %s", path)
            self._fail("Save Error", f"Failed to save file:\n{path}\n\n{e}")
            return None

        self._current = doc.copy_with(file_path=str(path), saved=True)
        self._remember(self._current)
        logger.info("Saved %s", path)
        self.state_changed.emit()
        return str(path)

    def export_html(self, html_body: str) -> bool:
        doc = self._current
        if doc is None:
            return False

        try:
            picked = self._files.pick_save_path(
                f"{doc.title}.html", EXPORT_EXTENSIONS, caption="Export as HTML"
            )
        except Exception:
            logger.exception("Export dialog failed")
            self._fail("Export Error", "Could not show the export dialog.")
            return False
        if picked is None:
            logger.debug("Export cancelled")
            return False

        path = ensure_suffix(Path(picked), ".html")
        try:
            self._files.write_text(path, build_html_document(doc.title, html_body))
        except Exception as e:
            logger.exception("Error exporting %s", path)
            self._fail("Export Error", f"Failed to export HTML:\n{path}\n\n{e}")
            return False

        logger.info("Exported HTML %s", path)
        return True
