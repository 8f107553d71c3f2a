from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QByteArray, Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QLineEdit,
    QMainWindow,
    QMenu,
    QSplitter,
    QStatusBar,
    QTextBrowser,
    QTextEdit,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

from mdpad.domain.interfaces import IMarkdownRenderer, ISettingsService
from mdpad.domain.models import RecentEntry
from mdpad.services.session_controller import SessionController
from mdpad.ui.ports.messages import IMessageService
from mdpad.utils.constants import APP_NAME

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Thin view over a SessionController.

    User edits are forwarded to the session; widgets are refreshed from the
    session's state whenever it emits ``state_changed``. Unsaved-changes
    prompts live here, not in the session.
    """

    def __init__(
        self,
        session: SessionController,
        renderer: IMarkdownRenderer,
        settings: ISettingsService,
        messages: IMessageService,
        *,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
        use_web_engine: bool = True,
    ) -> None:
        super().__init__()
        self.app_title = app_title
        self.setWindowTitle(app_title)
        self.resize(1100, 700)

        self.session = session
        self.renderer = renderer
        self.settings = settings
        self.messages = messages

        # Guards widget -> session echo while the view applies session state.
        self._syncing = False
        self._rendered_content: str | None = None
        self._menu_recents: list[RecentEntry] | None = None

        # Widgets
        self.title_edit = QLineEdit(self)
        self.title_edit.setPlaceholderText("Untitled")

        self.editor = QTextEdit(self)
        self.editor.setAcceptRichText(False)
        self.editor.setTabStopDistance(4 * self.editor.fontMetrics().horizontalAdvance(" "))

        # --- Preview: prefer QWebEngineView (runs MathJax/KaTeX), fall back to QTextBrowser ---
        self.preview = self._create_preview_widget(use_web_engine)

        left = QWidget(self)
        left_layout = QVBoxLayout(left)
        left_layout.setContentsMargins(0, 0, 0, 0)
        left_layout.addWidget(self.title_edit)
        left_layout.addWidget(self.editor)

        self.splitter = QSplitter(self)
        self.splitter.setOrientation(Qt.Orientation.Horizontal)
        self.splitter.addWidget(left)
        self.splitter.addWidget(self.preview)
        self.splitter.setStretchFactor(0, 1)
        self.splitter.setStretchFactor(1, 1)
        self.setCentralWidget(self.splitter)

        # Signals
        self.editor.textChanged.connect(self._on_editor_changed)
        self.title_edit.textEdited.connect(self._on_title_edited)
        self.session.state_changed.connect(self._on_state_changed)
        self.session.operation_failed.connect(self._on_operation_failed)

        # UI
        self._build_actions()
        self._build_toolbar()
        self._build_menu()
        self.setStatusBar(QStatusBar(self))

        # Restore UI state
        geo = self.settings.get_geometry()
        if isinstance(geo, (bytes, bytearray)):
            self.restoreGeometry(QByteArray(geo))
        split = self.settings.get_splitter()
        if isinstance(split, (bytes, bytearray)):
            self.splitter.restoreState(QByteArray(split))

        self.session.load_recent_files()
        if start_path is None or self.session.open_path(start_path) is None:
            self.session.create_new()

    # ---------- UI creation ----------
    def _build_actions(self) -> None:
        self.act_new = QAction(
            "New", self, shortcut=QKeySequence.StandardKey.New, triggered=self._new_file
        )
        self.act_open = QAction(
            "Open…",
            self,
            shortcut=QKeySequence.StandardKey.Open,
            triggered=self._open_dialog,
        )
        self.act_save = QAction(
            "Save", self, shortcut=QKeySequence.StandardKey.Save, triggered=self._save
        )
        self.act_save_as = QAction(
            "Save As…",
            self,
            shortcut=QKeySequence.StandardKey.SaveAs,
            triggered=self._save_as,
        )
        self.act_export_html = QAction("Export HTML…", self, triggered=self._export_html)
        self.act_close = QAction(
            "Close", self, shortcut=QKeySequence.StandardKey.Close, triggered=self._close_document
        )
        self.act_clear_recent = QAction(
            "Clear Recent", self, triggered=self.session.clear_recent_files
        )
        self.act_exit = QAction("&Exit", self, shortcut="Ctrl+Q", triggered=self.close)
        self.act_toggle_preview = QAction(
            "Toggle Preview",
            self,
            checkable=True,
            checked=True,
            triggered=self.preview.setVisible,
        )

        self.recent_menu = QMenu("Open Recent", self)
        # Actions that need an open document.
        self._document_actions = (
            self.act_save,
            self.act_save_as,
            self.act_export_html,
            self.act_close,
        )

    def _build_toolbar(self) -> None:
        tb = QToolBar("Main", self)
        tb.setMovable(False)
        for a in (self.act_new, self.act_open, self.act_save, self.act_save_as):
            tb.addAction(a)
        tb.addSeparator()
        tb.addAction(self.act_export_html)
        tb.addAction(self.act_toggle_preview)
        self.addToolBar(tb)

    def _build_menu(self) -> None:
        m = self.menuBar()
        filem = m.addMenu("&File")
        filem.addAction(self.act_new)
        filem.addAction(self.act_open)
        filem.addMenu(self.recent_menu)
        filem.addSeparator()
        filem.addAction(self.act_save)
        filem.addAction(self.act_save_as)
        filem.addAction(self.act_export_html)
        filem.addSeparator()
        filem.addAction(self.act_close)
        filem.addAction(self.act_exit)

        viewm = m.addMenu("&View")
        viewm.addAction(self.act_toggle_preview)

    def _create_preview_widget(self, use_web_engine: bool) -> QWidget:
        """
        Prefer QWebEngineView (runs MathJax/KaTeX), fall back to QTextBrowser.
        The import is guarded so the app runs without Qt WebEngine installed.
        """
        if use_web_engine:
            try:
                from PyQt6.QtWebEngineWidgets import QWebEngineView  # type: ignore

                logger.debug("Using QWebEngineView for the preview")
                return QWebEngineView(self)
            except Exception as e:
                logger.warning("QWebEngineView unavailable (%s); using QTextBrowser", e)
        w = QTextBrowser(self)
        w.setOpenExternalLinks(True)
        return w

    def _refresh_recent_menu(self, entries: list[RecentEntry]) -> None:
        # Entry actions belong to the menu; act_clear_recent belongs to the window.
        for a in self.recent_menu.actions():
            self.recent_menu.removeAction(a)
            if a is not self.act_clear_recent:
                # The triggering action may still be on the stack.
                a.deleteLater()
        if not entries:
            na = QAction("(empty)", self.recent_menu)
            na.setEnabled(False)
            self.recent_menu.addAction(na)
            return
        for entry in entries:
            act = QAction(
                entry.display_name,
                self.recent_menu,
                triggered=lambda chk=False, e=entry: self._open_recent(e),
            )
            act.setToolTip(entry.file_path or "")
            act.setStatusTip(entry.file_path or "")
            self.recent_menu.addAction(act)
        self.recent_menu.addSeparator()
        self.recent_menu.addAction(self.act_clear_recent)

    # ---------- Actions ----------
    def _new_file(self) -> None:
        if not self._confirm_discard():
            return
        self.session.create_new()

    def _open_dialog(self) -> None:
        if not self._confirm_discard():
            return
        if self.session.open_from_picker():
            self.statusBar().showMessage(f"Opened: {self.session.current.file_path}", 3000)

    def _open_recent(self, entry: RecentEntry) -> None:
        if not self._confirm_discard():
            return
        if self.session.open_recent(entry) is not None:
            self.statusBar().showMessage(f"Opened: {entry.file_path}", 3000)

    def _save(self) -> None:
        if self.session.save():
            self.statusBar().showMessage(f"Saved: {self.session.current.file_path}", 3000)

    def _save_as(self) -> None:
        path = self.session.save_as()
        if path:
            self.statusBar().showMessage(f"Saved: {path}", 3000)

    def _export_html(self) -> None:
        doc = self.session.current
        if doc is None:
            return
        if self.session.export_html(self.renderer.to_html_body(doc.content)):
            self.statusBar().showMessage("Exported HTML", 3000)

    def _close_document(self) -> None:
        if not self._confirm_discard():
            return
        self.session.close()

    # ---------- Session <-> widgets ----------
    def _on_editor_changed(self) -> None:
        if self._syncing:
            return
        self.session.update_content(self.editor.toPlainText())

    def _on_title_edited(self, text: str) -> None:
        self.session.update_title(text)

    def _on_state_changed(self) -> None:
        doc = self.session.current
        self._syncing = True
        try:
            if doc is None:
                self.editor.clear()
                self.title_edit.clear()
            else:
                if self.editor.toPlainText() != doc.content:
                    self.editor.setPlainText(doc.content)
                if self.title_edit.text() != doc.title:
                    self.title_edit.setText(doc.title)
        finally:
            self._syncing = False

        has_doc = doc is not None
        self.editor.setEnabled(has_doc)
        self.title_edit.setEnabled(has_doc)
        for a in self._document_actions:
            a.setEnabled(has_doc)

        self._update_title()
        self._render_preview()
        recents = self.session.recent_files
        if recents != self._menu_recents:
            self._menu_recents = recents
            self._refresh_recent_menu(recents)

    def _on_operation_failed(self, title: str, message: str) -> None:
        self.messages.error(self, title, message)

    def _render_preview(self) -> None:
        doc = self.session.current
        content = doc.content if doc is not None else ""
        if content == self._rendered_content:
            return
        self._rendered_content = content
        self.preview.setHtml(self.renderer.to_html(content))

    def _update_title(self) -> None:
        doc = self.session.current
        if doc is None:
            self.setWindowTitle(self.app_title)
            return
        star = " •" if doc.has_unsaved_changes else ""
        self.setWindowTitle(f"{doc.display_name}{star} — {self.app_title}")

    def _confirm_discard(self) -> bool:
        if not self.session.has_unsaved_changes:
            return True
        return self.messages.ask(
            self, "Unsaved Changes", "You have unsaved changes. Do you want to discard them?"
        )

    # ---------- Close ----------
    def closeEvent(self, event) -> None:
        if not self._confirm_discard():
            event.ignore()
            return
        self.settings.set_geometry(bytes(self.saveGeometry()))
        self.settings.set_splitter(bytes(self.splitter.saveState()))
        super().closeEvent(event)
