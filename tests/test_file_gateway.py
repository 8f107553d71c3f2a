from __future__ import annotations

from mdpad.services.file_gateway import FileGateway, build_filter


def test_build_filter():
    assert build_filter(("md", "txt")) == "Documents (*.md *.txt);;All files (*)"


def test_pickers_delegate_to_dialog_port(gateway: FileGateway, dialogs, tmp_path):
    dialogs.open_answers.append(tmp_path / "a.md")
    dialogs.save_answers.append(tmp_path / "b.md")

    assert gateway.pick_open_path(("md",)) == tmp_path / "a.md"
    assert gateway.pick_save_path("Doc.md", ("md",)) == tmp_path / "b.md"

    assert dialogs.open_calls == [("Open Markdown", None, build_filter(("md",)))]
    assert dialogs.save_calls == [("Save As", "Doc.md", build_filter(("md",)))]


def test_pickers_return_none_when_cancelled(gateway: FileGateway):
    assert gateway.pick_open_path(("md",)) is None
    assert gateway.pick_save_path("Doc.md", ("md",)) is None


def test_file_access_goes_through_file_service(gateway: FileGateway, tmp_path):
    p = tmp_path / "a.md"
    assert gateway.exists(p) is False
    gateway.write_text(p, "hello")
    assert gateway.exists(p) is True
    assert gateway.read_text(p) == "hello"


def test_save_picker_passes_caption_through(gateway: FileGateway, dialogs):
    gateway.pick_save_path("Doc.html", ("html",), caption="Export as HTML")
    assert dialogs.save_calls == [("Export as HTML", "Doc.html", build_filter(("html",)))]
