from datetime import datetime

import pytest

from mdpad.domain.models import Document, RecentEntry, display_name_for


def test_new_document_defaults():
    d = Document.new()
    assert d.title == "Untitled"
    assert d.content == ""
    assert d.file_path is None
    assert d.saved is True
    assert d.has_unsaved_changes is False
    assert d.created_at == d.updated_at
    assert d.id


def test_copy_with_replaces_only_given_fields():
    d = Document.new(title="Notes", content="a")
    c = d.copy_with(content="b", saved=False)

    assert c is not d
    assert c.content == "b"
    assert c.saved is False
    assert c.has_unsaved_changes is True
    assert (c.id, c.title, c.created_at, c.file_path) == (d.id, d.title, d.created_at, None)
    # original untouched
    assert d.content == "a"
    assert d.saved is True


def test_document_is_frozen():
    d = Document.new()
    with pytest.raises(AttributeError):
        d.title = "x"  # type: ignore[misc]


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/home/me/notes/todo.md", "todo.md"),
        ("C:\\Users\\me\\readme.markdown", "readme.markdown"),
        ("/mixed\\sep/file.txt", "file.txt"),
        ("/trailing/dir/", "dir"),
    ],
)
def test_display_name_uses_last_path_segment(path, expected):
    d = Document.new(title="ignored").copy_with(file_path=path)
    assert d.display_name == expected


def test_display_name_without_path_uses_title():
    assert Document.new(title="Draft").display_name == "Draft.md"
    assert display_name_for(None, "Untitled") == "Untitled.md"


def test_recent_entry_drops_content_and_saved_state():
    d = Document.new(title="x", content="secret").copy_with(file_path="/tmp/x.md", saved=False)
    e = RecentEntry.from_document(d)
    data = e.to_dict()

    assert set(data) == {"id", "title", "filePath", "createdAt", "updatedAt"}
    assert "secret" not in str(data)
    assert data["filePath"] == "/tmp/x.md"
    assert RecentEntry.from_dict(data) == e


def test_recent_entry_timestamps_are_iso8601():
    ts = datetime(2024, 5, 1, 12, 30, 15, 123456)
    e = RecentEntry(id="1", title="t", file_path="/a.md", created_at=ts, updated_at=ts)
    assert e.to_dict()["createdAt"] == "2024-05-01T12:30:15.123456"


@pytest.mark.parametrize(
    "data",
    [
        {"title": "t", "filePath": "/a.md", "createdAt": "2024-01-01", "updatedAt": "2024-01-01"},
        {"id": "1", "title": "t", "filePath": 3, "createdAt": "2024-01-01", "updatedAt": "2024-01-01"},
        {"id": "1", "title": "t", "filePath": "/a.md", "createdAt": "yesterday", "updatedAt": "2024-01-01"},
    ],
)
def test_recent_entry_from_dict_rejects_malformed(data):
    with pytest.raises((KeyError, TypeError, ValueError)):
        RecentEntry.from_dict(data)
