from __future__ import annotations

import re
import time
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any

from mdpad.utils.constants import UNTITLED

_PATH_SEP_RE = re.compile(r"[/\\]")


def new_document_id() -> str:
    """Opaque id: microseconds since the epoch."""
    return str(time.time_ns() // 1000)


def display_name_for(file_path: str | None, title: str) -> str:
    if file_path is not None:
        segments = [s for s in _PATH_SEP_RE.split(file_path) if s]
        if segments:
            return segments[-1]
    return f"{title}.md"


@dataclass(frozen=True)
class Document:
    id: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime
    file_path: str | None = None
    saved: bool = True

    @classmethod
    def new(cls, *, title: str = UNTITLED, content: str = "") -> Document:
        now = datetime.now()
        return cls(
            id=new_document_id(),
            title=title,
            content=content,
            created_at=now,
            updated_at=now,
        )

    def copy_with(self, **changes: Any) -> Document:
        return replace(self, **changes)

    @property
    def has_unsaved_changes(self) -> bool:
        return not self.saved

    @property
    def display_name(self) -> str:
        return display_name_for(self.file_path, self.title)


@dataclass(frozen=True)
class RecentEntry:
    """Content-free projection of a Document kept in the recent-files list."""

    id: str
    title: str
    file_path: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_document(cls, doc: Document) -> RecentEntry:
        return cls(
            id=doc.id,
            title=doc.title,
            file_path=doc.file_path,
            created_at=doc.created_at,
            updated_at=doc.updated_at,
        )

    @property
    def display_name(self) -> str:
        return display_name_for(self.file_path, self.title)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "filePath": self.file_path,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RecentEntry:
        """Raises KeyError/TypeError/ValueError on a malformed record."""
        file_path = data["filePath"]
        if file_path is not None and not isinstance(file_path, str):
            raise TypeError(f"filePath must be a string, got {type(file_path).__name__}")
        return cls(
            id=str(data["id"]),
            title=str(data["title"]),
            file_path=file_path,
            created_at=datetime.fromisoformat(data["createdAt"]),
            updated_at=datetime.fromisoformat(data["updatedAt"]),
        )
