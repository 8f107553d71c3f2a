"""Domain layer: interfaces and simple models (dataclasses)."""

from .interfaces import (
    IFileGateway,
    IFileService,
    IKeyValueStore,
    IMarkdownRenderer,
    IRecentFilesRegistry,
    ISettingsService,
)
from .models import Document, RecentEntry

__all__ = [
    "IMarkdownRenderer",
    "IFileService",
    "IFileGateway",
    "IKeyValueStore",
    "ISettingsService",
    "IRecentFilesRegistry",
    "Document",
    "RecentEntry",
]
