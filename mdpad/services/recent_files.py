from __future__ import annotations

import json
import logging

from mdpad.domain.interfaces import IKeyValueStore, IRecentFilesRegistry
from mdpad.domain.models import RecentEntry
from mdpad.utils.constants import MAX_RECENTS, SETTINGS_RECENTS

logger = logging.getLogger(__name__)


class RecentFilesRegistry(IRecentFilesRegistry):
    """
    Most-recently-used list of opened documents, persisted as one JSON record.

    Best effort: a corrupt or unreadable record reads as "no recent files"
    and write failures are logged. Reads and writes always cover the whole
    list, so concurrent writers may lose updates.
    """

    def __init__(
        self,
        store: IKeyValueStore,
        *,
        key: str = SETTINGS_RECENTS,
        capacity: int = MAX_RECENTS,
    ) -> None:
        self._store = store
        self._key = key
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    def list(self) -> list[RecentEntry]:
        try:
            raw = self._store.get_string(self._key)
            if not raw:
                return []
            data = json.loads(raw)
            if not isinstance(data, list):
                logger.warning("Recent files record is not a list; ignoring it")
                return []
            return [RecentEntry.from_dict(item) for item in data]
        except Exception:
            logger.warning("Could not read recent files; treating as empty", exc_info=True)
            return []

    def record(self, entry: RecentEntry) -> None:
        if entry.file_path is None:
            return

        entries = [e for e in self.list() if e.file_path != entry.file_path]
        entries.insert(0, entry)
        del entries[self._capacity :]

        try:
            self._store.set_string(self._key, json.dumps([e.to_dict() for e in entries]))
        except Exception:
            logger.exception("Could not persist recent files")

    def clear(self) -> None:
        try:
            self._store.remove(self._key)
        except Exception:
            logger.exception("Could not clear recent files")
