# src/lexnote/core/store.py
"""
In-memory holder for one decoded notebook.

Decoded entries are immutable; only the visibility overlay changes
after decode. Single-owner: callers sharing a store across threads
must serialize access themselves.
"""

from typing import Iterator

from lexnote.core.entry import Entry
from lexnote.core.parser import EntryParser


class EntryStore:
    def __init__(self, parser: EntryParser | None = None):
        self.parser = parser or EntryParser()
        self._entries: tuple[Entry, ...] = ()
        self._visible: dict[int, bool] = {}

    def decode(self, text: str) -> list[Entry]:
        """
        Decode text and replace everything held.

        All-or-nothing: on ParseError the previous entries and overlay
        are left untouched.
        """
        entries = self.parser.parse(text)
        self._entries = tuple(entries)
        self._visible = {e.id: True for e in entries}
        return entries

    @property
    def entries(self) -> list[Entry]:
        return list(self._entries)

    def get(self, entry_id: int) -> Entry | None:
        if 0 <= entry_id < len(self._entries):
            return self._entries[entry_id]
        return None

    def is_visible(self, entry_id: int) -> bool:
        return self._visible.get(entry_id, False)

    def hide(self, entry_id: int) -> None:
        """Unknown or already-hidden ids are ignored."""
        if entry_id in self._visible:
            self._visible[entry_id] = False

    def clear(self) -> None:
        self._entries = ()
        self._visible = {}

    def visible_entries(self) -> Iterator[Entry]:
        for entry in self._entries:
            if self._visible.get(entry.id, True):
                yield entry

    def search(self, query: str) -> list[Entry]:
        query_lower = query.lower()
        return [e for e in self.visible_entries() if query_lower in e.headword.lower()]

    def __len__(self) -> int:
        return len(self._entries)
