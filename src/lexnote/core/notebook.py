# src/lexnote/core/notebook.py
"""
Notebook storage and sessions.

A notebook is a raw entry stream plus, while it is open, the set of
entry ids the user has dismissed. Entry ids survive across requests
because decoding the same text always yields the same ids.
"""

import json
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

import redis

from lexnote.core.parser import decode_entries
from lexnote.core.collection import collection_prefix, get_active, validate_name
from lexnote.core.store import EntryStore


def generate_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclass
class Notebook:
    id: str
    name: str
    text: str
    created_at: str
    collection: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "text": self.text,
            "created_at": self.created_at,
            "collection": self.collection,
        }


class NotebookStore:
    def __init__(self, client: redis.Redis, collection: str | None = None):
        """Works on the given collection, or the active one. Raises ValueError for a bad name."""
        self.client = client
        self.collection = validate_name(collection) if collection else get_active(client)
        self.prefix = collection_prefix(self.collection)

    def _notebook_key(self, notebook_id: str) -> str:
        return f"{self.prefix}:notebook:{notebook_id}"

    def _index_key(self) -> str:
        return f"{self.prefix}:notebook_index"

    def _open_key(self, notebook_id: str) -> str:
        return f"{self.prefix}:notebook:{notebook_id}:open"

    def _hidden_key(self, notebook_id: str) -> str:
        return f"{self.prefix}:notebook:{notebook_id}:hidden"

    def add(self, name: str, text: str) -> str:
        """Store a notebook. Raises ParseError if the text does not decode."""
        decode_entries(text)

        notebook_id = generate_id()
        notebook = {
            "id": notebook_id,
            "name": name,
            "text": text,
            "created_at": datetime.now(timezone.utc).isoformat(),
            "collection": self.collection,
        }
        self.client.set(self._notebook_key(notebook_id), json.dumps(notebook))
        self.client.sadd(self._index_key(), notebook_id)
        return notebook_id

    def get(self, notebook_id: str) -> Notebook | None:
        data = self.client.get(self._notebook_key(notebook_id))
        if data is None:
            return None
        return Notebook(**json.loads(data.decode()))

    def list_all(self) -> list[Notebook]:
        notebook_ids = self.client.smembers(self._index_key())
        notebooks = []
        for notebook_id in notebook_ids:
            notebook = self.get(notebook_id.decode())
            if notebook:
                notebooks.append(notebook)
        return sorted(notebooks, key=lambda n: n.created_at, reverse=True)

    def search(self, query: str) -> list[Notebook]:
        query_lower = query.lower()
        return [n for n in self.list_all() if query_lower in n.name.lower()]

    def delete(self, notebook_id: str) -> bool:
        if not self.client.exists(self._notebook_key(notebook_id)):
            return False
        self.client.delete(
            self._notebook_key(notebook_id),
            self._open_key(notebook_id),
            self._hidden_key(notebook_id),
        )
        self.client.srem(self._index_key(), notebook_id)
        return True

    # Sessions

    def is_open(self, notebook_id: str) -> bool:
        return bool(self.client.exists(self._open_key(notebook_id)))

    def hidden_ids(self, notebook_id: str) -> set[int]:
        return {int(m.decode()) for m in self.client.smembers(self._hidden_key(notebook_id))}

    def open(self, notebook_id: str) -> EntryStore | None:
        """Decode the notebook and start a fresh session with every entry visible."""
        notebook = self.get(notebook_id)
        if notebook is None:
            return None

        store = EntryStore()
        store.decode(notebook.text)

        self.client.delete(self._hidden_key(notebook_id))
        self.client.set(self._open_key(notebook_id), 1)
        return store

    def session(self, notebook_id: str) -> EntryStore | None:
        """Rebuild the current session. A closed notebook gives an empty store."""
        notebook = self.get(notebook_id)
        if notebook is None:
            return None

        store = EntryStore()
        if not self.is_open(notebook_id):
            return store

        store.decode(notebook.text)
        for entry_id in self.hidden_ids(notebook_id):
            store.hide(entry_id)
        return store

    def hide(self, notebook_id: str, entry_id: int) -> bool:
        """Dismiss one entry. Returns False when there is no open session."""
        if not self.is_open(notebook_id):
            return False
        self.client.sadd(self._hidden_key(notebook_id), entry_id)
        return True

    def close(self, notebook_id: str) -> None:
        self.client.delete(self._open_key(notebook_id), self._hidden_key(notebook_id))
