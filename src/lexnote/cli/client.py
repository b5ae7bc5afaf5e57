"""
HTTP client for Lexnote API.

Notebook calls take an optional collection; None means the server's
active collection.
"""

import httpx

BASE_URL = "http://localhost:8000/api"


def _params(collection: str = None, **extra) -> dict:
    params = {k: v for k, v in extra.items() if v is not None}
    if collection:
        params["collection"] = collection
    return params


# === Notebooks ===

def create_notebook(name: str, text: str, collection: str = None) -> dict:
    r = httpx.post(f"{BASE_URL}/notebooks", params=_params(collection),
                   json={"name": name, "text": text}, timeout=60)
    r.raise_for_status()
    return r.json()


def list_notebooks(query: str = None, collection: str = None) -> list[dict]:
    r = httpx.get(f"{BASE_URL}/notebooks", params=_params(collection, q=query))
    r.raise_for_status()
    return r.json()["notebooks"]


def delete_notebook(notebook_id: str, collection: str = None) -> dict:
    r = httpx.delete(f"{BASE_URL}/notebooks/{notebook_id}", params=_params(collection))
    r.raise_for_status()
    return r.json()


# === Sessions ===

def open_notebook(notebook_id: str, collection: str = None) -> dict:
    r = httpx.post(f"{BASE_URL}/notebooks/{notebook_id}/open", params=_params(collection), timeout=60)
    r.raise_for_status()
    return r.json()


def list_entries(notebook_id: str, collection: str = None) -> dict:
    r = httpx.get(f"{BASE_URL}/notebooks/{notebook_id}/entries", params=_params(collection))
    r.raise_for_status()
    return r.json()


def hide_entry(notebook_id: str, entry_id: int, collection: str = None) -> dict:
    r = httpx.post(f"{BASE_URL}/notebooks/{notebook_id}/entries/{entry_id}/hide", params=_params(collection))
    r.raise_for_status()
    return r.json()


def close_notebook(notebook_id: str, collection: str = None) -> dict:
    r = httpx.post(f"{BASE_URL}/notebooks/{notebook_id}/close", params=_params(collection))
    r.raise_for_status()
    return r.json()
