"""
Notebook routes: /api/notebooks

Every route takes an optional `collection`; without it the active
collection is used.
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from lexnote.server.deps import get_notebook_store
from lexnote.server.routes.decode import entries_payload


router = APIRouter(prefix="/api/notebooks", tags=["notebooks"])


class CreateNotebookRequest(BaseModel):
    name: str
    text: str


# === Notebook CRUD ===

@router.get("")
async def list_notebooks(q: str | None = None, collection: str | None = None, db: int = 0):
    """List notebooks in a collection, optionally filtered by name."""
    store = get_notebook_store(db, collection)
    notebooks = store.search(q) if q else store.list_all()
    return {
        "collection": store.collection,
        "notebooks": [
            {"id": n.id, "name": n.name, "created_at": n.created_at, "open": store.is_open(n.id)}
            for n in notebooks
        ],
    }


@router.post("")
async def create_notebook(req: CreateNotebookRequest, collection: str | None = None, db: int = 0):
    """Store a notebook. The text must decode."""
    store = get_notebook_store(db, collection)
    notebook_id = store.add(req.name, req.text)
    return {"id": notebook_id, "collection": store.collection}


@router.get("/{notebook_id}")
async def get_notebook(notebook_id: str, collection: str | None = None, db: int = 0):
    """Get a notebook by ID."""
    store = get_notebook_store(db, collection)
    notebook = store.get(notebook_id)
    if not notebook:
        raise HTTPException(status_code=404, detail="Notebook not found")

    return {
        **notebook.to_dict(),
        "open": store.is_open(notebook_id),
        "hidden": sorted(store.hidden_ids(notebook_id)),
    }


@router.delete("/{notebook_id}")
async def delete_notebook(notebook_id: str, collection: str | None = None, db: int = 0):
    """Delete a notebook and its session."""
    store = get_notebook_store(db, collection)
    if not store.delete(notebook_id):
        raise HTTPException(status_code=404, detail="Notebook not found")
    return {"success": True}


# === Session ===

@router.post("/{notebook_id}/open")
async def open_notebook(notebook_id: str, collection: str | None = None, db: int = 0):
    """Decode the notebook and show every entry."""
    store = get_notebook_store(db, collection)
    session = store.open(notebook_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Notebook not found")
    return entries_payload(session.visible_entries())


@router.get("/{notebook_id}/entries")
async def list_entries(notebook_id: str, collection: str | None = None, db: int = 0):
    """Visible entries of the current session."""
    store = get_notebook_store(db, collection)
    session = store.session(notebook_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Notebook not found")
    return {"open": store.is_open(notebook_id), **entries_payload(session.visible_entries())}


@router.get("/{notebook_id}/entries/{entry_id}")
async def get_entry(notebook_id: str, entry_id: int, collection: str | None = None, db: int = 0):
    """One entry of the open session, hidden or not."""
    store = get_notebook_store(db, collection)
    session = store.session(notebook_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Notebook not found")
    entry = session.get(entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Entry not found")
    return {**entry.to_dict(), "visible": session.is_visible(entry_id)}


@router.post("/{notebook_id}/entries/{entry_id}/hide")
async def hide_entry(notebook_id: str, entry_id: int, collection: str | None = None, db: int = 0):
    """Dismiss an entry card. Unknown ids are ignored."""
    store = get_notebook_store(db, collection)
    if not store.get(notebook_id):
        raise HTTPException(status_code=404, detail="Notebook not found")
    return {"success": store.hide(notebook_id, entry_id)}


@router.post("/{notebook_id}/close")
async def close_notebook(notebook_id: str, collection: str | None = None, db: int = 0):
    """Close the session, dropping entries and dismissals."""
    store = get_notebook_store(db, collection)
    if not store.get(notebook_id):
        raise HTTPException(status_code=404, detail="Notebook not found")
    store.close(notebook_id)
    return {"success": True}
