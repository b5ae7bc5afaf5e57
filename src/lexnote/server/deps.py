"""
Shared dependencies for routes.
"""

import redis
from fastapi import HTTPException

from lexnote.core.notebook import NotebookStore


def get_redis(db: int = 0):
    return redis.Redis(host="localhost", port=6379, db=db)


def get_notebook_store(db: int = 0, collection: str | None = None) -> NotebookStore:
    try:
        return NotebookStore(get_redis(db), collection)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
