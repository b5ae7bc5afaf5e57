"""
Collection routes: /api/collections
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from lexnote.core.collection import get_active, list_collections, set_active
from lexnote.server.deps import get_redis


router = APIRouter(prefix="/api/collections", tags=["collections"])


class SetActiveRequest(BaseModel):
    name: str


@router.get("")
async def get_collections(db: int = 0):
    """Collections with notebooks, plus the active one."""
    client = get_redis(db)
    return {"active": get_active(client), "collections": list_collections(client)}


@router.put("/active")
async def put_active(req: SetActiveRequest, db: int = 0):
    """Switch the collection used when a request names none."""
    try:
        name = set_active(get_redis(db), req.name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"active": name}
