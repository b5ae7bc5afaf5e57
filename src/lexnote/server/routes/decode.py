"""
Stateless decoding: /api/decode
"""

from fastapi import APIRouter
from pydantic import BaseModel

from lexnote.core.layout import batch_rows
from lexnote.core.parser import decode_entries


router = APIRouter(prefix="/api/decode", tags=["decode"])


class DecodeRequest(BaseModel):
    text: str


def entries_payload(entries) -> dict:
    """Entries plus their row grouping (ids only per row)."""
    entries = list(entries)
    return {
        "entries": [e.to_dict() for e in entries],
        "rows": [[e.id for e in row] for row in batch_rows(entries)],
    }


@router.post("")
async def decode(req: DecodeRequest):
    """Decode an entry stream without storing it. Errors become 400s in main."""
    return entries_payload(decode_entries(req.text))
