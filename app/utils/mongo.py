from bson import ObjectId
from bson.errors import InvalidId
from fastapi import HTTPException, status
from fastapi.encoders import jsonable_encoder
from typing import Any

def to_object_id(id_str: str) -> ObjectId:
    """Parse a path id, rejecting anything that is not a 24-char hex ObjectId."""
    try:
        return ObjectId(id_str)
    except (InvalidId, TypeError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid id")

def serialize(doc: Any) -> Any:
    """Render BSON documents (or lists of them) as JSON-ready data.

    ObjectIds become hex strings in place, so ``_id`` keeps its name.
    """
    return jsonable_encoder(doc, custom_encoder={ObjectId: str})
