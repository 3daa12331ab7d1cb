from pydantic import BaseModel
from typing import Optional

class InsertResult(BaseModel):
    acknowledged: bool
    insertedId: Optional[str] = None

    @classmethod
    def from_result(cls, result) -> "InsertResult":
        return cls(
            acknowledged=result.acknowledged,
            insertedId=str(result.inserted_id) if result.inserted_id is not None else None
        )

class UpdateResult(BaseModel):
    acknowledged: bool
    matchedCount: int
    modifiedCount: int
    upsertedCount: int
    upsertedId: Optional[str] = None

    @classmethod
    def from_result(cls, result) -> "UpdateResult":
        upserted_id = result.upserted_id
        return cls(
            acknowledged=result.acknowledged,
            matchedCount=result.matched_count,
            modifiedCount=result.modified_count,
            upsertedCount=0 if upserted_id is None else 1,
            upsertedId=None if upserted_id is None else str(upserted_id)
        )

class DeleteResult(BaseModel):
    acknowledged: bool
    deletedCount: int

    @classmethod
    def from_result(cls, result) -> "DeleteResult":
        return cls(acknowledged=result.acknowledged, deletedCount=result.deleted_count)
