from fastapi import HTTPException, status
from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import Any, Dict, List, Optional
import logging
import re

from ..core.config import settings
from ..models.doctor import DoctorDocument
from ..schemas.results import InsertResult
from ..utils.mongo import serialize, to_object_id

logger = logging.getLogger(__name__)

TOP_RATED_FIELDS = ("doctorName", "specialization", "experience", "rating", "image")

def doctor_email_taken(existing: Optional[Dict[str, Any]], email: str) -> bool:
    """Whether ``existing`` (a find_one result for ``email``) is a doctor already using it.

    The check is read-then-insert and the collection has no unique index on
    ``email``, so two concurrent creates for the same email can both pass it
    and both insert.
    """
    return existing is not None and existing.get("email") == email

def build_doctor_search_pipeline(sort: Optional[str], search: Optional[str]) -> List[Dict[str, Any]]:
    """Sort by rating ("asc" ascending, anything else descending), then filter.

    The match stage is only added for a non-empty ``search`` and matches it as a
    case-insensitive substring of specialization or doctorName.
    """
    pipeline: List[Dict[str, Any]] = [
        {"$sort": {"rating": 1 if sort == "asc" else -1}}
    ]

    if search:
        pattern = re.escape(search)
        pipeline.append({
            "$match": {
                "$or": [
                    {"specialization": {"$regex": pattern, "$options": "i"}},
                    {"doctorName": {"$regex": pattern, "$options": "i"}},
                ]
            }
        })

    return pipeline

def build_top_rated_pipeline(limit: int = 8) -> List[Dict[str, Any]]:
    return [
        {"$sort": {"rating": -1}},
        {"$limit": limit},
        {"$project": {field: 1 for field in TOP_RATED_FIELDS}},
    ]

class DoctorService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[settings.DOCTORS_COLLECTION]

    async def create_doctor(self, doctor: DoctorDocument) -> InsertResult:
        """Add a doctor, refusing a second doctor with the same email."""
        existing = await self.collection.find_one({"email": doctor.email})
        if doctor_email_taken(existing, doctor.email):
            logger.info(f"Rejected duplicate doctor email {doctor.email}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="doctor already exists"
            )

        result = await self.collection.insert_one(doctor.model_dump(exclude_unset=True))
        return InsertResult.from_result(result)

    async def list_doctors(self, sort: Optional[str] = None, search: Optional[str] = None) -> List[Dict[str, Any]]:
        pipeline = build_doctor_search_pipeline(sort, search)
        doctors = await self.collection.aggregate(pipeline).to_list(length=None)
        return serialize(doctors)

    async def top_rated(self) -> List[Dict[str, Any]]:
        pipeline = build_top_rated_pipeline(settings.TOP_RATED_LIMIT)
        doctors = await self.collection.aggregate(pipeline).to_list(length=None)
        return serialize(doctors)

    async def get_doctor(self, doctor_id: str) -> Optional[Dict[str, Any]]:
        doctor = await self.collection.find_one({"_id": to_object_id(doctor_id)})
        return serialize(doctor)
