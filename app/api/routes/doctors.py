from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import Any, Dict, List, Optional

from ...core.database import get_db
from ...models.doctor import DoctorDocument
from ...schemas.results import InsertResult
from ...services.doctor_service import DoctorService

router = APIRouter(tags=["Doctors"])

@router.post("/doctors", response_model=InsertResult)
async def create_doctor(doctor: DoctorDocument, db: AsyncIOMotorDatabase = Depends(get_db)):
    """Add a doctor; 403 when the email is already used by another doctor."""
    return await DoctorService(db).create_doctor(doctor)

@router.get("/doctors", response_model=List[Dict[str, Any]])
async def list_doctors(
    sort: Optional[str] = None,
    search: Optional[str] = None,
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    """List doctors by rating, optionally filtered by name or specialization."""
    return await DoctorService(db).list_doctors(sort=sort, search=search)

@router.get("/top-rated-doctors", response_model=List[Dict[str, Any]])
async def top_rated_doctors(db: AsyncIOMotorDatabase = Depends(get_db)):
    return await DoctorService(db).top_rated()

@router.get("/doctors/{doctor_id}", response_model=Optional[Dict[str, Any]])
async def get_doctor(doctor_id: str, db: AsyncIOMotorDatabase = Depends(get_db)):
    return await DoctorService(db).get_doctor(doctor_id)
