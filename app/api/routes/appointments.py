from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import Any, Dict, List

from ...core.database import get_db
from ...models.appointment import AppointmentDocument
from ...schemas.results import InsertResult, DeleteResult
from ...services.appointment_service import AppointmentService

router = APIRouter(prefix="/appointments", tags=["Appointments"])

@router.post("", response_model=InsertResult)
async def create_appointment(
    appointment: AppointmentDocument,
    db: AsyncIOMotorDatabase = Depends(get_db)
):
    return await AppointmentService(db).create_appointment(appointment)

@router.get("/{email}", response_model=List[Dict[str, Any]])
async def list_appointments(email: str, db: AsyncIOMotorDatabase = Depends(get_db)):
    """A patient's appointments, each joined with its doctor's details."""
    return await AppointmentService(db).list_for_patient(email)

@router.delete("/{appointment_id}", response_model=DeleteResult)
async def delete_appointment(appointment_id: str, db: AsyncIOMotorDatabase = Depends(get_db)):
    return await AppointmentService(db).delete_appointment(appointment_id)
