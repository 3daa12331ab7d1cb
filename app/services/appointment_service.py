from motor.motor_asyncio import AsyncIOMotorDatabase
from typing import Any, Dict, List

from ..core.config import settings
from ..models.appointment import AppointmentDocument
from ..schemas.results import InsertResult, DeleteResult
from ..utils.mongo import serialize, to_object_id

def build_appointments_with_doctor_pipeline(email: str, doctors_collection: str) -> List[Dict[str, Any]]:
    """Appointments for ``email``, one row per appointment with its doctor embedded.

    A doctorId that is malformed or points at no doctor yields an empty lookup,
    and the unwind stage drops that appointment.
    """
    return [
        {"$match": {"email": email}},
        {
            "$addFields": {
                "doctorIdObject": {
                    "$convert": {
                        "input": "$doctorId",
                        "to": "objectId",
                        "onError": None,
                        "onNull": None,
                    }
                }
            }
        },
        {
            "$lookup": {
                "from": doctors_collection,
                "localField": "doctorIdObject",
                "foreignField": "_id",
                "as": "doctorDetails",
            }
        },
        {"$unwind": "$doctorDetails"},
    ]

class AppointmentService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[settings.APPOINTMENTS_COLLECTION]

    async def create_appointment(self, appointment: AppointmentDocument) -> InsertResult:
        result = await self.collection.insert_one(appointment.model_dump(exclude_unset=True))
        return InsertResult.from_result(result)

    async def list_for_patient(self, email: str) -> List[Dict[str, Any]]:
        pipeline = build_appointments_with_doctor_pipeline(email, settings.DOCTORS_COLLECTION)
        appointments = await self.collection.aggregate(pipeline).to_list(length=None)
        return serialize(appointments)

    async def delete_appointment(self, appointment_id: str) -> DeleteResult:
        result = await self.collection.delete_one({"_id": to_object_id(appointment_id)})
        return DeleteResult.from_result(result)
