from pydantic import BaseModel, ConfigDict

class AppointmentDocument(BaseModel):
    """Appointment body.

    ``email`` identifies the patient and ``doctorId`` holds the hex string
    of the doctor's ObjectId. Scheduling fields are free-form.
    """
    model_config = ConfigDict(extra="allow")

    email: str
    doctorId: str
