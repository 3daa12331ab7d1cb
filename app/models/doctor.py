from pydantic import BaseModel, ConfigDict

class DoctorDocument(BaseModel):
    """Doctor body; fields other than ``email`` (doctorName, rating, ...) pass through untouched."""
    model_config = ConfigDict(extra="allow")

    email: str
