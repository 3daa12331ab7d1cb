from pydantic import BaseModel, ConfigDict

class UserDocument(BaseModel):
    """User registration body.

    Only ``email`` is required; ``name``, ``role`` and anything else are
    stored exactly as sent.
    """
    model_config = ConfigDict(extra="allow")

    email: str
