from pydantic import BaseModel

class TokenResponse(BaseModel):
    token: str

class AdminStatus(BaseModel):
    admin: bool
