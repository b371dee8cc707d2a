"""
Pydantic Schemas für die PIN-Anmeldung
"""
from typing import Literal
from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    pin: str = Field(..., min_length=1, max_length=12, description="PIN (nur Ziffern)")


class CurrentUserResponse(BaseModel):
    name: str
    role: Literal["admin", "driver"]


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: CurrentUserResponse
