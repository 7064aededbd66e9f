"""
Pydantic schemas for the admin login exchange.
"""
from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Credentials posted to ``api/admin/login``."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    """Login reply; only the token is kept."""

    token: str = Field(..., min_length=1)
