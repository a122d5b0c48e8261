"""Staff authentication I/O models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Credentials posted by the staff login form."""

    username: str = Field(min_length=1, description="Staff username")
    password: str = Field(min_length=1, description="Staff password")


class StaffUserRead(BaseModel):
    """Public view of a staff account."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str


class LoginResponse(BaseModel):
    """Issued access token and the account it belongs to."""

    token: str = Field(description="JWT access token (also set as the httponly 'token' cookie)")
    user: StaffUserRead
