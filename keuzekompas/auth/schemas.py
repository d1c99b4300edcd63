"""Pydantic models for authentication."""

from __future__ import annotations

from pydantic import BaseModel, EmailStr, Field, field_validator

from keuzekompas.features.users.schemas import UserPublic


class LoginRequest(BaseModel):
    """Credentials supplied for user authentication."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseModel):
    """User registration request."""
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=6)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v


class AuthResponse(BaseModel):
    """Signed token plus the identity it was issued for."""

    user: UserPublic
    token: str


class ProfileResponse(BaseModel):
    user: UserPublic


class LogoutResponse(BaseModel):
    """Response after logout."""
    message: str = "Logged out successfully"
