"""Pydantic models for user resources."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr


class UserPublic(BaseModel):
    """Identity returned to clients (never includes the password hash)."""
    id: str
    name: str
    email: EmailStr
    role: str = "user"


class UserOut(UserPublic):
    """Represents a user stored in the database."""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


def to_public(doc: dict) -> UserPublic:
    return UserPublic(
        id=str(doc["_id"]),
        name=doc["name"],
        email=doc["email"],
        role=doc.get("role") or "user",
    )


def to_out(doc: dict) -> UserOut:
    return UserOut(
        id=str(doc["_id"]),
        name=doc["name"],
        email=doc["email"],
        role=doc.get("role") or "user",
        created_at=doc.get("created_at"),
        updated_at=doc.get("updated_at"),
    )
