"""User API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from keuzekompas.auth.deps import get_current_user, require_admin
from keuzekompas.features.modules.schemas import MessageResponse
from .schemas import UserOut, UserPublic
from .service import delete_user, get_user, list_users

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserOut])
async def read_users(current_user: UserPublic = Depends(require_admin())) -> list[UserOut]:
    """Return all users (admin only)."""
    return await list_users()


@router.get("/{user_id}", response_model=UserOut)
async def read_user(user_id: str, current_user: UserPublic = Depends(get_current_user)) -> UserOut:
    return await get_user(user_id)


@router.delete("/{user_id}", response_model=MessageResponse)
async def remove_user(user_id: str, current_user: UserPublic = Depends(require_admin())):
    await delete_user(user_id)
    return MessageResponse(message="User successfully deleted")
