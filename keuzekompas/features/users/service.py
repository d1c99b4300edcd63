"""User administration (document-store backed)."""

from __future__ import annotations

import logging
from typing import List

from fastapi import HTTPException, status

from keuzekompas.features.favorites.repository import favorite_repository
from .repository import user_repository
from .schemas import UserOut, to_out

logger = logging.getLogger("users.service")


async def list_users() -> List[UserOut]:
    """Return all users ordered by newest first."""
    return [to_out(d) for d in await user_repository.list_users()]


async def get_user(user_id: str) -> UserOut:
    doc = await user_repository.get_user_by_id(user_id)
    if not doc:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "User not found")
    return to_out(doc)


async def delete_user(user_id: str) -> None:
    """Remove a user together with their bookmarks."""
    if not await user_repository.delete_user(user_id):
        raise HTTPException(status.HTTP_404_NOT_FOUND, "User not found")
    removed = await favorite_repository.delete_for_user(user_id)
    logger.info("user deleted id=%s favorites_removed=%d", user_id, removed)
