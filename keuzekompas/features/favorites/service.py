import logging
from typing import List, Tuple

from fastapi import HTTPException, status
from pymongo.errors import DuplicateKeyError

from keuzekompas.features.modules.repository import module_repository
from .repository import favorite_repository
from .schemas import FavoriteOut, to_out

logger = logging.getLogger("favorites.service")


class FavoriteService:

    @staticmethod
    async def add_favorite(user_id: str, module_id: int) -> Tuple[FavoriteOut, bool]:
        """Bookmark a module; returns (favorite, created). Adding twice is a no-op."""
        existing = await favorite_repository.find(user_id, module_id)
        if existing:
            return to_out(existing), False
        if not await module_repository.exists(module_id):
            raise HTTPException(status.HTTP_404_NOT_FOUND, f"Module with id {module_id} not found")
        try:
            doc = await favorite_repository.insert(user_id, module_id)
        except DuplicateKeyError:
            doc = await favorite_repository.find(user_id, module_id)
            if doc is None:
                raise
            return to_out(doc), False
        logger.info("favorite added user_id=%s module_id=%s", user_id, module_id)
        return to_out(doc), True

    @staticmethod
    async def list_favorites(user_id: str) -> List[FavoriteOut]:
        return [to_out(d) for d in await favorite_repository.list_for_user(user_id)]

    @staticmethod
    async def is_favorite(user_id: str, module_id: int) -> bool:
        return await favorite_repository.find(user_id, module_id) is not None

    @staticmethod
    async def count(user_id: str) -> int:
        return await favorite_repository.count_for_user(user_id)

    @staticmethod
    async def remove_favorite(user_id: str, module_id: int) -> bool:
        removed = await favorite_repository.delete(user_id, module_id)
        logger.info("favorite removed user_id=%s module_id=%s removed=%s", user_id, module_id, removed)
        return removed
