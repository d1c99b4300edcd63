import logging
from typing import List, Optional

from pymongo import ASCENDING

from keuzekompas.common.utils import current_timestamp
from keuzekompas.db import mongo

logger = logging.getLogger("favorites.repository")


class FavoriteRepository:
    """User-to-module bookmarks; one document per (user_id, module_id)."""

    async def find(self, user_id: str, module_id: int) -> Optional[dict]:
        db = await mongo.get_database()
        return await db[mongo.FAVORITES].find_one({"user_id": user_id, "module_id": module_id})

    async def insert(self, user_id: str, module_id: int) -> dict:
        db = await mongo.get_database()
        now = current_timestamp()
        record = {"user_id": user_id, "module_id": module_id, "created_at": now, "updated_at": now}
        result = await db[mongo.FAVORITES].insert_one(record)
        record["_id"] = result.inserted_id
        return record

    async def list_for_user(self, user_id: str) -> List[dict]:
        db = await mongo.get_database()
        cursor = db[mongo.FAVORITES].find({"user_id": user_id}).sort("created_at", ASCENDING)
        return await cursor.to_list(length=None)

    async def count_for_user(self, user_id: str) -> int:
        db = await mongo.get_database()
        return await db[mongo.FAVORITES].count_documents({"user_id": user_id})

    async def delete(self, user_id: str, module_id: int) -> bool:
        db = await mongo.get_database()
        result = await db[mongo.FAVORITES].delete_one({"user_id": user_id, "module_id": module_id})
        return result.deleted_count > 0

    async def delete_for_module(self, module_id: int) -> int:
        db = await mongo.get_database()
        result = await db[mongo.FAVORITES].delete_many({"module_id": module_id})
        return result.deleted_count

    async def delete_for_user(self, user_id: str) -> int:
        db = await mongo.get_database()
        result = await db[mongo.FAVORITES].delete_many({"user_id": user_id})
        return result.deleted_count


favorite_repository = FavoriteRepository()
