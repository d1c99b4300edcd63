import logging
from typing import List, Optional

from pymongo import ReturnDocument

from keuzekompas.common.utils import current_timestamp, parse_object_id
from keuzekompas.db import mongo

logger = logging.getLogger("users.repository")


class UserRepository:
    """Document-store repository for users."""

    async def create_user(self, name: str, email: str, password_hash: str, role: str = "user") -> dict:
        db = await mongo.get_database()
        now = current_timestamp()
        record = {
            "name": name,
            "email": email.strip().lower(),
            "password": password_hash,
            "role": role,
            "created_at": now,
            "updated_at": now,
        }
        result = await db[mongo.USERS].insert_one(record)
        record["_id"] = result.inserted_id
        logger.info("user created id=%s", result.inserted_id)
        return record

    async def get_user_by_id(self, user_id: str) -> Optional[dict]:
        oid = parse_object_id(user_id)
        if oid is None:
            return None
        db = await mongo.get_database()
        return await db[mongo.USERS].find_one({"_id": oid})

    async def get_user_by_email(self, email: str) -> Optional[dict]:
        db = await mongo.get_database()
        return await db[mongo.USERS].find_one({"email": email.strip().lower()})

    async def list_users(self) -> List[dict]:
        db = await mongo.get_database()
        cursor = db[mongo.USERS].find({}).sort("created_at", -1)
        return await cursor.to_list(length=None)

    async def set_role(self, email: str, role: str) -> Optional[dict]:
        db = await mongo.get_database()
        return await db[mongo.USERS].find_one_and_update(
            {"email": email.strip().lower()},
            {"$set": {"role": role, "updated_at": current_timestamp()}},
            return_document=ReturnDocument.AFTER,
        )

    async def delete_user(self, user_id: str) -> bool:
        oid = parse_object_id(user_id)
        if oid is None:
            return False
        db = await mongo.get_database()
        result = await db[mongo.USERS].delete_one({"_id": oid})
        return result.deleted_count > 0


user_repository = UserRepository()
