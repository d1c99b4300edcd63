import logging
import re
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING, ReturnDocument

from keuzekompas.common.utils import current_timestamp, strip_mongo_id
from keuzekompas.db import mongo
from .schemas import ModuleCreate, ModuleQuery

logger = logging.getLogger("modules.repository")

SEARCH_FIELDS = ("name", "shortdescription", "description")


def build_filter(query: Optional[ModuleQuery]) -> Dict[str, Any]:
    """Translate API filters into a document query (AND across dimensions)."""
    if query is None:
        return {}
    clauses: Dict[str, Any] = {}
    if query.studycredit:
        clauses["studycredit"] = {"$in": list(query.studycredit)}
    if query.level:
        clauses["level"] = {"$in": list(query.level)}
    if query.location:
        clauses["location"] = {"$in": list(query.location)}
    term = (query.q or "").strip()
    if term:
        regex = {"$regex": re.escape(term), "$options": "i"}
        clauses["$or"] = [{field: regex} for field in SEARCH_FIELDS]
    return clauses


class ModuleRepository:

    async def list_modules(self, query: Optional[ModuleQuery] = None) -> List[dict]:
        db = await mongo.get_database()
        cursor = db[mongo.MODULES].find(build_filter(query)).sort("id", ASCENDING)
        rows = await cursor.to_list(length=None)
        return [strip_mongo_id(r) for r in rows]

    async def get_module(self, module_id: int) -> Optional[dict]:
        db = await mongo.get_database()
        return strip_mongo_id(await db[mongo.MODULES].find_one({"id": module_id}))

    async def exists(self, module_id: int) -> bool:
        db = await mongo.get_database()
        return await db[mongo.MODULES].count_documents({"id": module_id}, limit=1) > 0

    async def create_module(self, module: ModuleCreate) -> dict:
        db = await mongo.get_database()
        now = current_timestamp()
        data = {**module.model_dump(), "created_at": now, "updated_at": now}
        await db[mongo.MODULES].insert_one(data)
        return strip_mongo_id(data)

    async def update_module(self, module_id: int, fields: Dict[str, Any]) -> Optional[dict]:
        db = await mongo.get_database()
        row = await db[mongo.MODULES].find_one_and_update(
            {"id": module_id},
            {"$set": {**fields, "updated_at": current_timestamp()}},
            return_document=ReturnDocument.AFTER,
        )
        return strip_mongo_id(row)

    async def upsert_module(self, module: ModuleCreate) -> bool:
        """Insert or replace by public id; returns True when a new document was created."""
        db = await mongo.get_database()
        now = current_timestamp()
        result = await db[mongo.MODULES].update_one(
            {"id": module.id},
            {"$set": {**module.model_dump(), "updated_at": now}, "$setOnInsert": {"created_at": now}},
            upsert=True,
        )
        return result.upserted_id is not None

    async def delete_module(self, module_id: int) -> bool:
        db = await mongo.get_database()
        result = await db[mongo.MODULES].delete_one({"id": module_id})
        return result.deleted_count > 0


module_repository = ModuleRepository()
