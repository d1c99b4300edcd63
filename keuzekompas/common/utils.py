from typing import Any, Dict, Optional
from datetime import datetime, timezone

from bson import ObjectId
from bson.errors import InvalidId


def current_timestamp() -> datetime:
    """Get current UTC timestamp"""
    return datetime.now(timezone.utc)


def parse_object_id(value: str) -> Optional[ObjectId]:
    """Return an ObjectId, or None when the string is not one."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def strip_mongo_id(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Drop the internal ``_id`` from a stored document."""
    if doc is None:
        return None
    return {k: v for k, v in doc.items() if k != "_id"}
