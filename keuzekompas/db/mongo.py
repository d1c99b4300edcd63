"""Async MongoDB access (single entry point).

Import using: ``from keuzekompas.db import mongo`` and call
``mongo.get_database()``. Every path to the store goes through
``get_raw_database()``, so tests can swap the store in one place.
"""
from __future__ import annotations

import asyncio
import logging
import time
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from keuzekompas.core.config import get_settings

logger = logging.getLogger("db.mongo")

MODULES = "modules"
USERS = "users"
FAVORITES = "favorites"

_client: Optional[AsyncIOMotorClient] = None
_lock = asyncio.Lock()
_indexes_ready = False
_index_lock = asyncio.Lock()


async def get_client() -> AsyncIOMotorClient:
    """Return a cached client (lazy-created)."""
    global _client
    if _client is not None:
        return _client
    async with _lock:
        if _client is None:
            settings = get_settings()
            _client = AsyncIOMotorClient(
                settings.mongo_uri,
                serverSelectionTimeoutMS=settings.mongo_timeout_ms,
                tz_aware=True,
            )
    return _client


async def get_raw_database() -> AsyncIOMotorDatabase:
    """Database handle without the index bootstrap."""
    client = await get_client()
    return client[get_settings().mongo_db]


async def get_database() -> AsyncIOMotorDatabase:
    """Return the configured database.

    Until the uniqueness indexes exist (startup may have run while the server
    was unreachable) each call tries to create them once more.
    """
    db = await get_raw_database()
    if not _indexes_ready:
        async with _index_lock:
            if not _indexes_ready:
                try:
                    await ensure_indexes(db)
                except PyMongoError:
                    logger.warning("Indexes still missing; will retry on next use", exc_info=True)
    return db


async def ensure_indexes(db=None) -> None:
    """Create the uniqueness constraints the catalog relies on (idempotent)."""
    global _indexes_ready
    if db is None:
        db = await get_raw_database()
    await db[MODULES].create_index([("id", ASCENDING)], unique=True, name="uniq_module_id")
    await db[USERS].create_index([("email", ASCENDING)], unique=True, name="uniq_user_email")
    await db[FAVORITES].create_index(
        [("user_id", ASCENDING), ("module_id", ASCENDING)],
        unique=True,
        name="uniq_user_module",
    )
    await db[FAVORITES].create_index([("user_id", ASCENDING)], name="favorites_by_user")
    _indexes_ready = True
    logger.info("Indexes ensured on %s", getattr(db, "name", "?"))


async def ping() -> float:
    """Round-trip the server; returns latency in ms."""
    db = await get_database()
    t0 = time.perf_counter()
    await db.command("ping")
    return round((time.perf_counter() - t0) * 1000, 2)


def close_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None


__all__ = [
    "MODULES",
    "USERS",
    "FAVORITES",
    "get_client",
    "get_raw_database",
    "get_database",
    "ensure_indexes",
    "ping",
    "close_client",
]
