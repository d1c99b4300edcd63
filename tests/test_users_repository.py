import pytest
from pymongo.errors import DuplicateKeyError

from keuzekompas.db import mongo
from keuzekompas.features.users.repository import user_repository

pytestmark = pytest.mark.anyio("asyncio")


async def test_create_user_normalizes_email(fake_db):
    doc = await user_repository.create_user("Dana", "  Dana@Example.COM ", "hash")
    assert doc["email"] == "dana@example.com"
    assert doc["role"] == "user"
    found = await user_repository.get_user_by_email("DANA@example.com")
    assert found["_id"] == doc["_id"]


async def test_set_role(fake_db):
    await user_repository.create_user("Dana", "dana@example.com", "hash")
    updated = await user_repository.set_role("dana@example.com", "admin")
    assert updated["role"] == "admin"
    assert fake_db[mongo.USERS].docs[0]["role"] == "admin"
    assert await user_repository.set_role("ghost@example.com", "admin") is None


async def test_ensure_indexes_enforces_unique_email(fake_db):
    await mongo.ensure_indexes()
    assert fake_db[mongo.USERS].indexes["uniq_user_email"]["unique"] is True
    await user_repository.create_user("Dana", "dana@example.com", "hash")
    with pytest.raises(DuplicateKeyError):
        await user_repository.create_user("Dana 2", "dana@example.com", "hash")


async def test_lookup_with_malformed_id_returns_none(fake_db):
    assert await user_repository.get_user_by_id("xyz") is None
    assert await user_repository.delete_user("xyz") is False
