import logging
from typing import List, Optional

from fastapi import HTTPException, status
from pymongo.errors import DuplicateKeyError

from keuzekompas.features.favorites.repository import favorite_repository
from .repository import module_repository
from .schemas import ModuleCreate, ModuleOut, ModuleQuery, ModuleUpdate

logger = logging.getLogger("modules.service")

# null in a partial update means "leave as is" for these
REQUIRED_FIELDS = frozenset({"name", "studycredit", "location", "level"})


class ModuleService:

    @staticmethod
    async def list_modules(query: Optional[ModuleQuery] = None) -> List[ModuleOut]:
        rows = await module_repository.list_modules(query)
        return [ModuleOut(**m) for m in rows]

    @staticmethod
    async def search(term: str) -> List[ModuleOut]:
        return await ModuleService.list_modules(ModuleQuery(q=term))

    @staticmethod
    async def get_module(module_id: int) -> ModuleOut:
        row = await module_repository.get_module(module_id)
        if not row:
            raise HTTPException(status.HTTP_404_NOT_FOUND, f"Module with id {module_id} not found")
        return ModuleOut(**row)

    @staticmethod
    async def create_module(module: ModuleCreate) -> ModuleOut:
        if await module_repository.exists(module.id):
            raise HTTPException(status.HTTP_409_CONFLICT, f"Module with id {module.id} already exists")
        try:
            row = await module_repository.create_module(module)
        except DuplicateKeyError:
            # lost a race against a concurrent create with the same id
            raise HTTPException(status.HTTP_409_CONFLICT, f"Module with id {module.id} already exists")
        logger.info("module created id=%s", module.id)
        return ModuleOut(**row)

    @staticmethod
    async def update_module(module_id: int, changes: ModuleUpdate) -> ModuleOut:
        fields = {
            k: v
            for k, v in changes.model_dump(exclude_unset=True).items()
            if v is not None or k not in REQUIRED_FIELDS
        }
        if not fields:
            return await ModuleService.get_module(module_id)
        row = await module_repository.update_module(module_id, fields)
        if not row:
            raise HTTPException(status.HTTP_404_NOT_FOUND, f"Module with id {module_id} not found")
        logger.info("module updated id=%s fields=%s", module_id, sorted(fields))
        return ModuleOut(**row)

    @staticmethod
    async def delete_module(module_id: int) -> None:
        deleted = await module_repository.delete_module(module_id)
        if not deleted:
            raise HTTPException(status.HTTP_404_NOT_FOUND, f"Module with id {module_id} not found")
        removed = await favorite_repository.delete_for_module(module_id)
        logger.info("module deleted id=%s favorites_removed=%d", module_id, removed)
