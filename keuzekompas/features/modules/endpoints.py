from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from keuzekompas.auth.deps import get_current_user
from .schemas import MessageResponse, ModuleCreate, ModuleOut, ModuleQuery, ModuleUpdate
from .service import ModuleService

router = APIRouter(prefix="/modules", tags=["modules"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[ModuleOut])
async def list_modules(
    q: Optional[str] = Query(None, description="Substring of name or descriptions"),
    studycredit: List[int] = Query(default=[]),
    level: List[str] = Query(default=[]),
    location: List[str] = Query(default=[]),
):
    """List modules, optionally narrowed by search term and facets."""
    query = ModuleQuery(q=q, studycredit=studycredit, level=level, location=location)
    return await ModuleService.list_modules(None if query.is_empty() else query)


@router.get("/search", response_model=List[ModuleOut])
async def search_modules(q: str = Query("", description="Substring of name or descriptions")):
    return await ModuleService.search(q)


@router.get("/{module_id}", response_model=ModuleOut)
async def get_module(module_id: int):
    return await ModuleService.get_module(module_id)


@router.post("", response_model=ModuleOut, status_code=status.HTTP_201_CREATED)
async def create_module(module: ModuleCreate):
    return await ModuleService.create_module(module)


@router.put("/{module_id}", response_model=ModuleOut)
async def update_module(module_id: int, module: ModuleUpdate):
    return await ModuleService.update_module(module_id, module)


@router.delete("/{module_id}", response_model=MessageResponse)
async def delete_module(module_id: int):
    await ModuleService.delete_module(module_id)
    return MessageResponse(message="Module successfully deleted")
