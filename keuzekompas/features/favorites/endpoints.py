from typing import List

from fastapi import APIRouter, Depends, Response, status

from keuzekompas.auth.deps import get_current_user
from keuzekompas.features.users.schemas import UserPublic
from .schemas import FavoriteCount, FavoriteOut, FavoriteRemoved, FavoriteRequest, FavoriteStatus
from .service import FavoriteService

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.post("", response_model=FavoriteOut, status_code=status.HTTP_201_CREATED)
async def add_favorite(
    payload: FavoriteRequest,
    response: Response,
    user: UserPublic = Depends(get_current_user),
):
    favorite, created = await FavoriteService.add_favorite(user.id, payload.module_id)
    if not created:
        response.status_code = status.HTTP_200_OK
    return favorite


@router.get("", response_model=List[FavoriteOut])
async def list_favorites(user: UserPublic = Depends(get_current_user)):
    return await FavoriteService.list_favorites(user.id)


@router.get("/count", response_model=FavoriteCount)
async def favorite_count(user: UserPublic = Depends(get_current_user)):
    return FavoriteCount(count=await FavoriteService.count(user.id))


@router.get("/{module_id}", response_model=FavoriteStatus)
async def is_favorite(module_id: int, user: UserPublic = Depends(get_current_user)):
    return FavoriteStatus(is_favorite=await FavoriteService.is_favorite(user.id, module_id))


@router.delete("", response_model=FavoriteRemoved)
async def remove_favorite(payload: FavoriteRequest, user: UserPublic = Depends(get_current_user)):
    removed = await FavoriteService.remove_favorite(user.id, payload.module_id)
    return FavoriteRemoved(removed=removed)
