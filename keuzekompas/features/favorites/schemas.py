from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class FavoriteRequest(BaseModel):
    module_id: int = Field(..., gt=0)


class FavoriteOut(BaseModel):
    id: str
    user_id: str
    module_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class FavoriteStatus(BaseModel):
    is_favorite: bool


class FavoriteCount(BaseModel):
    count: int


class FavoriteRemoved(BaseModel):
    message: str = "Favorite removed successfully"
    removed: bool


def to_out(doc: dict) -> FavoriteOut:
    return FavoriteOut(
        id=str(doc["_id"]),
        user_id=doc["user_id"],
        module_id=doc["module_id"],
        created_at=doc.get("created_at"),
        updated_at=doc.get("updated_at"),
    )
