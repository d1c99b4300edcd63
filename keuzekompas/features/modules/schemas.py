from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ===========================
# MODULE SCHEMAS
# ===========================
class ModuleBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Introduction to Data Science"])
    shortdescription: Optional[str] = Field(None, examples=["Get started with data"])
    description: Optional[str] = None
    content: Optional[str] = None
    studycredit: int = Field(..., gt=0, examples=[15])
    location: str = Field(..., min_length=1, examples=["Breda"])
    contact_id: Optional[int] = None
    level: str = Field(..., min_length=1, examples=["NLQF5"])
    learningoutcomes: Optional[str] = None

    @field_validator("name", "location", "level")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class ModuleCreate(ModuleBase):
    id: int = Field(..., gt=0, examples=[101])


class ModuleUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    shortdescription: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None
    studycredit: Optional[int] = Field(None, gt=0)
    location: Optional[str] = Field(None, min_length=1)
    contact_id: Optional[int] = None
    level: Optional[str] = Field(None, min_length=1)
    learningoutcomes: Optional[str] = None

    @field_validator("name", "location", "level")
    @classmethod
    def _not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class ModuleOut(ModuleCreate):
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ModuleQuery(BaseModel):
    """Server-side filters for ``GET /modules``; empty lists mean no restriction."""
    q: Optional[str] = None
    studycredit: List[int] = Field(default_factory=list)
    level: List[str] = Field(default_factory=list)
    location: List[str] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not ((self.q or "").strip() or self.studycredit or self.level or self.location)


class MessageResponse(BaseModel):
    message: str
