"""Level schema definitions."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CreateLevelRequest(BaseModel):
    name: str = Field(description="Level name, unique per owner.")
    description: str = ""
    order: int = Field(default=0, description="Sort position in listings.")
    is_active: bool = True


class UpdateLevelRequest(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    order: Optional[int] = None
    is_active: Optional[bool] = None


class Level(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    level_id: str
    owner_id: str
    name: str
    description: str = ""
    order: int = 0
    is_active: bool = True
    created_at: str
    updated_at: str
