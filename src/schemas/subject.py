from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CreateSubjectRequest(BaseModel):
    name: str
    code: Optional[str] = None
    description: Optional[str] = None
    teacher: Optional[str] = None
    grade: Optional[str] = None
    price: float = Field(default=0, ge=0)
    duration: Optional[str] = None
    status: Optional[str] = None


class UpdateSubjectRequest(BaseModel):
    name: Optional[str] = None
    code: Optional[str] = None
    description: Optional[str] = None
    teacher: Optional[str] = None
    grade: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    duration: Optional[str] = None
    status: Optional[str] = None


class Subject(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    subject_id: str
    owner_id: str
    name: str
    code: Optional[str] = None
    description: Optional[str] = None
    teacher: Optional[str] = None
    grade: Optional[str] = None
    price: float = 0
    duration: Optional[str] = None
    status: Optional[str] = None
    created_at: str
    updated_at: str
