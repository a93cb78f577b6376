from typing import Optional

from pydantic import BaseModel, ConfigDict


class CreateTeacherRequest(BaseModel):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    subject: Optional[str] = None
    experience: Optional[str] = None
    status: Optional[str] = None
    join_date: Optional[str] = None


class UpdateTeacherRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    subject: Optional[str] = None
    experience: Optional[str] = None
    status: Optional[str] = None
    join_date: Optional[str] = None


class Teacher(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    teacher_id: str
    owner_id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    subject: Optional[str] = None
    experience: Optional[str] = None
    status: Optional[str] = None
    join_date: Optional[str] = None
    created_at: str
    updated_at: str
