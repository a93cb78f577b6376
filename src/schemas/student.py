from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CreateStudentRequest(BaseModel):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    grade: Optional[str] = Field(default=None, description="Name of the student's level.")
    subjects: List[str] = Field(default_factory=list)
    status: Optional[str] = None
    join_date: Optional[str] = None


class UpdateStudentRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    grade: Optional[str] = None
    subjects: Optional[List[str]] = None
    status: Optional[str] = None
    join_date: Optional[str] = None


class Student(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    student_id: str
    owner_id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    grade: Optional[str] = None
    subjects: List[str] = Field(default_factory=list)
    status: Optional[str] = None
    join_date: Optional[str] = None
    created_at: str
    updated_at: str
