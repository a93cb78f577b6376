from sqlalchemy import JSON, Column, String
from .base import Base


class StudentModel(Base):
    __tablename__ = "students"

    student_id = Column(String, primary_key=True, index=True)
    owner_id = Column(String, index=True, nullable=False)
    name = Column(String, nullable=False)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    grade = Column(String, index=True, nullable=True)  # matches a level name
    subjects = Column(JSON, nullable=False, default=list)
    status = Column(String, nullable=True)
    join_date = Column(String, nullable=True)
    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=False)
