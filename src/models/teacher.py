from sqlalchemy import Column, String
from .base import Base


class TeacherModel(Base):
    __tablename__ = "teachers"

    teacher_id = Column(String, primary_key=True, index=True)
    owner_id = Column(String, index=True, nullable=False)
    name = Column(String, nullable=False)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    subject = Column(String, nullable=True)
    experience = Column(String, nullable=True)
    status = Column(String, nullable=True)
    join_date = Column(String, nullable=True)
    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=False)
