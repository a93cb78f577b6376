from sqlalchemy import Column, Float, String
from .base import Base


class SubjectModel(Base):
    __tablename__ = "subjects"

    subject_id = Column(String, primary_key=True, index=True)
    owner_id = Column(String, index=True, nullable=False)
    name = Column(String, nullable=False)
    code = Column(String, nullable=True)
    description = Column(String, nullable=True)
    teacher = Column(String, nullable=True)
    grade = Column(String, nullable=True)
    price = Column(Float, nullable=False, default=0)
    duration = Column(String, nullable=True)
    status = Column(String, nullable=True)
    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=False)
