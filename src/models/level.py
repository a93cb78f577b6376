"""Level (grade) database model.

Levels are referenced by name from ``StudentModel.grade``; there is no
foreign key, the delete guard lives in ``LevelManager``.
"""

from sqlalchemy import Boolean, Column, Integer, String, UniqueConstraint
from .base import Base


class LevelModel(Base):
    __tablename__ = "levels"
    __table_args__ = (
        UniqueConstraint("owner_id", "name", name="uq_levels_owner_name"),
    )

    level_id = Column(String, primary_key=True, index=True)
    owner_id = Column(String, index=True, nullable=False)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False, default="")
    order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=False)
