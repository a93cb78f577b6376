"""Per-owner settings model.

One row per account, created lazily on the first settings update.
"""

from sqlalchemy import JSON, Column, String

from .base import Base


class SettingsModel(Base):
    """Notification and system preferences of one account."""

    __tablename__ = "settings"

    owner_id = Column(String, primary_key=True)
    notifications = Column(JSON, nullable=True)
    system = Column(JSON, nullable=True)
    updated_at = Column(String, nullable=False)
