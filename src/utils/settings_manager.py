"""Per-owner notification and system settings."""

import logging
from typing import Any, Dict

from sqlalchemy.orm import Session

from config import DEFAULT_NOTIFICATION_SETTINGS, DEFAULT_SYSTEM_SETTINGS
from core.exceptions import ValidationError
from models.settings import SettingsModel
from utils.tenant_scope import scope_to_owner, utc_now_iso

logger = logging.getLogger(__name__)

SECTIONS = ("notifications", "system")


class SettingsManager:
    """Reads and upserts the single settings row of an owner."""

    def __init__(self, db: Session):
        self.db = db

    def _find(self, owner_id: str):
        query = scope_to_owner(self.db.query(SettingsModel), SettingsModel, owner_id)
        return query.first()

    def get_settings(self, owner_id: str) -> Dict[str, Any]:
        """Return the owner's settings, falling back to defaults per section."""
        model = self._find(owner_id)
        return {
            "notifications": dict(
                model.notifications
                if model and model.notifications is not None
                else DEFAULT_NOTIFICATION_SETTINGS
            ),
            "system": dict(
                model.system
                if model and model.system is not None
                else DEFAULT_SYSTEM_SETTINGS
            ),
            "updated_at": model.updated_at if model else None,
        }

    def update_section(self, owner_id: str, section: str, data: Dict[str, Any]) -> None:
        """Replace one section, creating the row on first write.

        Args:
            owner_id: Account id of the caller.
            section: ``'notifications'`` or ``'system'``.
            data: New content of the section.

        Raises:
            ValidationError: If the section is unknown.
        """
        if section not in SECTIONS:
            raise ValidationError("Invalid settings type")
        model = self._find(owner_id)
        if model is None:
            model = SettingsModel(owner_id=owner_id)
            self.db.add(model)
        setattr(model, section, dict(data))
        model.updated_at = utc_now_iso()
        self.db.commit()
        logger.info("Updated %s settings for owner %s", section, owner_id)
