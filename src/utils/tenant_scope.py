"""Ownership scoping for tenant-owned tables.

Every query against a tenant-owned table goes through ``scope_to_owner``.
``TenantResourceManager`` builds on it so that list, get, update and delete
all require an owner id.
"""

import logging
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

import pytz
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session

from core.exceptions import ConflictError, NotFoundOrAccessDeniedError, ValidationError

logger = logging.getLogger(__name__)

# Columns a caller can never set directly
PROTECTED_FIELDS = {"owner_id", "created_at", "updated_at"}


def scope_to_owner(query: Query, model: Any, owner_id: str) -> Query:
    """Restrict a query to rows owned by ``owner_id``.

    Args:
        query: Query over ``model``.
        model: SQLAlchemy model class with an ``owner_id`` column.
        owner_id: Account id of the caller.

    Returns:
        The filtered query.

    Raises:
        ValueError: If ``owner_id`` is empty.
    """
    if not owner_id:
        raise ValueError("owner_id is required for tenant-scoped queries")
    return query.filter(model.owner_id == owner_id)


def utc_now_iso() -> str:
    return datetime.now(pytz.utc).isoformat()


class TenantResourceManager:
    """Scoped CRUD for one tenant-owned table.

    Subclasses set ``model``, ``id_field`` and ``resource_name`` and may
    override the ``_before_*`` hooks to add business rules.
    """

    model: Any = None
    id_field: str = ""
    resource_name: str = "Resource"
    required_fields: Tuple[str, ...] = ()

    def __init__(self, db: Session):
        self.db = db

    # --- Query helpers ---

    def _query(self, owner_id: str) -> Query:
        return scope_to_owner(self.db.query(self.model), self.model, owner_id)

    def _id_column(self):
        return getattr(self.model, self.id_field)

    def _ordering(self) -> List[Any]:
        return [self.model.created_at.desc()]

    def _writable(self, data: Dict[str, Any]) -> Dict[str, Any]:
        columns = {c.name for c in self.model.__table__.columns}
        blocked = PROTECTED_FIELDS | {self.id_field}
        return {k: v for k, v in data.items() if k in columns and k not in blocked}

    def _check_required(self, data: Dict[str, Any], creating: bool) -> None:
        for field in self.required_fields:
            if not creating and field not in data:
                continue
            value = data.get(field)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise ValidationError(f"{self.resource_name} {field} is required")

    def _check_not_null(self, data: Dict[str, Any]) -> None:
        for column in self.model.__table__.columns:
            if not column.nullable and column.name in data and data[column.name] is None:
                raise ValidationError(f"{self.resource_name} {column.name} cannot be null")

    def _commit(self) -> None:
        # Unique constraints back the name checks done in the hooks
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if "unique" not in str(e.orig).lower():
                raise
            raise ConflictError(f"{self.resource_name} name already exists") from e

    # --- Hooks ---

    def _before_create(self, owner_id: str, data: Dict[str, Any]) -> None:
        pass

    def _before_update(self, owner_id: str, record: Any, changes: Dict[str, Any]) -> None:
        pass

    def _before_delete(self, owner_id: str, record: Any) -> None:
        pass

    # --- Operations ---

    def list_for_owner(self, owner_id: str) -> List[Any]:
        return self._query(owner_id).order_by(*self._ordering()).all()

    def count_for_owner(self, owner_id: str) -> int:
        return self._query(owner_id).count()

    def find_for_owner(self, owner_id: str, record_id: str) -> Optional[Any]:
        return self._query(owner_id).filter(self._id_column() == record_id).first()

    def get_for_owner(self, owner_id: str, record_id: str) -> Any:
        """Get one record of the owner.

        Raises:
            NotFoundOrAccessDeniedError: If the record is missing or belongs
                to another owner.
        """
        record = self.find_for_owner(owner_id, record_id)
        if record is None:
            raise NotFoundOrAccessDeniedError(self.resource_name)
        return record

    def create_for_owner(self, owner_id: str, data: Dict[str, Any]) -> Any:
        """Insert a record stamped with ``owner_id``."""
        if not owner_id:
            raise ValueError("owner_id is required for tenant-scoped writes")
        values = self._writable(data)
        self._check_required(values, creating=True)
        self._check_not_null(values)
        self._before_create(owner_id, values)

        now = utc_now_iso()
        record = self.model(
            **values,
            **{self.id_field: str(uuid.uuid4())},
            owner_id=owner_id,
            created_at=now,
            updated_at=now,
        )
        self.db.add(record)
        self._commit()
        self.db.refresh(record)
        logger.info(
            "Created %s %s for owner %s",
            self.resource_name.lower(),
            getattr(record, self.id_field),
            owner_id,
        )
        return record

    def update_for_owner(
        self, owner_id: str, record_id: str, changes: Dict[str, Any]
    ) -> Any:
        """Replace the supplied fields of an owned record and bump ``updated_at``."""
        record = self.get_for_owner(owner_id, record_id)
        values = self._writable(changes)
        self._check_required(values, creating=False)
        self._check_not_null(values)
        self._before_update(owner_id, record, values)

        for key, value in values.items():
            setattr(record, key, value)
        record.updated_at = utc_now_iso()
        self._commit()
        self.db.refresh(record)
        logger.info(
            "Updated %s %s for owner %s (fields: %s)",
            self.resource_name.lower(),
            record_id,
            owner_id,
            ", ".join(sorted(values)) or "-",
        )
        return record

    def delete_for_owner(self, owner_id: str, record_id: str) -> None:
        """Delete an owned record."""
        record = self.get_for_owner(owner_id, record_id)
        self._before_delete(owner_id, record)
        self.db.delete(record)
        self.db.commit()
        logger.info(
            "Deleted %s %s for owner %s",
            self.resource_name.lower(),
            record_id,
            owner_id,
        )
