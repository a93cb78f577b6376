"""Managers for the tenant-owned resources."""

import logging
from typing import Any, Dict, List, Optional

from core.exceptions import ConflictError, ValidationError
from models.level import LevelModel
from models.student import StudentModel
from models.subject import SubjectModel
from models.subscription import SubscriptionModel
from models.teacher import TeacherModel
from utils.tenant_scope import TenantResourceManager

logger = logging.getLogger(__name__)


class StudentManager(TenantResourceManager):
    model = StudentModel
    id_field = "student_id"
    resource_name = "Student"
    required_fields = ("name",)

    def exists_with_grade(self, owner_id: str, grade: str) -> bool:
        return (
            self._query(owner_id).filter(StudentModel.grade == grade).first()
            is not None
        )


class TeacherManager(TenantResourceManager):
    model = TeacherModel
    id_field = "teacher_id"
    resource_name = "Teacher"
    required_fields = ("name",)


class SubjectManager(TenantResourceManager):
    model = SubjectModel
    id_field = "subject_id"
    resource_name = "Subject"
    required_fields = ("name",)


class SubscriptionManager(TenantResourceManager):
    model = SubscriptionModel
    id_field = "subscription_id"
    resource_name = "Subscription"
    required_fields = ("student_name", "subject")


class LevelManager(TenantResourceManager):
    """Levels carry a per-owner unique name that students reference as grade."""

    model = LevelModel
    id_field = "level_id"
    resource_name = "Level"
    required_fields = ("name",)

    def _ordering(self) -> List[Any]:
        return [LevelModel.order.asc(), LevelModel.name.asc()]

    def _name_taken(
        self, owner_id: str, name: str, exclude_id: Optional[str] = None
    ) -> bool:
        query = self._query(owner_id).filter(LevelModel.name == name)
        if exclude_id:
            query = query.filter(LevelModel.level_id != exclude_id)
        return query.first() is not None

    def _before_create(self, owner_id: str, data: Dict[str, Any]) -> None:
        data["name"] = data["name"].strip()
        if self._name_taken(owner_id, data["name"]):
            raise ConflictError("Level name already exists")

    def _before_update(
        self, owner_id: str, record: LevelModel, changes: Dict[str, Any]
    ) -> None:
        if "name" not in changes:
            return
        changes["name"] = changes["name"].strip()
        if changes["name"] != record.name and self._name_taken(
            owner_id, changes["name"], exclude_id=record.level_id
        ):
            raise ConflictError("Level name already exists")

    def _before_delete(self, owner_id: str, record: LevelModel) -> None:
        students = StudentManager(self.db)
        if students.exists_with_grade(owner_id, record.name):
            logger.info(
                "Refused to delete level %s for owner %s: still assigned to students",
                record.level_id,
                owner_id,
            )
            raise ValidationError("Cannot delete level that is being used by students")
