"""Database models.

Importing this package registers every table with ``Base.metadata``.
"""

from .base import Base
from .user import UserModel
from .student import StudentModel
from .teacher import TeacherModel
from .subject import SubjectModel
from .level import LevelModel
from .subscription import SubscriptionModel
from .settings import SettingsModel

__all__ = [
    "Base",
    "UserModel",
    "StudentModel",
    "TeacherModel",
    "SubjectModel",
    "LevelModel",
    "SubscriptionModel",
    "SettingsModel",
]
