from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for access control."""

    ADMIN = "admin"
    PRINCIPAL = "principal"
    TEACHER = "teacher"


class SchoolType(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    HIGHER_SECONDARY = "higher-secondary"


class SchoolStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class AttendanceType(str, Enum):
    """Who an attendance record is about."""

    TEACHER = "teacher"
    STUDENT = "student"


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"


class ReportType(str, Enum):
    INSPECTION = "inspection"
    PERFORMANCE = "performance"
    ATTENDANCE = "attendance"


class ReportStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class AlertType(str, Enum):
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class AlertStatus(str, Enum):
    ACTIVE = "active"
    DISMISSED = "dismissed"
    RESOLVED = "resolved"


class ActivityType(str, Enum):
    INSPECTION = "inspection"
    REPORT = "report"
    EVENT = "event"
    ISSUE = "issue"


class ActivityStatus(str, Enum):
    COMPLETED = "completed"
    PENDING = "pending"
    URGENT = "urgent"


class DeletePolicy(str, Enum):
    """What happens to a school's dependants when the school is deleted."""

    ORPHAN = "orphan"
    CASCADE = "cascade"
