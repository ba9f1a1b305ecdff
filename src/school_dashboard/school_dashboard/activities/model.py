from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import ActivityStatus, ActivityType


@dataclass(frozen=True)
class Activity:
    id: int
    title: str
    description: str
    type: ActivityType
    school_id: int
    date: datetime
    status: ActivityStatus
    created_by: int
