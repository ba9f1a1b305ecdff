from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from ..common.schema import InsertModel, PatchModel
from ..core.enums import ActivityStatus, ActivityType


class InsertActivity(InsertModel):
    title: str = Field(min_length=1)
    description: str
    type: ActivityType
    school_id: int
    date: datetime
    status: ActivityStatus
    created_by: int


class ActivityPatch(PatchModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    type: Optional[ActivityType] = None
    school_id: Optional[int] = None
    date: Optional[datetime] = None
    status: Optional[ActivityStatus] = None
