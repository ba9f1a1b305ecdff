from __future__ import annotations

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from ..common.schema import InsertModel, PatchModel


class InsertTeacher(InsertModel):
    user_id: int
    school_id: int
    subjects: list[str] = Field(default_factory=list)
    qualification: str
    joining_date: datetime


class TeacherPatch(PatchModel):
    NULLABLE: ClassVar[frozenset[str]] = frozenset({"performance_score"})

    school_id: Optional[int] = None
    subjects: Optional[list[str]] = None
    qualification: Optional[str] = None
    joining_date: Optional[datetime] = None
    performance_score: Optional[float] = None
