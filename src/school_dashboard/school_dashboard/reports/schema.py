from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from ..common.schema import InsertModel, PatchModel
from ..core.enums import ReportStatus, ReportType


class InsertReport(InsertModel):
    title: str = Field(min_length=1)
    type: ReportType
    school_id: int
    date: datetime
    status: ReportStatus = ReportStatus.DRAFT
    data: Any
    generated_by: int


class ReportPatch(PatchModel):
    title: Optional[str] = Field(default=None, min_length=1)
    type: Optional[ReportType] = None
    school_id: Optional[int] = None
    date: Optional[datetime] = None
    status: Optional[ReportStatus] = None
    data: Optional[Any] = None
