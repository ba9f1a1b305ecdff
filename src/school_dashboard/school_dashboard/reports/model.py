from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ..core.enums import ReportStatus, ReportType


@dataclass(frozen=True)
class Report:
    """Domain entity: Report. ``data`` is an opaque JSON payload."""

    id: int
    title: str
    type: ReportType
    school_id: int
    date: datetime
    data: Any
    generated_by: int
    status: ReportStatus = ReportStatus.DRAFT
