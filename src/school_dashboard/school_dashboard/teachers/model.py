from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Teacher:
    """Domain entity: Teacher (a User posted to a School)."""

    id: int
    user_id: int
    school_id: int
    qualification: str
    joining_date: datetime
    subjects: tuple[str, ...] = ()
    performance_score: Optional[float] = None
