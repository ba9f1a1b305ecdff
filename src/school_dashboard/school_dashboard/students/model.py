from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    id: int
    name: str
    roll_number: str
    school_id: int
    grade: str
    section: str
    guardian_name: str
    guardian_phone: str
    performance_score: Optional[float] = None
