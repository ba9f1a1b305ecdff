from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import Field

from ..common.schema import InsertModel, PatchModel


class InsertStudent(InsertModel):
    name: str = Field(min_length=1)
    roll_number: str = Field(min_length=1)
    school_id: int
    grade: str
    section: str
    guardian_name: str
    guardian_phone: str


class StudentPatch(PatchModel):
    NULLABLE: ClassVar[frozenset[str]] = frozenset({"performance_score"})

    name: Optional[str] = Field(default=None, min_length=1)
    roll_number: Optional[str] = Field(default=None, min_length=1)
    school_id: Optional[int] = None
    grade: Optional[str] = None
    section: Optional[str] = None
    guardian_name: Optional[str] = None
    guardian_phone: Optional[str] = None
    performance_score: Optional[float] = None
