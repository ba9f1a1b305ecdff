from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import Field

from ..common.schema import InsertModel, PatchModel
from ..core.enums import SchoolStatus, SchoolType


class InsertSchool(InsertModel):
    name: str = Field(min_length=1)
    code: str = Field(min_length=1)
    address: str
    phone: str
    email: Optional[str] = None
    type: SchoolType
    status: SchoolStatus = SchoolStatus.ACTIVE


class SchoolPatch(PatchModel):
    NULLABLE: ClassVar[frozenset[str]] = frozenset({"email"})

    name: Optional[str] = Field(default=None, min_length=1)
    code: Optional[str] = Field(default=None, min_length=1)
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    type: Optional[SchoolType] = None
    status: Optional[SchoolStatus] = None
