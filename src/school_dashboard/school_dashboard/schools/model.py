from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import SchoolStatus, SchoolType


@dataclass(frozen=True)
class School:
    """Domain entity: School.

    ``principal_id`` is only ever set internally, never from a create payload.
    """

    id: int
    name: str
    code: str
    address: str
    phone: str
    type: SchoolType
    status: SchoolStatus = SchoolStatus.ACTIVE
    email: Optional[str] = None
    principal_id: Optional[int] = None
