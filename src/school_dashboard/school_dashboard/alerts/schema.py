from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import Field

from ..common.schema import InsertModel, PatchModel
from ..core.enums import AlertStatus, AlertType


class InsertAlert(InsertModel):
    title: str = Field(min_length=1)
    description: str
    type: AlertType
    school_id: Optional[int] = None
    status: AlertStatus = AlertStatus.ACTIVE


class AlertPatch(PatchModel):
    NULLABLE: ClassVar[frozenset[str]] = frozenset({"school_id"})

    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    type: Optional[AlertType] = None
    school_id: Optional[int] = None
    status: Optional[AlertStatus] = None
