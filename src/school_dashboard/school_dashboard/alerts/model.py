from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AlertStatus, AlertType


@dataclass(frozen=True)
class Alert:
    """Domain entity: Alert. ``created_at`` is set once at creation."""

    id: int
    title: str
    description: str
    type: AlertType
    created_at: datetime
    school_id: Optional[int] = None
    status: AlertStatus = AlertStatus.ACTIVE
