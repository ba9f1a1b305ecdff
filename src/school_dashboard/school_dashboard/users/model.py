from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    ``password`` holds a werkzeug hash, never the plain text.
    """

    id: int
    username: str
    password: str
    name: str
    email: str
    role: Role
    school_id: Optional[int] = None
