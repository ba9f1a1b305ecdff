from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..common.schema import InsertModel
from ..core.enums import Role


class InsertUser(InsertModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    name: str = Field(min_length=1)
    email: str
    role: Role = Role.TEACHER
    school_id: Optional[int] = None


class LoginPayload(InsertModel):
    username: str
    password: str
