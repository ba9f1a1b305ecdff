from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class InsertModel(BaseModel):
    """Base for create payloads.

    Keys are accepted in camelCase (wire format) or snake_case. Unknown keys,
    including server-owned ones like ``id``, are dropped.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class PatchModel(BaseModel):
    """Base for partial-update payloads.

    Every field is optional, but an explicit ``null`` is only accepted for the
    names listed in ``NULLABLE``. Unknown keys are rejected so that ids and
    server-owned fields cannot be overwritten through an update.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    NULLABLE: ClassVar[frozenset[str]] = frozenset()

    @field_validator("*")
    @classmethod
    def reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name not in cls.NULLABLE:
            raise ValueError("Field cannot be null")
        return value

    def changes(self) -> dict[str, Any]:
        """Only the fields the client actually sent."""
        return {name: getattr(self, name) for name in self.model_fields_set}
