from __future__ import annotations

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Iterable

from pydantic.alias_generators import to_camel


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    return value


def to_json(entity: Any, *, exclude: Iterable[str] = ()) -> dict[str, Any]:
    """Entity dataclass -> JSON-ready dict with camelCase keys."""
    if not is_dataclass(entity):
        raise TypeError(f"Expected a dataclass instance, got {type(entity)!r}")
    skip = set(exclude)
    return {
        to_camel(f.name): _plain(getattr(entity, f.name))
        for f in fields(entity)
        if f.name not in skip
    }


def to_json_list(entities: Iterable[Any], *, exclude: Iterable[str] = ()) -> list[dict[str, Any]]:
    return [to_json(e, exclude=exclude) for e in entities]
