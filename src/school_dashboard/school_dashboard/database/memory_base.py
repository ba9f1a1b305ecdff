from __future__ import annotations

import threading
from dataclasses import fields, replace
from typing import Any, Callable, Generic, Hashable, Mapping, Optional, TypeVar

from ..core.exceptions import ConflictError

T = TypeVar("T")

UniqueKey = Callable[[Any], Hashable]


class MemoryTable(Generic[T]):
    """Keyed map of records for one entity type plus its identity counter.

    Ids start at 1 and are never handed out twice, even after a delete.
    Each operation holds the table lock, so a single create/update/delete is
    atomic under a threaded server. ``unique`` keys passed to ``insert`` and
    ``update`` are checked under the same lock as the write.
    """

    def __init__(self, name: str):
        self.name = name
        self._rows: dict[int, T] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def get(self, entity_id: int) -> Optional[T]:
        with self._lock:
            return self._rows.get(entity_id)

    def insert(self, build: Callable[[int], T], *, unique: Optional[UniqueKey] = None) -> T:
        """Assign the next id and store the record ``build(id)`` returns.

        Raises ``ConflictError`` without consuming an id when another record
        has the same ``unique(row)`` value.
        """
        with self._lock:
            row = build(self._next_id)
            if unique is not None:
                self._ensure_unique(row, unique)
            self._rows[self._next_id] = row
            self._next_id += 1
            return row

    def update(
        self,
        entity_id: int,
        changes: Mapping[str, Any],
        *,
        unique: Optional[UniqueKey] = None,
    ) -> Optional[T]:
        with self._lock:
            current = self._rows.get(entity_id)
            if current is None:
                return None
            known = {f.name for f in fields(current)}
            unknown = set(changes) - known
            if unknown:
                raise TypeError(f"{self.name}: unknown fields {sorted(unknown)}")
            merged = replace(current, **{k: v for k, v in changes.items() if k != "id"})
            if unique is not None:
                self._ensure_unique(merged, unique, skip_id=entity_id)
            self._rows[entity_id] = merged
            return merged

    def delete(self, entity_id: int) -> bool:
        with self._lock:
            return self._rows.pop(entity_id, None) is not None

    def list_all(self) -> list[T]:
        with self._lock:
            return list(self._rows.values())

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        return [row for row in self.list_all() if predicate(row)]

    def find_first(self, predicate: Callable[[T], bool]) -> Optional[T]:
        for row in self.list_all():
            if predicate(row):
                return row
        return None

    def _ensure_unique(self, row: T, unique: UniqueKey, *, skip_id: Optional[int] = None) -> None:
        # caller holds self._lock
        value = unique(row)
        for other_id, other in self._rows.items():
            if other_id != skip_id and unique(other) == value:
                raise ConflictError(f"{self.name}: duplicate value {value!r}")
