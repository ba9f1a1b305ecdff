from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional

import pytest

from src.school_dashboard.school_dashboard.core.exceptions import ConflictError
from src.school_dashboard.school_dashboard.database.memory_base import MemoryTable


@dataclass(frozen=True)
class Row:
    id: int
    name: str
    school_id: Optional[int] = None


def _insert(table: MemoryTable, name: str, school_id: Optional[int] = None) -> Row:
    return table.insert(lambda new_id: Row(id=new_id, name=name, school_id=school_id))


def test_ids_start_at_one_and_increase():
    table = MemoryTable("rows")
    ids = [_insert(table, n).id for n in ("a", "b", "c")]
    assert ids == [1, 2, 3]


def test_ids_are_not_reused_after_delete():
    table = MemoryTable("rows")
    _insert(table, "a")
    second = _insert(table, "b")

    assert table.delete(second.id) is True
    assert table.get(second.id) is None
    assert _insert(table, "c").id == 3


def test_delete_missing_returns_false():
    table = MemoryTable("rows")
    assert table.delete(42) is False


def test_update_merges_and_keeps_id():
    table = MemoryTable("rows")
    row = _insert(table, "a", school_id=7)

    updated = table.update(row.id, {"name": "renamed", "id": 99})

    assert updated == Row(id=row.id, name="renamed", school_id=7)
    assert table.get(row.id) == updated
    assert table.get(99) is None


def test_update_missing_has_no_side_effects():
    table = MemoryTable("rows")
    _insert(table, "a")

    assert table.update(5, {"name": "x"}) is None
    assert [r.name for r in table.list_all()] == ["a"]


def test_update_rejects_unknown_fields():
    table = MemoryTable("rows")
    row = _insert(table, "a")
    with pytest.raises(TypeError):
        table.update(row.id, {"colour": "blue"})


def test_filter_returns_exact_subset_or_empty():
    table = MemoryTable("rows")
    _insert(table, "a", school_id=1)
    _insert(table, "b", school_id=2)
    _insert(table, "c", school_id=1)

    assert [r.name for r in table.filter(lambda r: r.school_id == 1)] == ["a", "c"]
    assert table.filter(lambda r: r.school_id == 3) == []


def test_unique_insert_rejects_duplicate_without_using_an_id():
    table = MemoryTable("rows")
    _insert(table, "a")

    with pytest.raises(ConflictError):
        table.insert(lambda new_id: Row(id=new_id, name="a"), unique=lambda r: r.name)

    assert table.insert(lambda new_id: Row(id=new_id, name="b"), unique=lambda r: r.name).id == 2


def test_unique_update_ignores_the_row_itself():
    table = MemoryTable("rows")
    a = _insert(table, "a", school_id=1)
    _insert(table, "b")

    assert table.update(a.id, {"school_id": 2}, unique=lambda r: r.name).school_id == 2
    with pytest.raises(ConflictError):
        table.update(a.id, {"name": "b"}, unique=lambda r: r.name)
    assert table.get(a.id).name == "a"


def test_unique_insert_is_atomic_across_threads():
    table = MemoryTable("rows")
    start = threading.Barrier(8)
    outcomes: list[str] = []

    def worker():
        start.wait()
        try:
            table.insert(lambda new_id: Row(id=new_id, name="dup"), unique=lambda r: r.name)
            outcomes.append("ok")
        except ConflictError:
            outcomes.append("conflict")

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(outcomes) == ["conflict"] * 7 + ["ok"]
    assert [r.name for r in table.list_all()] == ["dup"]
