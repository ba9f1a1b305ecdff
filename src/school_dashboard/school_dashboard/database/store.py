from __future__ import annotations

from dataclasses import dataclass, field

from .memory_base import MemoryTable


@dataclass
class MemoryStore:
    """All entity tables of one running application.

    Built explicitly and handed to the container, so each app (and each test)
    gets its own isolated state.
    """

    users: MemoryTable = field(default_factory=lambda: MemoryTable("users"))
    schools: MemoryTable = field(default_factory=lambda: MemoryTable("schools"))
    teachers: MemoryTable = field(default_factory=lambda: MemoryTable("teachers"))
    students: MemoryTable = field(default_factory=lambda: MemoryTable("students"))
    attendance: MemoryTable = field(default_factory=lambda: MemoryTable("attendance"))
    reports: MemoryTable = field(default_factory=lambda: MemoryTable("reports"))
    alerts: MemoryTable = field(default_factory=lambda: MemoryTable("alerts"))
    activities: MemoryTable = field(default_factory=lambda: MemoryTable("activities"))
