# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Employee data access.
Encapsulates all read/write operations on the in-memory id -> Employee map.
NO business rules here — pure CRUD. Every call holds the lock, so readers
always see a consistent snapshot.
"""

import threading
from typing import Optional

from app.models.domain import Employee


class EmployeeRepository:
    """Thread-safe in-memory employee storage."""

    def __init__(self) -> None:
        self._store: dict[str, Employee] = {}
        self._lock = threading.Lock()

    # ── Read ──

    def snapshot(self) -> list[Employee]:
        """All records, copied under the lock (insertion order)."""
        with self._lock:
            return list(self._store.values())

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with self._lock:
            return self._store.get(employee_id)

    def exists(self, employee_id: str) -> bool:
        with self._lock:
            return employee_id in self._store

    def count(self) -> int:
        with self._lock:
            return len(self._store)

    # ── Write ──

    def save(self, employee: Employee) -> None:
        with self._lock:
            self._store[employee.id] = employee

    def delete(self, employee_id: str) -> Optional[Employee]:
        with self._lock:
            return self._store.pop(employee_id, None)

    # ── Bulk / internal ──

    def clear(self) -> None:
        with self._lock:
            self._store.clear()
