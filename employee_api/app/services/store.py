"""
In-memory record store for employees.

``EmployeeStore`` keeps an ordered list of employee records and the
next auto-generated id.  Nothing is persisted; every application
instance owns its own store, which is handed to the service layer
through a FastAPI dependency.  Access is single-threaded, so no
locking is done here.
"""

from typing import List

from ..schemas.employee import EmployeeRead


class EmployeeStore:
    """Ordered employee records plus the auto-id counter."""

    def __init__(self) -> None:
        self._employees: List[EmployeeRead] = []
        self._next_id = 1

    def list(self) -> List[EmployeeRead]:
        """Return the live list of records in insertion order."""
        return self._employees

    def replace_all(self, records: List[EmployeeRead]) -> None:
        self._employees = records

    def next_id(self) -> int:
        return self._next_id

    def set_next_id(self, value: int) -> None:
        self._next_id = value

    def reset(self) -> None:
        """Drop all records and restart the counter at 1."""
        self._employees = []
        self._next_id = 1
