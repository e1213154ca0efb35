from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Department, DepartmentDTO


class DepartmentRepository(Protocol):
    """Repository interface for Department.

    Write methods raise DuplicateNameError when the store's unique
    constraint on the name rejects the row.
    """

    def get_by_id(self, department_id: int) -> Optional[Department]:
        raise NotImplementedError

    def exists_by_name(self, name: str, *, exclude_id: Optional[int] = None) -> bool:
        """Case-insensitive name lookup, optionally ignoring one department."""

        raise NotImplementedError

    def create(self, *, name: str, created_at: datetime) -> int:
        """Insert a department and return its id."""

        raise NotImplementedError

    def update(self, *, department_id: int, name: str, updated_at: datetime) -> bool:
        raise NotImplementedError

    def delete_by_id(self, department_id: int) -> bool:
        """Delete a department; its employees go with it (ON DELETE CASCADE)."""

        raise NotImplementedError

    def count_employees(self, department_id: int) -> int:
        raise NotImplementedError

    def list_with_counts(self) -> Sequence[DepartmentDTO]:
        raise NotImplementedError

    def count_all(self) -> int:
        raise NotImplementedError
