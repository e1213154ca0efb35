from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeDTO


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Joined reads (``get_view``, ``list_all``, ``list_by_department``) return
    the department name in the same query. Writes raise NotFoundError when
    the department foreign key is rejected.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_view(self, employee_id: int) -> Optional[EmployeeDTO]:
        raise NotImplementedError

    def list_all(self) -> Sequence[EmployeeDTO]:
        raise NotImplementedError

    def list_by_department(self, department_id: int) -> Sequence[EmployeeDTO]:
        raise NotImplementedError

    def create(self, *, name: str, department_id: int, created_at: datetime) -> int:
        raise NotImplementedError

    def update(self, *, employee_id: int, name: str, department_id: int, updated_at: datetime) -> bool:
        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError

    def count_all(self) -> int:
        raise NotImplementedError
