from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import format_iso


@dataclass(frozen=True)
class Department:
    """Persisted department row. Employees reference it by id only."""

    department_id: int
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class DepartmentDTO:
    """Department as handed to callers, annotated with its employee count."""

    id: int
    name: str
    employee_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_record(cls, department: Department, *, employee_count: int = 0) -> "DepartmentDTO":
        return cls(
            id=department.department_id,
            name=department.name,
            employee_count=int(employee_count),
            created_at=department.created_at,
            updated_at=department.updated_at,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "employeeCount": self.employee_count,
            "createdAt": format_iso(self.created_at),
            "updatedAt": format_iso(self.updated_at),
        }
