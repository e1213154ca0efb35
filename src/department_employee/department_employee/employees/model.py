from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import format_iso


@dataclass(frozen=True)
class Employee:
    """Persisted employee row; owned by exactly one department."""

    employee_id: int
    name: str
    department_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class EmployeeDTO:
    id: int
    name: str
    department_id: int
    department_name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "departmentId": self.department_id,
            "departmentName": self.department_name,
            "createdAt": format_iso(self.created_at),
            "updatedAt": format_iso(self.updated_at),
        }
