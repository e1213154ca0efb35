from __future__ import annotations

from datetime import datetime
from typing import Optional

import pytest

from src.department_employee.department_employee.container import wire
from src.department_employee.department_employee.core.constants import DEPARTMENT
from src.department_employee.department_employee.core.exceptions import DuplicateNameError, NotFoundError
from src.department_employee.department_employee.departments.model import Department, DepartmentDTO
from src.department_employee.department_employee.employees.model import Employee, EmployeeDTO


class InMemoryStore:
    """Both tables, with the unique name index and the cascading foreign key emulated."""

    def __init__(self):
        self.departments: dict[int, Department] = {}
        self.employees: dict[int, Employee] = {}
        self._next_department_id = 1
        self._next_employee_id = 1

    def next_department_id(self) -> int:
        value = self._next_department_id
        self._next_department_id += 1
        return value

    def next_employee_id(self) -> int:
        value = self._next_employee_id
        self._next_employee_id += 1
        return value


class InMemoryDepartments:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def get_by_id(self, department_id: int) -> Optional[Department]:
        return self._store.departments.get(int(department_id))

    def exists_by_name(self, name: str, *, exclude_id: Optional[int] = None) -> bool:
        return any(
            d.name.lower() == name.lower() and d.department_id != exclude_id
            for d in self._store.departments.values()
        )

    def create(self, *, name: str, created_at: datetime) -> int:
        # Unique index on department.name (case-insensitive collation).
        if any(d.name.lower() == name.lower() for d in self._store.departments.values()):
            raise DuplicateNameError(name)
        department_id = self._store.next_department_id()
        self._store.departments[department_id] = Department(department_id, name, created_at, created_at)
        return department_id

    def update(self, *, department_id: int, name: str, updated_at: datetime) -> bool:
        current = self._store.departments.get(int(department_id))
        if not current:
            return False
        if any(
            d.name.lower() == name.lower() and d.department_id != current.department_id
            for d in self._store.departments.values()
        ):
            raise DuplicateNameError(name)
        self._store.departments[current.department_id] = Department(
            current.department_id, name, current.created_at, updated_at
        )
        return True

    def delete_by_id(self, department_id: int) -> bool:
        if self._store.departments.pop(int(department_id), None) is None:
            return False
        # ON DELETE CASCADE
        for employee_id in [e.employee_id for e in self._store.employees.values() if e.department_id == department_id]:
            del self._store.employees[employee_id]
        return True

    def count_employees(self, department_id: int) -> int:
        return sum(1 for e in self._store.employees.values() if e.department_id == department_id)

    def list_with_counts(self):
        return [
            DepartmentDTO.from_record(d, employee_count=self.count_employees(d.department_id))
            for d in sorted(self._store.departments.values(), key=lambda d: d.name)
        ]

    def count_all(self) -> int:
        return len(self._store.departments)


class InMemoryEmployees:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def _view(self, e: Employee) -> EmployeeDTO:
        department = self._store.departments[e.department_id]
        return EmployeeDTO(e.employee_id, e.name, e.department_id, department.name, e.created_at, e.updated_at)

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._store.employees.get(int(employee_id))

    def get_view(self, employee_id: int) -> Optional[EmployeeDTO]:
        e = self._store.employees.get(int(employee_id))
        return self._view(e) if e else None

    def list_all(self):
        items = sorted(self._store.employees.values(), key=lambda e: (e.name, e.employee_id))
        return [self._view(e) for e in items]

    def list_by_department(self, department_id: int):
        return [v for v in self.list_all() if v.department_id == department_id]

    def create(self, *, name: str, department_id: int, created_at: datetime) -> int:
        if department_id not in self._store.departments:
            raise NotFoundError(DEPARTMENT, department_id)
        employee_id = self._store.next_employee_id()
        self._store.employees[employee_id] = Employee(employee_id, name, department_id, created_at, created_at)
        return employee_id

    def update(self, *, employee_id: int, name: str, department_id: int, updated_at: datetime) -> bool:
        current = self._store.employees.get(int(employee_id))
        if not current:
            return False
        if department_id not in self._store.departments:
            raise NotFoundError(DEPARTMENT, department_id)
        self._store.employees[current.employee_id] = Employee(
            current.employee_id, name, department_id, current.created_at, updated_at
        )
        return True

    def delete_by_id(self, employee_id: int) -> bool:
        return self._store.employees.pop(int(employee_id), None) is not None

    def count_all(self) -> int:
        return len(self._store.employees)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def departments_repo(store) -> InMemoryDepartments:
    return InMemoryDepartments(store)


@pytest.fixture
def employees_repo(store) -> InMemoryEmployees:
    return InMemoryEmployees(store)


@pytest.fixture
def container(departments_repo, employees_repo):
    return wire(departments_repo, employees_repo)


@pytest.fixture
def department_service(container):
    return container.department_service


@pytest.fixture
def employee_service(container):
    return container.employee_service


@pytest.fixture
def app(monkeypatch, container):
    from src.department_employee.department_employee.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()
