from __future__ import annotations

import logging
from typing import List

from ..common.datetime_utils import now_local
from ..common.validators import require_id, require_name
from ..core.constants import DEPARTMENT, EMPLOYEE
from ..core.exceptions import NotFoundError
from ..departments.service import DepartmentService
from .model import EmployeeDTO
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use cases for employees; department references resolve through DepartmentService."""

    def __init__(self, employees: EmployeeRepository, departments: DepartmentService):
        self._employees = employees
        self._departments = departments

    def create(self, name, department_id) -> EmployeeDTO:
        name = require_name(name, "name", "Employee name")
        department_id = require_id(department_id, "departmentId", DEPARTMENT)
        logger.info("Creating new employee: %s in department ID: %s", name, department_id)

        department = self._departments.require(department_id)

        now = now_local()
        employee_id = self._employees.create(name=name, department_id=department.department_id, created_at=now)
        logger.info("Employee created successfully with ID: %s", employee_id)

        return EmployeeDTO(
            id=employee_id,
            name=name,
            department_id=department.department_id,
            department_name=department.name,
            created_at=now,
            updated_at=now,
        )

    def list_all(self) -> List[EmployeeDTO]:
        logger.debug("Fetching all employees")
        return list(self._employees.list_all())

    def get_by_id(self, employee_id) -> EmployeeDTO:
        employee_id = require_id(employee_id, "employeeId", EMPLOYEE)
        view = self._employees.get_view(employee_id)
        if not view:
            raise NotFoundError(EMPLOYEE, employee_id)
        return view

    def list_by_department(self, department_id) -> List[EmployeeDTO]:
        department_id = require_id(department_id, "departmentId", DEPARTMENT)
        logger.debug("Fetching employees for department ID: %s", department_id)
        return list(self._employees.list_by_department(department_id))

    def update(self, employee_id, name, department_id) -> EmployeeDTO:
        employee_id = require_id(employee_id, "employeeId", EMPLOYEE)
        name = require_name(name, "name", "Employee name")
        department_id = require_id(department_id, "departmentId", DEPARTMENT)

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(EMPLOYEE, employee_id)
        logger.info("Updating employee ID: %s", employee_id)

        if employee.department_id != department_id:
            department_id = self._departments.require(department_id).department_id
            logger.info("Reassigning employee %s to department %s", employee_id, department_id)

        if not self._employees.update(
            employee_id=employee_id,
            name=name,
            department_id=department_id,
            updated_at=now_local(),
        ):
            raise NotFoundError(EMPLOYEE, employee_id)
        logger.info("Employee updated successfully: %s", employee_id)

        return self.get_by_id(employee_id)

    def delete(self, employee_id) -> None:
        employee_id = require_id(employee_id, "employeeId", EMPLOYEE)
        logger.info("Deleting employee ID: %s", employee_id)

        if not self._employees.delete_by_id(employee_id):
            raise NotFoundError(EMPLOYEE, employee_id)
        logger.info("Employee deleted successfully: %s", employee_id)

    def count(self) -> int:
        return self._employees.count_all()
