from __future__ import annotations

import logging
from typing import List

from ..common.datetime_utils import now_local
from ..common.validators import require_id, require_name
from ..core.constants import DEPARTMENT
from ..core.exceptions import DuplicateNameError, NotFoundError
from .model import Department, DepartmentDTO
from .repository import DepartmentRepository

logger = logging.getLogger(__name__)


class DepartmentService:
    """Use cases for the Department master records.

    Name uniqueness is checked here first; the repository's write is the
    final guard and raises DuplicateNameError on a constraint violation.
    """

    def __init__(self, departments: DepartmentRepository):
        self._departments = departments

    def create(self, name) -> DepartmentDTO:
        name = require_name(name, "name", "Department name")
        logger.info("Creating new department: %s", name)

        if self._departments.exists_by_name(name):
            logger.warning("Department already exists: %s", name)
            raise DuplicateNameError(name)

        now = now_local()
        department_id = self._departments.create(name=name, created_at=now)
        logger.info("Department created successfully with ID: %s", department_id)

        return DepartmentDTO(id=department_id, name=name, employee_count=0, created_at=now, updated_at=now)

    def list_all(self) -> List[DepartmentDTO]:
        logger.debug("Fetching all departments")
        return list(self._departments.list_with_counts())

    def get_by_id(self, department_id) -> DepartmentDTO:
        department = self.require(department_id)
        return DepartmentDTO.from_record(
            department,
            employee_count=self._departments.count_employees(department.department_id),
        )

    def require(self, department_id) -> Department:
        """Persisted department for ``department_id`` or NotFoundError."""
        department_id = require_id(department_id, "departmentId", DEPARTMENT)
        department = self._departments.get_by_id(department_id)
        if not department:
            raise NotFoundError(DEPARTMENT, department_id)
        return department

    def update(self, department_id, name) -> DepartmentDTO:
        name = require_name(name, "name", "Department name")
        existing = self.require(department_id)
        logger.info("Updating department ID: %s", existing.department_id)

        if self._departments.exists_by_name(name, exclude_id=existing.department_id):
            logger.warning("Department name already taken: %s", name)
            raise DuplicateNameError(name)

        now = now_local()
        if not self._departments.update(department_id=existing.department_id, name=name, updated_at=now):
            raise NotFoundError(DEPARTMENT, existing.department_id)
        logger.info("Department updated successfully: %s", existing.department_id)

        return DepartmentDTO(
            id=existing.department_id,
            name=name,
            employee_count=self._departments.count_employees(existing.department_id),
            created_at=existing.created_at,
            updated_at=now,
        )

    def delete(self, department_id) -> None:
        department_id = require_id(department_id, "departmentId", DEPARTMENT)
        logger.info("Deleting department ID: %s", department_id)

        if not self._departments.delete_by_id(department_id):
            raise NotFoundError(DEPARTMENT, department_id)
        logger.info("Department deleted successfully: %s", department_id)

    def count(self) -> int:
        return self._departments.count_all()
