from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import DBConfig, DatabaseConnection
from .departments.mysql_department_repository import MySQLDepartmentRepository
from .departments.repository import DepartmentRepository
from .departments.service import DepartmentService
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService


@dataclass(frozen=True)
class Container:
    departments_repo: DepartmentRepository
    employees_repo: EmployeeRepository

    department_service: DepartmentService
    employee_service: EmployeeService

    conn: Optional[DatabaseConnection] = None


def wire(
    departments_repo: DepartmentRepository,
    employees_repo: EmployeeRepository,
    *,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build the services over the given repositories."""
    department_service = DepartmentService(departments_repo)
    employee_service = EmployeeService(employees_repo, department_service)

    return Container(
        departments_repo=departments_repo,
        employees_repo=employees_repo,
        department_service=department_service,
        employee_service=employee_service,
        conn=conn,
    )


def build_container(*, db_config: dict) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection(config)

    return wire(MySQLDepartmentRepository(conn), MySQLEmployeeRepository(conn), conn=conn)
