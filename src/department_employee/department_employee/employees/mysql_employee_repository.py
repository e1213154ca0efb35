from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

import mysql.connector

from ..core.constants import DEPARTMENT, ER_NO_REFERENCED_ROW_2
from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee, EmployeeDTO
from .repository import EmployeeRepository

_VIEW_SELECT = """
    SELECT e.id, e.name, e.department_id, d.name AS department_name, e.created_at, e.updated_at
    FROM employee e
    JOIN department d ON d.id = e.department_id
"""


def _to_view(row: dict) -> EmployeeDTO:
    return EmployeeDTO(
        id=int(row["id"]),
        name=row["name"],
        department_id=int(row["department_id"]),
        department_name=row["department_name"],
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, name, department_id, created_at, updated_at FROM employee WHERE id=%s",
                (int(employee_id),),
            )
            row = fetchone(cur)
            if not row:
                return None
            return Employee(
                employee_id=int(row["id"]),
                name=row["name"],
                department_id=int(row["department_id"]),
                created_at=row.get("created_at"),
                updated_at=row.get("updated_at"),
            )

    def get_view(self, employee_id: int) -> Optional[EmployeeDTO]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_VIEW_SELECT + " WHERE e.id=%s", (int(employee_id),))
            row = fetchone(cur)
            return _to_view(row) if row else None

    def list_all(self) -> Sequence[EmployeeDTO]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_VIEW_SELECT + " ORDER BY e.name, e.id")
            return [_to_view(r) for r in fetchall(cur)]

    def list_by_department(self, department_id: int) -> Sequence[EmployeeDTO]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_VIEW_SELECT + " WHERE e.department_id=%s ORDER BY e.name, e.id", (int(department_id),))
            return [_to_view(r) for r in fetchall(cur)]

    def create(self, *, name: str, department_id: int, created_at: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    "INSERT INTO employee(name, department_id, created_at, updated_at) VALUES(%s,%s,%s,%s)",
                    (name, int(department_id), created_at, created_at),
                )
            except mysql.connector.IntegrityError as e:
                if e.errno == ER_NO_REFERENCED_ROW_2:
                    raise NotFoundError(DEPARTMENT, department_id) from e
                raise
            return int(cur.lastrowid)

    def update(self, *, employee_id: int, name: str, department_id: int, updated_at: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    "UPDATE employee SET name=%s, department_id=%s, updated_at=%s WHERE id=%s",
                    (name, int(department_id), updated_at, int(employee_id)),
                )
            except mysql.connector.IntegrityError as e:
                if e.errno == ER_NO_REFERENCED_ROW_2:
                    raise NotFoundError(DEPARTMENT, department_id) from e
                raise
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM employee WHERE id=%s", (int(employee_id),))
            return fetchone(cur) is not None

    def delete_by_id(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employee WHERE id=%s", (int(employee_id),))
            return cur.rowcount > 0

    def count_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM employee")
            row = fetchone(cur)
            return int(row["total"]) if row else 0
