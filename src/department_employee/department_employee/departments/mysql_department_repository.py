from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

import mysql.connector

from ..core.constants import ER_DUP_ENTRY
from ..core.exceptions import DuplicateNameError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Department, DepartmentDTO
from .repository import DepartmentRepository


def _to_department(row: dict) -> Department:
    return Department(
        department_id=int(row["id"]),
        name=row["name"],
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class MySQLDepartmentRepository(DepartmentRepository):
    """Department queries. Name comparisons rely on the case-insensitive column collation."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, department_id: int) -> Optional[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, name, created_at, updated_at FROM department WHERE id=%s",
                (int(department_id),),
            )
            row = fetchone(cur)
            return _to_department(row) if row else None

    def exists_by_name(self, name: str, *, exclude_id: Optional[int] = None) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._name_taken(cur, name, exclude_id)

    def create(self, *, name: str, created_at: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            if self._name_taken(cur, name, None):
                raise DuplicateNameError(name)
            try:
                cur.execute(
                    "INSERT INTO department(name, created_at, updated_at) VALUES(%s,%s,%s)",
                    (name, created_at, created_at),
                )
            except mysql.connector.IntegrityError as e:
                if e.errno == ER_DUP_ENTRY:
                    raise DuplicateNameError(name) from e
                raise
            return int(cur.lastrowid)

    def update(self, *, department_id: int, name: str, updated_at: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            if self._name_taken(cur, name, department_id):
                raise DuplicateNameError(name)
            try:
                cur.execute(
                    "UPDATE department SET name=%s, updated_at=%s WHERE id=%s",
                    (name, updated_at, int(department_id)),
                )
            except mysql.connector.IntegrityError as e:
                if e.errno == ER_DUP_ENTRY:
                    raise DuplicateNameError(name) from e
                raise
            # rowcount is 0 when the values are unchanged, so re-check existence.
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM department WHERE id=%s", (int(department_id),))
            return fetchone(cur) is not None

    def delete_by_id(self, department_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM department WHERE id=%s", (int(department_id),))
            return cur.rowcount > 0

    def count_employees(self, department_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM employee WHERE department_id=%s", (int(department_id),))
            row = fetchone(cur)
            return int(row["total"]) if row else 0

    def list_with_counts(self) -> Sequence[DepartmentDTO]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT d.id, d.name, d.created_at, d.updated_at, COUNT(e.id) AS employee_count
                FROM department d
                LEFT JOIN employee e ON e.department_id = d.id
                GROUP BY d.id, d.name, d.created_at, d.updated_at
                ORDER BY d.name
                """
            )
            return [
                DepartmentDTO.from_record(_to_department(r), employee_count=int(r["employee_count"]))
                for r in fetchall(cur)
            ]

    def count_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM department")
            row = fetchone(cur)
            return int(row["total"]) if row else 0

    @staticmethod
    def _name_taken(cur, name: str, exclude_id: Optional[int]) -> bool:
        if exclude_id is None:
            cur.execute("SELECT 1 AS found FROM department WHERE name=%s LIMIT 1", (name,))
        else:
            cur.execute(
                "SELECT 1 AS found FROM department WHERE name=%s AND id<>%s LIMIT 1",
                (name, int(exclude_id)),
            )
        return fetchone(cur) is not None
