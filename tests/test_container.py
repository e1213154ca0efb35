from __future__ import annotations

from src.department_employee.department_employee.container import build_container


def _db_config(database: str) -> dict:
    return {"host": "localhost", "port": 3306, "user": "root", "password": "", "database": database}


def test_each_container_uses_its_own_database_settings():
    first = build_container(db_config=_db_config("db_one"))
    second = build_container(db_config=_db_config("db_two"))

    assert first.conn is not second.conn
    assert first.conn.config.database == "db_one"
    assert second.conn.config.database == "db_two"
