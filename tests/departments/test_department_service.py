from __future__ import annotations

from datetime import datetime

import pytest

from src.department_employee.department_employee.core.exceptions import (
    DuplicateNameError,
    NotFoundError,
    ValidationError,
)


def test_create_trims_name_and_starts_with_zero_employees(department_service):
    dept = department_service.create("  Finance  ")

    assert dept.name == "Finance"
    assert dept.employee_count == 0
    assert department_service.get_by_id(dept.id).name == "Finance"


def test_create_same_name_different_case_is_duplicate(department_service):
    department_service.create("IT")

    with pytest.raises(DuplicateNameError) as exc:
        department_service.create("it")

    assert exc.value.name == "it"
    assert "it" in str(exc.value)


@pytest.mark.parametrize("first, second", [("Sales", "SALES"), ("Research", "rEsEaRcH"), ("Ops", "ops")])
def test_names_differing_only_in_case_collide(department_service, first, second):
    department_service.create(first)
    with pytest.raises(DuplicateNameError):
        department_service.create(second)
    assert len(department_service.list_all()) == 1


def test_unique_constraint_is_final_guard(department_service, departments_repo, monkeypatch):
    department_service.create("Legal")
    # A concurrent create can pass the pre-check; the write must still reject it.
    monkeypatch.setattr(departments_repo, "exists_by_name", lambda name, exclude_id=None: False)

    with pytest.raises(DuplicateNameError):
        department_service.create("LEGAL")


@pytest.mark.parametrize("bad_name", ["", "   ", None, "A", "x" * 101])
def test_create_rejects_invalid_names(department_service, departments_repo, bad_name):
    with pytest.raises(ValidationError) as exc:
        department_service.create(bad_name)

    assert "name" in exc.value.fields
    assert departments_repo.count_all() == 0


def test_create_accepts_boundary_lengths(department_service):
    assert department_service.create("AB").name == "AB"
    assert department_service.create("y" * 100).name == "y" * 100


def test_get_by_id_missing_raises_not_found(department_service):
    with pytest.raises(NotFoundError) as exc:
        department_service.get_by_id(42)

    assert exc.value.entity == "Department"
    assert exc.value.entity_id == 42


def test_list_is_sorted_and_counts_employees(department_service, employee_service):
    hr = department_service.create("HR")
    it = department_service.create("Engineering")
    employee_service.create("Alice", hr.id)
    employee_service.create("Bob", hr.id)

    rows = department_service.list_all()

    assert [d.name for d in rows] == ["Engineering", "HR"]
    counts = {d.id: d.employee_count for d in rows}
    assert counts == {hr.id: 2, it.id: 0}


def test_update_renames_and_touches_timestamp(department_service, monkeypatch):
    import src.department_employee.department_employee.departments.service as service_module

    monkeypatch.setattr(service_module, "now_local", lambda: datetime(2026, 1, 1, 9, 0, 0))
    dept = department_service.create("Marketing")

    monkeypatch.setattr(service_module, "now_local", lambda: datetime(2026, 1, 2, 10, 0, 0))
    updated = department_service.update(dept.id, " Growth ")

    assert updated.name == "Growth"
    assert updated.created_at == datetime(2026, 1, 1, 9, 0, 0)
    assert updated.updated_at == datetime(2026, 1, 2, 10, 0, 0)
    assert department_service.get_by_id(dept.id).updated_at == datetime(2026, 1, 2, 10, 0, 0)


def test_update_to_own_name_in_other_case_is_allowed(department_service):
    dept = department_service.create("finance")

    assert department_service.update(dept.id, "Finance").name == "Finance"


def test_update_to_other_departments_name_is_duplicate(department_service):
    department_service.create("HR")
    it = department_service.create("IT")

    with pytest.raises(DuplicateNameError):
        department_service.update(it.id, "hr")

    assert department_service.get_by_id(it.id).name == "IT"


def test_update_missing_department_raises_not_found(department_service):
    with pytest.raises(NotFoundError):
        department_service.update(7, "Anything")


def test_delete_missing_department_raises_not_found(department_service):
    with pytest.raises(NotFoundError):
        department_service.delete(99)


def test_delete_removes_department(department_service):
    dept = department_service.create("Temp")

    department_service.delete(dept.id)

    with pytest.raises(NotFoundError):
        department_service.get_by_id(dept.id)
    assert department_service.count() == 0


def test_blank_name_message_names_the_entity(department_service):
    with pytest.raises(ValidationError) as exc:
        department_service.create("   ")

    assert str(exc.value) == "Department name is required"
    assert exc.value.fields == {"name": "is required"}
