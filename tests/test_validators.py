from __future__ import annotations

import pytest

from src.department_employee.department_employee.common.validators import require_id, require_name
from src.department_employee.department_employee.core.exceptions import ValidationError


def test_require_name_trims():
    assert require_name("  Bob  ", "name") == "Bob"


@pytest.mark.parametrize("value", [None, "", "   ", "B", "b" * 101])
def test_require_name_rejects(value):
    with pytest.raises(ValidationError):
        require_name(value, "name")


@pytest.mark.parametrize("value, expected", [(3, 3), ("12", 12), (" 7 ", 7)])
def test_require_id_parses(value, expected):
    assert require_id(value, "departmentId") == expected


@pytest.mark.parametrize("value", [None, "", "x", 0, -1, True])
def test_require_id_rejects(value):
    with pytest.raises(ValidationError) as exc:
        require_id(value, "departmentId")
    assert list(exc.value.fields) == ["departmentId"]


def test_label_replaces_field_name_in_message_only():
    with pytest.raises(ValidationError) as exc:
        require_name("", "name", "Employee name")

    assert str(exc.value) == "Employee name is required"
    assert list(exc.value.fields) == ["name"]
