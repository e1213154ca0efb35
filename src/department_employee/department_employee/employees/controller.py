from __future__ import annotations

from flask import Flask, jsonify, request, url_for

from ..common.web import (
    domain_error_response,
    field,
    request_data,
    success_response,
    unexpected_error_response,
)
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    def _department_ref(data: dict):
        return field(data, "departmentId", "department_id", "department")

    @app.route("/employees", methods=["GET"], endpoint="employees")
    def employees():
        department_id = request.args.get("departmentId") or request.args.get("department_id")
        try:
            if department_id:
                rows = service.list_by_department(department_id)
            else:
                rows = service.list_all()
        except DomainError as e:
            return domain_error_response(e, dict(request.args), redirect_to=url_for("employees"))
        except Exception as e:
            return unexpected_error_response(e, {}, action="listing employees", redirect_to=url_for("home"))
        return jsonify([r.to_dict() for r in rows])

    @app.route("/employees", methods=["POST"], endpoint="create_employee")
    def create_employee():
        data = request_data()
        try:
            emp = service.create(field(data, "name"), _department_ref(data))
        except DomainError as e:
            return domain_error_response(e, data, redirect_to=url_for("employees"))
        except Exception as e:
            return unexpected_error_response(e, data, action="creating employee", redirect_to=url_for("employees"))

        return success_response(
            emp.to_dict(),
            message=f"Employee '{emp.name}' created successfully!",
            redirect_to=url_for("employees"),
            status=201,
        )

    @app.route("/employees/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: int):
        try:
            emp = service.get_by_id(employee_id)
        except DomainError as e:
            return domain_error_response(e, {"id": employee_id}, redirect_to=url_for("employees"))
        except Exception as e:
            return unexpected_error_response(
                e, {"id": employee_id}, action="loading employee", redirect_to=url_for("employees")
            )
        return jsonify(emp.to_dict())

    @app.route("/employees/<int:employee_id>", methods=["PUT", "POST"], endpoint="update_employee")
    def update_employee(employee_id: int):
        data = request_data()
        try:
            emp = service.update(employee_id, field(data, "name"), _department_ref(data))
        except DomainError as e:
            return domain_error_response(e, data, redirect_to=url_for("employees"))
        except Exception as e:
            return unexpected_error_response(e, data, action="updating employee", redirect_to=url_for("employees"))

        return success_response(emp.to_dict(), message="Employee updated successfully!", redirect_to=url_for("employees"))

    @app.route("/employees/<int:employee_id>/delete", methods=["DELETE", "POST"], endpoint="delete_employee")
    @app.route("/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: int):
        data = {"id": employee_id}
        try:
            service.delete(employee_id)
        except DomainError as e:
            return domain_error_response(e, data, redirect_to=url_for("employees"))
        except Exception as e:
            return unexpected_error_response(e, data, action="deleting employee", redirect_to=url_for("employees"))

        return success_response(None, message="Employee deleted successfully!", redirect_to=url_for("employees"))
