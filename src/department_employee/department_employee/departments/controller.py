from __future__ import annotations

from flask import Flask, jsonify, url_for

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
    service = container.department_service

    @app.route("/departments", methods=["GET"], endpoint="departments")
    def departments():
        try:
            rows = service.list_all()
        except Exception as e:
            return unexpected_error_response(e, {}, action="listing departments", redirect_to=url_for("home"))
        return jsonify([d.to_dict() for d in rows])

    @app.route("/departments", methods=["POST"], endpoint="create_department")
    def create_department():
        data = request_data()
        try:
            dept = service.create(field(data, "name"))
        except DomainError as e:
            return domain_error_response(e, data, redirect_to=url_for("departments"))
        except Exception as e:
            return unexpected_error_response(e, data, action="creating department", redirect_to=url_for("departments"))

        return success_response(
            dept.to_dict(),
            message=f"Department '{dept.name}' created successfully!",
            redirect_to=url_for("departments"),
            status=201,
        )

    @app.route("/departments/<int:department_id>", methods=["GET"], endpoint="get_department")
    def get_department(department_id: int):
        try:
            dept = service.get_by_id(department_id)
        except DomainError as e:
            return domain_error_response(e, {"id": department_id}, redirect_to=url_for("departments"))
        except Exception as e:
            return unexpected_error_response(
                e, {"id": department_id}, action="loading department", redirect_to=url_for("departments")
            )
        return jsonify(dept.to_dict())

    @app.route("/departments/<int:department_id>", methods=["PUT", "POST"], endpoint="update_department")
    def update_department(department_id: int):
        data = request_data()
        try:
            dept = service.update(department_id, field(data, "name"))
        except DomainError as e:
            return domain_error_response(e, data, redirect_to=url_for("departments"))
        except Exception as e:
            return unexpected_error_response(e, data, action="updating department", redirect_to=url_for("departments"))

        return success_response(
            dept.to_dict(),
            message="Department updated successfully!",
            redirect_to=url_for("departments"),
        )

    @app.route("/departments/<int:department_id>/delete", methods=["DELETE", "POST"], endpoint="delete_department")
    @app.route("/departments/<int:department_id>", methods=["DELETE"], endpoint="delete_department")
    def delete_department(department_id: int):
        data = {"id": department_id}
        try:
            service.delete(department_id)
        except DomainError as e:
            return domain_error_response(e, data, redirect_to=url_for("departments"))
        except Exception as e:
            return unexpected_error_response(e, data, action="deleting department", redirect_to=url_for("departments"))

        return success_response(None, message="Department deleted successfully!", redirect_to=url_for("departments"))

    @app.route("/departments/<int:department_id>/employees", methods=["GET"], endpoint="department_employees")
    def department_employees(department_id: int):
        try:
            rows = container.employee_service.list_by_department(department_id)
        except DomainError as e:
            return domain_error_response(e, {"id": department_id}, redirect_to=url_for("departments"))
        except Exception as e:
            return unexpected_error_response(
                e, {"id": department_id}, action="listing department employees", redirect_to=url_for("departments")
            )
        return jsonify([r.to_dict() for r in rows])
