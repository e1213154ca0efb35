from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import unexpected_error_response
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET"], endpoint="home")
    def home():
        try:
            summary = {
                "departments": container.department_service.count(),
                "employees": container.employee_service.count(),
            }
        except Exception as e:
            return unexpected_error_response(e, {}, action="loading dashboard", redirect_to="/")
        return jsonify(summary)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})
