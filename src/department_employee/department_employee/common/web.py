"""Request/response helpers shared by the controllers.

Form submissions (the excluded HTML pages and the offline replay queue post
forms) get a flash message and a redirect; every other request gets JSON.
"""

from __future__ import annotations

import logging

from flask import current_app, flash, jsonify, redirect, request, session

from ..core.exceptions import DomainError, DuplicateNameError, NotFoundError, UnexpectedError, ValidationError

logger = logging.getLogger(__name__)

FORM_MIMETYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

_STATUS = {
    ValidationError: 400,
    NotFoundError: 404,
    DuplicateNameError: 409,
}


def is_form_submission() -> bool:
    return request.mimetype in FORM_MIMETYPES


def request_data() -> dict:
    if is_form_submission():
        return request.form.to_dict()
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def field(data: dict, *names: str):
    """First present value among ``names`` (accepts camelCase and snake_case keys)."""
    for name in names:
        if name in data:
            return data[name]
    return None


def domain_error_response(exc: DomainError, data: dict, *, redirect_to: str):
    status = _STATUS.get(type(exc), 400)
    logger.warning("Request rejected (%s): %s", type(exc).__name__, exc)

    if is_form_submission():
        flash(str(exc), "danger")
        session["form_input"] = data
        if isinstance(exc, ValidationError):
            session["validation_errors"] = exc.fields
        return redirect(redirect_to)

    body = {
        "success": False,
        "error": type(exc).__name__,
        "message": str(exc),
        "input": data,
    }
    if isinstance(exc, ValidationError):
        body["fields"] = exc.fields
    if isinstance(exc, NotFoundError):
        body["entity"] = exc.entity
        body["id"] = exc.entity_id
    if isinstance(exc, DuplicateNameError):
        body["name"] = exc.name
    return jsonify(body), status


def unexpected_error_response(exc: Exception, data: dict, *, action: str, redirect_to: str):
    logger.exception("Unexpected error while %s", action)

    error = UnexpectedError()
    message = str(error)
    if current_app.config.get("DEBUG"):
        message = f"{message} ({exc})"

    if is_form_submission():
        flash(message, "danger")
        session["form_input"] = data
        return redirect(redirect_to)

    return jsonify({"success": False, "error": type(error).__name__, "message": message, "input": data}), 500


def success_response(payload, *, message: str, redirect_to: str, status: int = 200):
    if is_form_submission():
        flash(message, "success")
        session.pop("form_input", None)
        session.pop("validation_errors", None)
        return redirect(redirect_to)
    if payload is None:
        return "", 204
    return jsonify(payload), status
