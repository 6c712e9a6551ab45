from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request, session

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS = (
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ValidationError, 400),
)


def json_error(message: str, status: int):
    return jsonify({"success": False, "error": message}), status


def domain_error_response(e: DomainError):
    for exc_type, status in _STATUS:
        if isinstance(e, exc_type):
            return json_error(str(e), status)
    return json_error(str(e), 400)


def current_role() -> Role:
    try:
        return Role(session.get("role") or Role.GUEST.value)
    except ValueError:
        return Role.GUEST


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_role() != Role.ADMIN:
            return json_error("No tiene permisos de administrador", 403)
        return view(*args, **kwargs)

    return wrapper


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Cuerpo JSON inválido")
    return data


def client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For", "")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "desconocida"
