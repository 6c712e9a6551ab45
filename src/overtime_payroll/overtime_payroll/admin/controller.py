from __future__ import annotations

import logging

from flask import Flask, jsonify, session

from ..common.http import admin_required, current_role, domain_error_response, json_body, json_error
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, DomainError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="admin_login")
    def admin_login():
        try:
            data = json_body()
            role = container.admin_auth_service.authenticate(str(data.get("password") or ""))
            session["role"] = role.value
            logger.info("Admin session opened")
            return jsonify({"success": True, "rol": role.value})
        except AuthenticationError as e:
            session.pop("role", None)
            return json_error(str(e), 401)
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error al iniciar sesión")
            return json_error("Error al iniciar sesión", 500)

    @app.route("/api/auth/logout", methods=["POST"], endpoint="admin_logout")
    def admin_logout():
        session.clear()
        return jsonify({"success": True, "rol": Role.GUEST.value})

    @app.route("/api/exportar-db", methods=["GET"], endpoint="admin_export")
    @admin_required
    def admin_export():
        try:
            return jsonify({"success": True, **container.export_service.export(current_role=current_role())})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error al exportar la base de datos")
            return json_error("Error al exportar la base de datos", 500)
