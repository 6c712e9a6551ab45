from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.http import admin_required, client_ip, current_role, domain_error_response, json_error
from ..core.exceptions import DomainError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/registrar-acceso", methods=["POST"], endpoint="access_register")
    def access_register():
        try:
            record = container.access_log_service.register(client_ip())
            return jsonify({"success": True, "acceso": record.as_dict()}), 201
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error al registrar acceso")
            return json_error("Error al registrar acceso", 500)

    @app.route("/api/accesos", methods=["GET"], endpoint="access_list")
    @admin_required
    def access_list():
        limit_s = request.args.get("limite")
        if limit_s and not limit_s.isdigit():
            return json_error("Límite inválido", 400)
        try:
            records = container.access_log_service.list_recent(
                current_role=current_role(), limit=int(limit_s) if limit_s else None
            )
            return jsonify({"success": True, "accesos": [r.as_dict() for r in records]})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error al obtener accesos")
            return json_error("Error al obtener accesos", 500)

    @app.route("/api/accesos", methods=["DELETE"], endpoint="access_clear")
    @admin_required
    def access_clear():
        try:
            removed = container.access_log_service.clear(current_role=current_role())
            return jsonify({"success": True, "eliminados": removed})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error al limpiar accesos")
            return json_error("Error al limpiar accesos", 500)
