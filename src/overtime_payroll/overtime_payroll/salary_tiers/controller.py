from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.http import admin_required, current_role, domain_error_response, json_body, json_error
from ..core.exceptions import DomainError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/cargos", methods=["GET"], endpoint="tiers_list")
    def tiers_list():
        try:
            tiers = container.salary_tier_service.list_tiers()
            return jsonify({"success": True, "cargos": [t.as_dict() for t in tiers]})
        except Exception:
            logger.exception("Error al obtener cargos")
            return json_error("Error al obtener cargos", 500)

    @app.route("/api/cargos", methods=["POST"], endpoint="tiers_add")
    @admin_required
    def tiers_add():
        try:
            data = json_body()
            tier_id = container.salary_tier_service.add(
                current_role=current_role(),
                name=data.get("nombre") or "",
                monthly_salary=data.get("salario"),
            )
            return jsonify({"success": True, "id": tier_id}), 201
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error al agregar cargo")
            return json_error("Error al agregar cargo", 500)

    @app.route("/api/cargos/<int:tier_id>", methods=["PUT"], endpoint="tiers_update")
    @admin_required
    def tiers_update(tier_id: int):
        try:
            data = json_body()
            container.salary_tier_service.update(
                current_role=current_role(),
                tier_id=tier_id,
                name=data.get("nombre") or "",
                monthly_salary=data.get("salario"),
            )
            return jsonify({"success": True})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error al actualizar cargo")
            return json_error("Error al actualizar cargo", 500)

    @app.route("/api/cargos/<int:tier_id>", methods=["DELETE"], endpoint="tiers_delete")
    @admin_required
    def tiers_delete(tier_id: int):
        try:
            container.salary_tier_service.delete(
                current_role=current_role(),
                tier_id=tier_id,
                selected_name=request.args.get("seleccionado"),
            )
            return jsonify({"success": True})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error al eliminar cargo")
            return json_error("Error al eliminar cargo", 500)
