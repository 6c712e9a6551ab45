from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.http import admin_required, current_role, domain_error_response, json_body, json_error
from ..core.exceptions import DomainError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/festivos", methods=["GET"], endpoint="holidays_list")
    def holidays_list():
        year_s = request.args.get("anio")
        if year_s and not year_s.isdigit():
            return json_error("Año inválido", 400)
        try:
            holidays = container.holiday_service.list_holidays(year=int(year_s) if year_s else None)
            return jsonify({"success": True, "festivos": [h.as_dict() for h in holidays]})
        except Exception:
            logger.exception("Error al obtener festivos")
            return json_error("Error al obtener festivos", 500)

    @app.route("/api/festivos", methods=["POST"], endpoint="holidays_add")
    @admin_required
    def holidays_add():
        try:
            data = json_body()
            holiday_id = container.holiday_service.add(
                current_role=current_role(),
                holiday_date=data.get("fecha"),
                name=data.get("nombre") or "",
                kind=data.get("tipo") or "FIJO",
            )
            return jsonify({"success": True, "id": holiday_id}), 201
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error al agregar festivo")
            return json_error("Error al agregar festivo", 500)

    @app.route("/api/festivos/<fecha>", methods=["DELETE"], endpoint="holidays_delete")
    @admin_required
    def holidays_delete(fecha: str):
        try:
            container.holiday_service.delete(current_role=current_role(), holiday_date=fecha)
            return jsonify({"success": True})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error al eliminar festivo")
            return json_error("Error al eliminar festivo", 500)

    @app.route("/api/festivos/generar", methods=["POST"], endpoint="holidays_generate")
    @admin_required
    def holidays_generate():
        data = request.get_json(silent=True) or {}
        try:
            kwargs = {}
            if data.get("desde"):
                kwargs["first_year"] = int(data["desde"])
            if data.get("hasta"):
                kwargs["last_year"] = int(data["hasta"])
        except (TypeError, ValueError):
            return json_error("Año inválido", 400)
        try:
            report = container.holiday_service.generate(current_role=current_role(), **kwargs)
            return jsonify({"success": True, **report.as_dict()})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error al generar festivos")
            return json_error("Error al generar festivos", 500)
