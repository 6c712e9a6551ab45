from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import domain_error_response, json_body, json_error
from ..core.exceptions import DomainError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    @app.route("/api/mes/<mes>", methods=["GET"], endpoint="payroll_month")
    def payroll_month(mes: str):
        try:
            return jsonify({"success": True, **service.month_view(mes)})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error al preparar el mes %s", mes)
            return json_error("Error al preparar el mes", 500)

    @app.route("/api/validar", methods=["POST"], endpoint="payroll_validate")
    def payroll_validate():
        try:
            data = json_body()
            days = service.days_from_payload(data.get("dias"))
            validation = service.validate(days)
            return jsonify({"success": True, **service.validation_report(validation)})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error al validar los turnos")
            return json_error("Error al validar los turnos", 500)

    @app.route("/api/calcular", methods=["POST"], endpoint="payroll_calculate")
    def payroll_calculate():
        try:
            data = json_body()
            days = service.days_from_payload(data.get("dias"))
            tier, result = service.calculate(days, tier_name=data.get("cargo"))
            if not result.ok:
                return jsonify({
                    "success": False,
                    "error": result.validation.summary,
                    "validacion": service.validation_report(result.validation),
                }), 400
            return jsonify({"success": True, "resultado": service.report(tier, result)})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            logger.exception("Error al calcular la liquidación")
            return json_error("Error al calcular la liquidación", 500)
