from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.validators import optional_int, require_int, require_month, require_non_empty
from ..container import Container
from ..core.exceptions import CalculationError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

BAD_REQUEST = 400
NOT_FOUND = 404
UNPROCESSABLE = 422
SYSTEM_ERROR = 500
OK = 200


def _reply(status: int, message, *, success: bool):
    return jsonify({"success": success, "status": status, "message": message}), status


def _fail(status: int, message: str):
    return _reply(status, message, success=False)


def register(app: Flask, container: Container) -> None:
    salary_service = container.salary_service

    @app.route(
        "/api/admin/manage-salary/calculate/<employee_id>",
        methods=["POST"],
        endpoint="salary_calculate",
    )
    def salary_calculate(employee_id: str):
        try:
            employee_name = require_non_empty(request.args.get("employeeName"), "employeeName")
            year = require_int(request.args.get("year"), "year")
            month = require_month(request.args.get("month"))
        except ValidationError:
            return _fail(BAD_REQUEST, "Year, month, and employee ID are required parameters")

        overrides = request.get_json(silent=True) or {}
        if not isinstance(overrides, dict):
            return _fail(BAD_REQUEST, "Request body must be a JSON object")

        try:
            record = salary_service.calculate(
                employee_id=employee_id,
                employee_name=employee_name,
                year=year,
                month=month,
                overrides=overrides,
            )
            return _reply(OK, record.to_dict(), success=True)
        except NotFoundError as e:
            return _fail(NOT_FOUND, str(e))
        except CalculationError as e:
            return _fail(UNPROCESSABLE, str(e))
        except Exception:
            logger.exception("Salary calculation failed for %s", employee_id)
            return _fail(SYSTEM_ERROR, "Something went wrong")

    @app.route("/api/admin/manage-salary/get", methods=["GET"], endpoint="salary_get")
    def salary_get():
        try:
            year = optional_int(request.args.get("year"), "year")
            month = optional_int(request.args.get("month"), "month")
        except ValidationError as e:
            return _fail(BAD_REQUEST, str(e))

        try:
            records = salary_service.list_salaries(
                year=year or None,
                month=month or None,
                employee_id=request.args.get("employeeID") or None,
                employee_name=request.args.get("employeeName") or None,
                department_name=request.args.get("department_name") or None,
            )
            return _reply(OK, [r.to_dict() for r in records], success=True)
        except NotFoundError as e:
            return _fail(NOT_FOUND, str(e))
        except Exception:
            logger.exception("Salary query failed")
            return _fail(SYSTEM_ERROR, "Something went wrong")
