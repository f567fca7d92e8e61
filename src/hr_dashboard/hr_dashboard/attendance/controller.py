from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.api import api_view, to_json
from ..core.enums import ADMIN_ROLES, Role, VIEWER_ROLES
from ..core.exceptions import ValidationError


def register(app: Flask, container) -> None:
    api = api_view(container)

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_mark")
    @api
    def attendance_mark(*, auth, services):
        auth.require_role(ADMIN_ROLES | {Role.SUPERVISOR})

        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Expected a JSON object")
        attendance_id = services.attendance_service.mark(
            employee_id=data.get("employee_id") or 0,
            day=data.get("date") or "",
            status=data.get("status") or "",
        )
        return jsonify({"success": True, "attendance_id": attendance_id})

    @app.route("/api/attendance/<month>/employees/<int:employee_id>", methods=["GET"], endpoint="attendance_tally")
    @api
    def attendance_tally(month, employee_id, *, auth, services):
        auth.require_role(VIEWER_ROLES)
        tally = services.attendance_service.month_tally(employee_id=employee_id, month=month)
        return jsonify({"success": True, "tally": to_json(tally)})
