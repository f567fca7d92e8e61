from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.api import api_view, to_json
from ..core.enums import VIEWER_ROLES
from ..core.exceptions import ValidationError


def register(app: Flask, container) -> None:
    api = api_view(container)

    @app.route("/api/leaves", methods=["POST"], endpoint="leaves_create")
    @api
    def leaves_create(*, auth, services):
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Expected a JSON object")
        leave_id = services.leave_service.create_leave(
            auth=auth,
            employee_id=data.get("employee_id") or 0,
            start_date=data.get("start_date") or "",
            end_date=data.get("end_date") or "",
            reason=data.get("reason") or "",
            leave_type=data.get("leave_type"),
        )
        return jsonify({"success": True, "leave_id": leave_id}), 201

    @app.route("/api/leaves/pending", methods=["GET"], endpoint="leaves_pending")
    @api
    def leaves_pending(*, auth, services):
        auth.require_role(VIEWER_ROLES)
        return jsonify({"success": True, "leaves": to_json(list(services.leave_service.list_pending()))})

    @app.route("/api/leaves/<int:leave_id>/approve", methods=["POST"], endpoint="leaves_approve")
    @api
    def leaves_approve(leave_id, *, auth, services):
        services.leave_service.approve(auth=auth, leave_id=leave_id)
        return jsonify({"success": True, "message": "Leave request approved!"})

    @app.route("/api/leaves/<int:leave_id>/reject", methods=["POST"], endpoint="leaves_reject")
    @api
    def leaves_reject(leave_id, *, auth, services):
        services.leave_service.reject(auth=auth, leave_id=leave_id)
        return jsonify({"success": True, "message": "Leave request rejected!"})
