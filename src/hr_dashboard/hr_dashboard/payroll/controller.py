from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.api import api_view, to_json
from ..core.enums import ADMIN_ROLES, VIEWER_ROLES
from ..core.exceptions import ValidationError


def _structure_json(structure) -> dict:
    data = to_json(structure)
    data["total_allowances"] = format(structure.total_allowances, "f")
    data["total_deductions"] = format(structure.total_deductions, "f")
    data["total_ctc"] = format(structure.total_ctc, "f")
    return data


def register(app: Flask, container) -> None:
    api = api_view(container)

    @app.route("/api/payroll/<month>/summary", methods=["GET"], endpoint="payroll_summary")
    @api
    def payroll_summary(month, *, auth, services):
        auth.require_role(VIEWER_ROLES)
        return jsonify({"success": True, "summary": to_json(services.payroll_engine.summarize_month(month))})

    @app.route("/api/payroll/<month>/employees/<int:employee_id>", methods=["GET"], endpoint="payroll_details")
    @api
    def payroll_details(month, employee_id, *, auth, services):
        """Preview of the salary computation before processing."""

        auth.require_role(VIEWER_ROLES)
        details = services.payroll_engine.get_calculation_details(employee_id, month)
        data = to_json(details)
        data["structure"] = _structure_json(details.structure)
        return jsonify({"success": True, "details": data})

    @app.route("/api/payroll/<month>/employees/<int:employee_id>/process", methods=["POST"], endpoint="payroll_process")
    @api
    def payroll_process(month, employee_id, *, auth, services):
        auth.require_role(ADMIN_ROLES)
        record = services.payroll_engine.process_payroll(employee_id, month)
        return jsonify({"success": True, "payroll": to_json(record)})

    @app.route("/api/payroll/<month>/process-all", methods=["POST"], endpoint="payroll_process_all")
    @api
    def payroll_process_all(month, *, auth, services):
        auth.require_role(ADMIN_ROLES)
        count = services.payroll_engine.process_all_payroll(month)
        if count == 0:
            return jsonify({"success": True, "processed_count": 0, "message": "No employees with salary structures found"})
        return jsonify({"success": True, "processed_count": count})

    @app.route("/api/payroll/records/<int:payroll_id>/pay", methods=["POST"], endpoint="payroll_mark_paid")
    @api
    def payroll_mark_paid(payroll_id, *, auth, services):
        auth.require_role(ADMIN_ROLES)
        record = services.payroll_engine.mark_paid(payroll_id)
        return jsonify({"success": True, "payroll": to_json(record)})

    @app.route("/api/payroll/records/<int:payroll_id>/slips", methods=["POST"], endpoint="payroll_generate_slip")
    @api
    def payroll_generate_slip(payroll_id, *, auth, services):
        auth.require_role(ADMIN_ROLES)
        slip = services.payroll_engine.generate_salary_slip(payroll_id)
        data = to_json(slip)
        data["gross_earnings"] = format(slip.gross_earnings, "f")
        return jsonify({"success": True, "slip": data}), 201

    @app.route("/api/payroll/records/<int:payroll_id>/slips", methods=["GET"], endpoint="payroll_list_slips")
    @api
    def payroll_list_slips(payroll_id, *, auth, services):
        auth.require_role(VIEWER_ROLES)
        slips = services.payroll_engine.list_salary_slips(payroll_id)
        return jsonify({"success": True, "slips": [to_json(s) for s in slips]})

    # ===== SALARY STRUCTURES =====

    @app.route("/api/salary-structures", methods=["GET"], endpoint="structures_list")
    @api
    def structures_list(*, auth, services):
        auth.require_role(VIEWER_ROLES)
        structures = services.structure_service.list_structures()
        with_structure = services.structure_service.employees_with_structure()
        without = services.structure_service.employees_without_structure()
        return jsonify(
            {
                "success": True,
                "structures": [_structure_json(s) for s in structures],
                "employees_with_structure": [e.id for e in with_structure],
                "employees_without_structure": [e.id for e in without],
            }
        )

    @app.route("/api/salary-structures", methods=["POST"], endpoint="structures_create")
    @api
    def structures_create(*, auth, services):
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Expected a JSON object")
        structure_id = services.structure_service.create(auth=auth, data=data)
        return jsonify({"success": True, "structure_id": structure_id}), 201

    @app.route("/api/salary-structures/<int:structure_id>", methods=["PUT"], endpoint="structures_update")
    @api
    def structures_update(structure_id, *, auth, services):
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Expected a JSON object")
        structure = services.structure_service.update(auth=auth, structure_id=structure_id, data=data)
        return jsonify({"success": True, "structure": _structure_json(structure)})

    @app.route("/api/salary-structures/<int:structure_id>", methods=["DELETE"], endpoint="structures_delete")
    @api
    def structures_delete(structure_id, *, auth, services):
        services.structure_service.delete(auth=auth, structure_id=structure_id)
        return jsonify({"success": True})
