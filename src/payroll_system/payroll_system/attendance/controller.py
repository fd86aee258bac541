from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors, int_arg, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    @api_errors
    def attendance_list():
        records = service.list_for_employee(int_arg("employee_id"), request.args.get("month"))
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/attendance/totals", methods=["GET"], endpoint="attendance_totals")
    @api_errors
    def attendance_totals():
        totals = service.monthly_totals(int_arg("employee_id"), request.args.get("pay_period"))
        return jsonify(totals.to_dict())

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_create")
    @api_errors
    def attendance_create():
        return jsonify(service.create(json_body()).to_dict()), 201

    @app.route("/api/attendance/bulk", methods=["POST"], endpoint="attendance_bulk")
    @api_errors
    def attendance_bulk():
        body = json_body()
        rows = body.get("records") if isinstance(body, dict) else body
        records = service.bulk_create(rows)
        return jsonify([r.to_dict() for r in records]), 201

    @app.route("/api/attendance/<int:attendance_id>", methods=["PUT"], endpoint="attendance_update")
    @api_errors
    def attendance_update(attendance_id: int):
        return jsonify(service.update(attendance_id, json_body()).to_dict())

    @app.route("/api/attendance/<int:attendance_id>", methods=["DELETE"], endpoint="attendance_delete")
    @api_errors
    def attendance_delete(attendance_id: int):
        service.delete(attendance_id)
        return jsonify({"message": "Attendance record deleted"})
