from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    @api_errors
    def employees_list():
        return jsonify([e.to_dict() for e in service.list_active()])

    @app.route("/api/employees/stats", methods=["GET"], endpoint="employees_stats")
    @api_errors
    def employees_stats():
        rows = service.list_with_stats(request.args.get("pay_period"))
        return jsonify([r.to_dict() for r in rows])

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="employees_get")
    @api_errors
    def employees_get(employee_id: int):
        return jsonify(service.get(employee_id).to_dict())

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    @api_errors
    def employees_create():
        employee = service.create(json_body())
        return jsonify(employee.to_dict()), 201

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="employees_update")
    @api_errors
    def employees_update(employee_id: int):
        return jsonify(service.update(employee_id, json_body()).to_dict())

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="employees_delete")
    @api_errors
    def employees_delete(employee_id: int):
        service.deactivate(employee_id)
        return jsonify({"message": "Employee deactivated"})
