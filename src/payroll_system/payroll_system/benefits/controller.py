from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors, int_arg, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.benefit_service

    @app.route("/api/benefits", methods=["GET"], endpoint="benefits_list")
    @api_errors
    def benefits_list():
        rows = service.list(int_arg("employee_id"), request.args.get("pay_period"))
        return jsonify([b.to_dict() for b in rows])

    @app.route("/api/benefits", methods=["POST"], endpoint="benefits_create")
    @api_errors
    def benefits_create():
        return jsonify(service.create(json_body()).to_dict()), 201

    @app.route("/api/benefits/<int:benefit_id>", methods=["PUT"], endpoint="benefits_update")
    @api_errors
    def benefits_update(benefit_id: int):
        return jsonify(service.update(benefit_id, json_body()).to_dict())

    @app.route("/api/benefits/<int:benefit_id>", methods=["DELETE"], endpoint="benefits_delete")
    @api_errors
    def benefits_delete(benefit_id: int):
        service.delete(benefit_id)
        return jsonify({"message": "Benefit deleted"})
