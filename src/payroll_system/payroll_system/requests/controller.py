from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors, current_actor, int_arg, json_body
from ..common.validators import require_payload
from ..container import Container
from .service import parse_kind


def register(app: Flask, container: Container) -> None:
    service = container.request_service

    @app.route("/api/requests/<kind>", methods=["GET"], endpoint="requests_list")
    @api_errors
    def requests_list(kind: str):
        rows = service.list(parse_kind(kind), int_arg("employee_id"), request.args.get("status"))
        return jsonify([r.to_dict() for r in rows])

    @app.route("/api/requests/<kind>", methods=["POST"], endpoint="requests_create")
    @api_errors
    def requests_create(kind: str):
        req = service.create(parse_kind(kind), json_body())
        return jsonify(req.to_dict()), 201

    @app.route("/api/requests/<kind>/<int:request_id>/review", methods=["POST"], endpoint="requests_review")
    @api_errors
    def requests_review(kind: str, request_id: int):
        body = require_payload(json_body())
        req = service.review(
            parse_kind(kind),
            request_id,
            status=body.get("status"),
            reviewer=current_actor(),
            comments=body.get("comments"),
        )
        return jsonify(req.to_dict())
