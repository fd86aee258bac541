from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors, current_actor, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    generator = container.payroll_generator
    reports = container.payroll_report_service

    @app.route("/api/payroll", methods=["GET"], endpoint="payroll_list")
    @api_errors
    def payroll_list():
        records = reports.list_records(request.args.get("pay_period"))
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/payroll/summary", methods=["GET"], endpoint="payroll_summary")
    @api_errors
    def payroll_summary():
        return jsonify(reports.summary(request.args.get("pay_period")).to_dict())

    @app.route("/api/payroll/generate", methods=["POST"], endpoint="payroll_generate")
    @api_errors
    def payroll_generate():
        body = json_body()
        pay_period = body.get("pay_period") if isinstance(body, dict) else None
        records = generator.generate(pay_period, actor=current_actor())
        return jsonify([r.to_dict() for r in records]), 201

    @app.route("/api/payroll/export", methods=["GET"], endpoint="payroll_export")
    @api_errors
    def payroll_export():
        filename, text = reports.export_csv(request.args.get("pay_period"))
        return app.response_class(
            text.encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/payroll/<int:payroll_id>/payslip", methods=["GET"], endpoint="payroll_payslip")
    @api_errors
    def payroll_payslip(payroll_id: int):
        return jsonify(reports.payslip(payroll_id).to_dict())

    @app.route("/api/payroll/preview", methods=["POST"], endpoint="payroll_preview")
    @api_errors
    def payroll_preview():
        computation, lines = reports.preview(json_body())
        return jsonify({"calculation": computation.to_dict(), "lines": [line.to_dict() for line in lines]})

    @app.route("/api/dashboard/stats", methods=["GET"], endpoint="dashboard_stats")
    @api_errors
    def dashboard_stats():
        return jsonify(reports.dashboard(request.args.get("pay_period")).to_dict())
