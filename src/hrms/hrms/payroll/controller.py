from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import parse_iso_date
from ..common.http import json_body, list_response, lookup_response, no_content, query_arg
from ..common.validators import require_non_empty
from ..container import Container
from .model import Payroll


def _serialize(payroll: Payroll) -> dict:
    return payroll.to_dict()


def _date_arg(name: str):
    return parse_iso_date(require_non_empty(query_arg(name), f"Query parameter '{name}'"))


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    @app.route("/payroll", methods=["GET"], endpoint="list_payrolls")
    def list_payrolls():
        return list_response(service.list_payrolls(), _serialize)

    @app.route("/payroll", methods=["POST"], endpoint="create_payroll")
    def create_payroll():
        payroll = Payroll.from_dict(json_body())
        return jsonify(_serialize(service.create_payroll(payroll)))

    @app.route("/payroll/<record_id>", methods=["GET"], endpoint="get_payroll")
    def get_payroll(record_id: str):
        return lookup_response(service.get_payroll(record_id), _serialize)

    @app.route("/payroll/<record_id>", methods=["PUT"], endpoint="update_payroll")
    def update_payroll(record_id: str):
        payroll = Payroll.from_dict(json_body())
        return jsonify(_serialize(service.update_payroll(record_id, payroll)))

    @app.route("/payroll/<record_id>", methods=["DELETE"], endpoint="delete_payroll")
    def delete_payroll(record_id: str):
        service.delete_payroll(record_id)
        return no_content()

    @app.route("/payroll/employee/<employee_id>", methods=["GET"], endpoint="payrolls_by_employee")
    def by_employee(employee_id: str):
        return list_response(service.list_by_employee(employee_id), _serialize)

    @app.route("/payroll/status/<status>", methods=["GET"], endpoint="payrolls_by_status")
    def by_status(status: str):
        return list_response(service.list_by_status(status), _serialize)

    # /payroll/period?start=2024-01-01&end=2024-01-31
    @app.route("/payroll/period", methods=["GET"], endpoint="payrolls_by_period")
    def by_period():
        return list_response(service.list_by_period(_date_arg("start"), _date_arg("end")), _serialize)

    # /payroll/pay-date?from=2024-01-01&to=2024-03-31
    @app.route("/payroll/pay-date", methods=["GET"], endpoint="payrolls_by_pay_date")
    def by_pay_date():
        return list_response(service.list_by_pay_date_between(_date_arg("from"), _date_arg("to")), _serialize)
