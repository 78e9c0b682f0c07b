from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, list_response, lookup_response, no_content
from ..container import Container
from .model import Leave


def _serialize(leave: Leave) -> dict:
    return leave.to_dict()


def register(app: Flask, container: Container) -> None:
    service = container.leave_service

    @app.route("/leaves", methods=["GET"], endpoint="list_leaves")
    def list_leaves():
        return list_response(service.list_leaves(), _serialize)

    @app.route("/leaves", methods=["POST"], endpoint="create_leave")
    def create_leave():
        leave = Leave.from_dict(json_body())
        return jsonify(_serialize(service.create_leave(leave)))

    @app.route("/leaves/<record_id>", methods=["GET"], endpoint="get_leave")
    def get_leave(record_id: str):
        return lookup_response(service.get_leave(record_id), _serialize)

    @app.route("/leaves/<record_id>", methods=["PUT"], endpoint="update_leave")
    def update_leave(record_id: str):
        leave = Leave.from_dict(json_body())
        return jsonify(_serialize(service.update_leave(record_id, leave)))

    @app.route("/leaves/<record_id>", methods=["DELETE"], endpoint="delete_leave")
    def delete_leave(record_id: str):
        service.delete_leave(record_id)
        return no_content()

    @app.route("/leaves/<record_id>/approve", methods=["POST"], endpoint="approve_leave")
    def approve_leave(record_id: str):
        body = json_body()
        return lookup_response(service.approve(record_id, body.get("approvedBy")), _serialize)

    @app.route("/leaves/<record_id>/reject", methods=["POST"], endpoint="reject_leave")
    def reject_leave(record_id: str):
        body = json_body()
        result = service.reject(record_id, body.get("rejectedBy"), body.get("comments"))
        return lookup_response(result, _serialize)

    @app.route("/leaves/employee/<employee_id>", methods=["GET"], endpoint="leaves_by_employee")
    def by_employee(employee_id: str):
        return list_response(service.list_by_employee(employee_id), _serialize)

    @app.route("/leaves/status/<status>", methods=["GET"], endpoint="leaves_by_status")
    def by_status(status: str):
        return list_response(service.list_by_status(status), _serialize)

    @app.route("/leaves/type/<leave_type>", methods=["GET"], endpoint="leaves_by_type")
    def by_type(leave_type: str):
        return list_response(service.list_by_leave_type(leave_type), _serialize)

    @app.route("/leaves/approver/<approved_by>", methods=["GET"], endpoint="leaves_by_approver")
    def by_approver(approved_by: str):
        return list_response(service.list_by_approver(approved_by), _serialize)
