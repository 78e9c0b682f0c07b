from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, list_response, lookup_response, no_content
from ..container import Container
from .model import Employee


def _serialize(employee: Employee) -> dict:
    return employee.to_dict()


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        return list_response(service.list_employees(), _serialize)

    @app.route("/employees", methods=["POST"], endpoint="create_employee")
    def create_employee():
        employee = Employee.from_dict(json_body())
        return jsonify(_serialize(service.create_employee(employee)))

    @app.route("/employees/<record_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(record_id: str):
        return lookup_response(service.get_employee(record_id), _serialize)

    @app.route("/employees/<record_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(record_id: str):
        employee = Employee.from_dict(json_body())
        return jsonify(_serialize(service.update_employee(record_id, employee)))

    @app.route("/employees/<record_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(record_id: str):
        service.delete_employee(record_id)
        return no_content()

    @app.route("/employees/employee-id/<employee_id>", methods=["GET"], endpoint="get_employee_by_employee_id")
    def get_by_employee_id(employee_id: str):
        return lookup_response(service.get_by_employee_id(employee_id), _serialize)

    @app.route("/employees/email/<email>", methods=["GET"], endpoint="get_employee_by_email")
    def get_by_email(email: str):
        return lookup_response(service.get_by_email(email), _serialize)

    @app.route("/employees/department/<department>", methods=["GET"], endpoint="employees_by_department")
    def by_department(department: str):
        return list_response(service.list_by_department(department), _serialize)

    @app.route("/employees/status/<status>", methods=["GET"], endpoint="employees_by_status")
    def by_status(status: str):
        return list_response(service.list_by_status(status), _serialize)

    @app.route("/employees/manager/<manager>", methods=["GET"], endpoint="employees_by_manager")
    def by_manager(manager: str):
        return list_response(service.list_by_manager(manager), _serialize)

    @app.route("/employees/exists/<employee_id>", methods=["GET"], endpoint="employee_exists")
    def exists(employee_id: str):
        return jsonify({"employeeId": employee_id, "exists": service.exists_by_employee_id(employee_id)})
