from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, list_response, lookup_response, no_content
from ..container import Container
from .model import Performance


def _serialize(performance: Performance) -> dict:
    return performance.to_dict()


def register(app: Flask, container: Container) -> None:
    service = container.performance_service

    @app.route("/api/performance", methods=["GET"], endpoint="list_performances")
    def list_performances():
        return list_response(service.list_performances(), _serialize)

    @app.route("/api/performance", methods=["POST"], endpoint="create_performance")
    def create_performance():
        performance = Performance.from_dict(json_body())
        return jsonify(_serialize(service.create_performance(performance))), 201

    @app.route("/api/performance/<record_id>", methods=["GET"], endpoint="get_performance")
    def get_performance(record_id: str):
        return lookup_response(service.get_performance(record_id), _serialize)

    @app.route("/api/performance/<record_id>", methods=["PUT"], endpoint="update_performance")
    def update_performance(record_id: str):
        performance = Performance.from_dict(json_body())
        return lookup_response(service.update_performance(record_id, performance), _serialize)

    @app.route("/api/performance/<record_id>", methods=["DELETE"], endpoint="delete_performance")
    def delete_performance(record_id: str):
        service.delete_performance(record_id)
        return no_content()
