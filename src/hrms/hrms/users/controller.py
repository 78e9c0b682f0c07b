from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import failure, json_body
from ..container import Container
from ..core.exceptions import AuthenticationError, ValidationError
from .model import User


def register(app: Flask, container: Container) -> None:
    auth = container.auth_service

    @app.route("/auth/login", methods=["POST"], endpoint="login")
    def login():
        body = json_body()
        try:
            result = auth.authenticate(str(body.get("username") or ""), str(body.get("password") or ""))
        except AuthenticationError as e:
            return failure(str(e))

        return jsonify({"success": True, "user": result.user.to_dict(), "token": result.token})

    @app.route("/auth/register", methods=["POST"], endpoint="register")
    def register_user():
        try:
            user = auth.register(User.from_dict(json_body()))
        except ValidationError as e:
            return failure(str(e))

        return jsonify({"success": True, "user": user.to_dict()})
