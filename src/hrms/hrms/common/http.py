from __future__ import annotations

from typing import Any, Callable, Optional

from flask import jsonify, request

from ..core.result import Lookup


def json_body() -> dict:
    """Request JSON as a dict; a missing or malformed body counts as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def not_found():
    return "", 404


def no_content():
    return "", 204


def failure(message: str, status: int = 400):
    return jsonify({"success": False, "message": message}), status


def lookup_response(result: Lookup, serialize: Callable[[Any], dict], status: int = 200):
    if not result.found:
        return not_found()
    return jsonify(serialize(result.value)), status


def list_response(items, serialize: Callable[[Any], dict]):
    return jsonify([serialize(i) for i in items])


def query_arg(name: str, default: Optional[str] = None) -> Optional[str]:
    value = request.args.get(name, default)
    if value is None:
        return None
    return value.strip() or default
