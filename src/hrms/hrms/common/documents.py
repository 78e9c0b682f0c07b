"""Conversion between domain dataclasses and JSON documents.

Documents use camelCase keys (``employeeId``) while the dataclasses use
snake_case fields (``employee_id``). The same document shape is stored in the
database and returned over HTTP.
"""

from __future__ import annotations

import dataclasses
import typing
from datetime import date, datetime
from typing import Any, Iterable, Mapping, Type, TypeVar

from .datetime_utils import parse_iso_date, parse_iso_datetime
from .validators import require_float, require_str_list

T = TypeVar("T")

_NONE_TYPE = type(None)


def camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _unwrap_optional(hint: Any) -> tuple[Any, bool]:
    if typing.get_origin(hint) is typing.Union:
        args = [a for a in typing.get_args(hint) if a is not _NONE_TYPE]
        if len(args) == 1:
            return args[0], True
    return hint, False


def _coerce(value: Any, hint: Any, field_name: str) -> Any:
    inner, optional = _unwrap_optional(hint)
    if value is None:
        if optional:
            return None
        if inner is float:
            return 0.0
        if typing.get_origin(inner) is list:
            return []
        return None

    if inner is float:
        return require_float(value, field_name)
    if inner is datetime:
        return value if isinstance(value, datetime) else parse_iso_datetime(value)
    if inner is date:
        if isinstance(value, datetime):
            return value.date()
        return value if isinstance(value, date) else parse_iso_date(value)
    if typing.get_origin(inner) is list:
        return require_str_list(value, field_name)
    if inner is str:
        return str(value)
    return value


def _serialize(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_serialize(v) for v in value]
    return value


def from_document(cls: Type[T], data: Mapping[str, Any]) -> T:
    """Build ``cls`` from a document, coercing values to the field types.

    Unknown keys are ignored; missing keys keep the dataclass default. Both
    camelCase and snake_case keys are accepted.
    """
    hints = typing.get_type_hints(cls)
    kwargs: dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        key = camel_case(f.name)
        if key in data:
            raw = data[key]
        elif f.name in data:
            raw = data[f.name]
        else:
            continue
        kwargs[f.name] = _coerce(raw, hints[f.name], key)
    return cls(**kwargs)


def to_document(obj: Any, *, exclude: Iterable[str] = ()) -> dict[str, Any]:
    skip = set(exclude)
    out: dict[str, Any] = {}
    for f in dataclasses.fields(obj):
        if f.name in skip:
            continue
        out[camel_case(f.name)] = _serialize(getattr(obj, f.name))
    return out
