"""Flat wire format for form submissions.

The backend's form endpoint only understands flat string fields and file
blobs. ``to_wire_format`` lowers a typed form state into that shape;
``from_wire_format`` lifts it back given a schema.

Encoding rules:
    * ``None`` and ``""`` are omitted, so "no value" differs from "empty".
    * booleans become ``"1"`` / ``"0"``; numbers become ``str(number)``.
    * string lists become a JSON array of their non-blank entries.
    * record lists become a JSON array of their non-blank records.
    * files pass through untouched.
    * a non-POST ``method`` is spoofed through a ``_method`` field.
"""

import json
from collections.abc import Mapping, Sequence
from dataclasses import asdict, dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

from cigi_web.application.components.record_list import RecordShape
from cigi_web.domain.entities import FileUpload, Record
from cigi_web.domain.exceptions import WireFormatError

FlatValue = str | FileUpload
FlatFields = dict[str, FlatValue]

METHOD_FIELD = "_method"


class FieldKind(str, Enum):
    TEXT = "text"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    STRING_LIST = "string_list"
    RECORD_LIST = "record_list"
    FILE = "file"


@dataclass(frozen=True)
class WireField:
    kind: FieldKind = FieldKind.TEXT
    shape: RecordShape | None = None


WireSchema = Mapping[str, WireField]

TEXT = WireField()
INTEGER = WireField(FieldKind.INTEGER)
BOOLEAN = WireField(FieldKind.BOOLEAN)
STRING_LIST = WireField(FieldKind.STRING_LIST)
FILE = WireField(FieldKind.FILE)


def records(shape: RecordShape) -> WireField:
    return WireField(FieldKind.RECORD_LIST, shape)


# ── Encoding ─────────────────────────────────────────────────────────


def to_wire_format(
    state: Mapping[str, Any],
    method: str | None = None,
    schema: WireSchema | None = None,
) -> FlatFields:
    """Lower ``state`` into flat fields. Pure; ``state`` is not modified."""
    schema = schema or {}
    fields: FlatFields = {}
    for name, value in state.items():
        if value is None or value == "":
            continue
        fields[name] = _encode(name, value, schema.get(name))

    if method and method.upper() != "POST":
        fields[METHOD_FIELD] = method.upper()
    return fields


def _encode(name: str, value: Any, spec: WireField | None) -> FlatValue:
    if isinstance(value, FileUpload):
        return value
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return json.dumps(dict(value))
    if isinstance(value, Sequence):
        return json.dumps(_encode_list(name, value, spec))
    raise WireFormatError(name, f"cannot encode value of type {type(value).__name__}")


def _encode_list(name: str, items: Sequence[Any], spec: WireField | None) -> list[Any]:
    if any(isinstance(item, Record) for item in items):
        shape = spec.shape if spec is not None else None
        kept = [item for item in items if shape is None or not shape.is_blank(item)]
        if shape is None:
            return [asdict(item) for item in kept]
        return [shape.to_dict(item) for item in kept]
    if all(isinstance(item, str) for item in items):
        return [item for item in items if item.strip()]
    raise WireFormatError(name, "lists must hold only strings or only records")


# ── Decoding ─────────────────────────────────────────────────────────


def from_wire_format(fields: Mapping[str, FlatValue], schema: WireSchema) -> dict[str, Any]:
    """Lift flat fields back into typed state; the inverse of ``to_wire_format``.

    Fields absent from ``schema`` decode as text. ``_method`` is dropped.
    """
    state: dict[str, Any] = {}
    for name, raw in fields.items():
        if name == METHOD_FIELD:
            continue
        state[name] = _decode(name, raw, schema.get(name, TEXT))
    return state


def _decode(name: str, raw: FlatValue, spec: WireField) -> Any:
    if spec.kind is FieldKind.FILE:
        if not isinstance(raw, FileUpload):
            raise WireFormatError(name, "expected a file upload")
        return raw
    if isinstance(raw, FileUpload):
        raise WireFormatError(name, "unexpected file upload")

    match spec.kind:
        case FieldKind.TEXT:
            return raw
        case FieldKind.INTEGER:
            try:
                return int(raw)
            except ValueError:
                raise WireFormatError(name, f"'{raw}' is not an integer") from None
        case FieldKind.BOOLEAN:
            return _decode_bool(name, raw)
        case FieldKind.STRING_LIST:
            items = _load_list(name, raw)
            if not all(isinstance(item, str) for item in items):
                raise WireFormatError(name, "expected a JSON array of strings")
            return items
        case FieldKind.RECORD_LIST:
            if spec.shape is None:
                raise WireFormatError(name, "record list field has no shape")
            items = _load_list(name, raw)
            if not all(isinstance(item, Mapping) for item in items):
                raise WireFormatError(name, "expected a JSON array of objects")
            try:
                return [spec.shape.from_dict(item) for item in items]
            except TypeError as exc:
                raise WireFormatError(name, str(exc)) from exc
    raise WireFormatError(name, f"unsupported field kind {spec.kind}")


def _decode_bool(name: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in ("1", "true", "on"):
        return True
    if lowered in ("0", "false", "off"):
        return False
    raise WireFormatError(name, f"'{raw}' is not a boolean")


def _load_list(name: str, raw: str) -> list[Any]:
    try:
        decoded = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise WireFormatError(name, f"invalid JSON: {exc.msg}") from exc
    if not isinstance(decoded, list):
        raise WireFormatError(name, "expected a JSON array")
    return decoded
