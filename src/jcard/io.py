from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .card import Card
from .errors import DecodeError
from .model import Property
from .registry import descriptor_for
from .values import ListValue, decode_value, to_python

logger = logging.getLogger(__name__)

# ── Structure ──────────────────────────────────────────────────────────────────
#
# A jCard is ["vcard", [property, ...]] and every property is
#
#   [name, {parameter: "value" | ["value", ...]}, type, value, ...]
#
# More than one value after the type makes the value an implicit array.


def _reject_constant(name: str) -> Any:
    raise DecodeError(f"number out of range in jCard: {name}")


def _decode_parameters(raw: dict[str, Any]) -> dict[str, list[str]]:
    """Strings only; anything else inside a parameter is dropped."""
    out: dict[str, list[str]] = {}
    for key, value in raw.items():
        if isinstance(value, str):
            out[key] = [value]
        elif isinstance(value, list):
            strings = [v for v in value if isinstance(v, str)]
            if strings:
                out[key] = strings
    return out


def _decode_property(raw: Any, index: int) -> Property:
    if not isinstance(raw, list):
        raise DecodeError(f"property {index} is not an array")
    if len(raw) < 4:
        raise DecodeError(f"property {index} needs at least 4 elements (name, parameters, type, value), got {len(raw)}")
    name, parameters, type_, *values = raw
    if not isinstance(name, str):
        raise DecodeError(f"property {index}: name must be a string, got {name!r}")
    if not isinstance(parameters, dict):
        raise DecodeError(f"property {index} ({name}): parameters must be an object")
    if not isinstance(type_, str):
        raise DecodeError(f"property {index} ({name}): type must be a string, got {type_!r}")
    if len(values) == 1:
        value = decode_value(values[0])
    else:
        value = ListValue(tuple(decode_value(v, 1) for v in values))
    return Property(name=name, parameters=_decode_parameters(parameters), type=type_, value=value)


def decode_document(document: Any) -> Card:
    """Build a :class:`Card` from an already parsed JSON document."""
    if not isinstance(document, list) or len(document) != 2:
        raise DecodeError("a jCard must be an array of two elements")
    if document[0] != "vcard":
        raise DecodeError(f"a jCard must start with 'vcard', got {document[0]!r}")
    if not isinstance(document[1], list):
        raise DecodeError("the properties of a jCard must be an array")

    properties = [_decode_property(raw, i) for i, raw in enumerate(document[1])]
    for p in properties:
        p.descriptor = descriptor_for(p.name)
    logger.debug("decoded %d properties", len(properties))
    return Card(properties)


# ── Public API ─────────────────────────────────────────────────────────────────

def loads(data: str | bytes) -> Card:
    """Decode a jCard document. Nothing is validated beyond its structure."""
    try:
        document = json.loads(data, parse_constant=_reject_constant)
    except ValueError as exc:
        raise DecodeError(f"invalid JSON: {exc}") from exc
    return decode_document(document)


def read_jcard_file(path: Path) -> Card:
    return loads(Path(path).read_bytes())


def _encode_property(p: Property) -> list[Any]:
    parameters = {k: v[0] if len(v) == 1 else list(v) for k, v in p.parameters.items()}
    return [p.name, parameters, p.type, to_python(p.value)]


def dumps(card: Card, indent: int | None = None) -> str:
    document = ["vcard", [_encode_property(p) for p in card]]
    return json.dumps(document, indent=indent, ensure_ascii=False)


def write_jcard_file(card: Card, path: Path, indent: int | None = None) -> None:
    Path(path).write_text(dumps(card, indent=indent) + "\n", encoding="utf-8")
