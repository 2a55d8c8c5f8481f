"""The table of known vCard 4.0 properties.

Built once at import time and read-only afterwards.
"""
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .errors import DecodeError
from .model import Cardinality, TypeDescriptor
from .properties import VALIDATORS

_RFC = "https://www.rfc-editor.org/rfc/rfc6350#section-"

# name, cardinality, RFC 6350 section
_TABLE = (
    ("source", Cardinality.MANY, "6.1.3"),
    ("kind", Cardinality.ZERO_OR_ONE, "6.1.4"),
    ("xml", Cardinality.MANY, "6.1.5"),
    ("fn", Cardinality.ONE_OR_MANY, "6.2.1"),
    ("n", Cardinality.ZERO_OR_ONE, "6.2.2"),
    ("nickname", Cardinality.MANY, "6.2.3"),
    ("photo", Cardinality.MANY, "6.2.4"),
    ("bday", Cardinality.ZERO_OR_ONE, "6.2.5"),
    ("anniversary", Cardinality.ZERO_OR_ONE, "6.2.6"),
    ("gender", Cardinality.ZERO_OR_ONE, "6.2.7"),
    ("adr", Cardinality.MANY, "6.3.1"),
    ("tel", Cardinality.MANY, "6.4.1"),
    ("email", Cardinality.MANY, "6.4.2"),
    ("impp", Cardinality.MANY, "6.4.3"),
    ("lang", Cardinality.MANY, "6.4.4"),
    ("tz", Cardinality.MANY, "6.5.1"),
    ("geo", Cardinality.MANY, "6.5.2"),
    ("title", Cardinality.MANY, "6.6.1"),
    ("role", Cardinality.MANY, "6.6.2"),
    ("logo", Cardinality.MANY, "6.6.3"),
    ("org", Cardinality.MANY, "6.6.4"),
    ("member", Cardinality.MANY, "6.6.5"),
    ("related", Cardinality.MANY, "6.6.6"),
    ("categories", Cardinality.MANY, "6.7.1"),
    ("note", Cardinality.MANY, "6.7.2"),
    ("prodid", Cardinality.ZERO_OR_ONE, "6.7.3"),
    ("rev", Cardinality.ZERO_OR_ONE, "6.7.4"),
    ("sound", Cardinality.MANY, "6.7.5"),
    ("uid", Cardinality.ZERO_OR_ONE, "6.7.6"),
    ("clientpidmap", Cardinality.MANY, "6.7.7"),
    ("url", Cardinality.MANY, "6.7.8"),
    ("version", Cardinality.EXACTLY_ONE, "6.7.9"),
    ("key", Cardinality.MANY, "6.8.1"),
    ("fburl", Cardinality.MANY, "6.9.1"),
    ("caladruri", Cardinality.MANY, "6.9.2"),
    ("caluri", Cardinality.MANY, "6.9.3"),
)


def _build() -> Mapping[str, TypeDescriptor]:
    table: dict[str, TypeDescriptor] = {}
    for name, cardinality, section in _TABLE:
        if name not in VALIDATORS:
            raise RuntimeError(f"no validator registered for {name}")
        table[name] = TypeDescriptor(name, cardinality, _RFC + section, validator=name)
    return MappingProxyType(table)


REGISTRY: Mapping[str, TypeDescriptor] = _build()


def descriptor_for(name: str) -> TypeDescriptor:
    try:
        return REGISTRY[name]
    except KeyError:
        raise DecodeError(f"unknown property type: {name}") from None
