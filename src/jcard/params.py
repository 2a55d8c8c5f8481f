"""Validators for property parameters (RFC 6350 section 5).

Every validator takes the list of values of one parameter and raises
:class:`ValidationError` on the first value it cannot accept.
"""
from __future__ import annotations

import re
from collections.abc import Iterable

from .errors import ValidationError
from .syntax import validate_language_tag, validate_media_type
from .values import ListValue, VariantValue

DEFAULT_TYPES = frozenset({"work", "home"})

TEL_TYPES = frozenset({
    "home", "work", "text", "voice", "fax", "cell", "video", "pager", "textphone",
})

RELATED_TYPES = frozenset({
    "", "contact", "acquaintance", "friend", "met", "co-worker", "colleague",
    "co-resident", "neighbor", "child", "parent", "sibling", "spouse", "kin",
    "muse", "crush", "date", "sweetheart", "me", "agent", "emergency",
})

_PID = re.compile(r"\d+(?:\.\d+)*")
_INTEGER = re.compile(r"[+-]?\d+")


def parse_int(text: str) -> int | None:
    """Strict decimal integer; ``None`` when ``text`` is anything else."""
    if _INTEGER.fullmatch(text) is None:
        return None
    return int(text)


def validate_pref(values: list[str]) -> None:
    if len(values) != 1:
        raise ValidationError(f"only one value (1-100) allowed for pref, but is {values}")
    pref = parse_int(values[0])
    if pref is None or not 0 <= pref <= 100:
        raise ValidationError(f"pref must be an integer between 0 and 100 but is {values[0]}")


def validate_pid(values: list[str]) -> None:
    for v in values:
        if _PID.fullmatch(v) is None:
            raise ValidationError(f"PID value invalid. Positive <int>.<int> but is {v}")


def validate_altid(values: list[str]) -> None:
    # any value is acceptable, its presence is enough
    return None


def validate_type(values: list[str], allowed: Iterable[str] = DEFAULT_TYPES) -> None:
    allowed = frozenset(allowed)
    for v in values:
        if v not in allowed:
            raise ValidationError(f"type must be one of {'|'.join(sorted(allowed))}, but is {v}")


def validate_mediatype(values: list[str]) -> None:
    for v in values:
        if not validate_media_type(v):
            raise ValidationError(f"invalid media type: {v}")


def validate_language(values: list[str]) -> None:
    if len(values) > 1:
        raise ValidationError(f"only one language tag expected, but got {len(values)}")
    for v in values:
        if not validate_language_tag(v):
            raise ValidationError(f"unknown language (RFC 5646): {v}")


def validate_calscale(values: list[str]) -> None:
    for v in values:
        if v != "gregorian":
            raise ValidationError(f"can only handle gregorian calendar, but got {v}")


def validate_sort_as(value: VariantValue, values: list[str]) -> None:
    """SORT-AS may not name more components than the structured value has."""
    if not isinstance(value, ListValue):
        raise ValidationError("sort-as requires a structured value")
    if len(values) > len(value):
        raise ValidationError(
            f"sort-as has {len(values)} values but the property has only {len(value)} components"
        )


def validate_default(key: str, values: list[str]) -> None:
    """Parameters shared by most properties: type, pref, pid and altid."""
    if key == "type":
        validate_type(values)
    elif key == "pref":
        validate_pref(values)
    elif key == "pid":
        validate_pid(values)
    elif key == "altid":
        validate_altid(values)
    else:
        raise ValidationError(f"unknown parameter type: {key}")


def validate_related(key: str, values: list[str]) -> None:
    if key == "type":
        validate_type(values, RELATED_TYPES)
    elif key in ("pref", "pid", "altid"):
        validate_default(key, values)
    else:
        raise ValidationError(f"unknown parameter type: {key}")
