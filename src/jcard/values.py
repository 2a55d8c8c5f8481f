"""Property values as a tagged union.

A jCard property value is one of null, boolean, number, string or an array
mixing any of those. Arrays may nest, but never deeper than ``MAX_DEPTH``
levels; anything deeper is rejected while decoding.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Union

from .errors import DecodeError

MAX_DEPTH = 3


@dataclass(frozen=True)
class NullValue:
    pass


@dataclass(frozen=True)
class BoolValue:
    value: bool


@dataclass(frozen=True)
class NumberValue:
    value: float


@dataclass(frozen=True)
class TextValue:
    value: str


@dataclass(frozen=True)
class ListValue:
    items: tuple[VariantValue, ...] = ()

    def __len__(self) -> int:
        return len(self.items)


VariantValue = Union[NullValue, BoolValue, NumberValue, TextValue, ListValue]


# ── Decoding ───────────────────────────────────────────────────────────────────

def decode_value(value: Any, depth: int = 0) -> VariantValue:
    """Turn a value produced by ``json.loads`` into a :data:`VariantValue`.

    Tuples are accepted alongside lists so builders can pass either.
    """
    if value is None:
        return NullValue()
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return BoolValue(value)
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            raise DecodeError("number out of range in jCard value") from None
        if not math.isfinite(number):
            raise DecodeError(f"number out of range in jCard value: {value}")
        return NumberValue(number)
    if isinstance(value, str):
        return TextValue(value)
    if isinstance(value, (list, tuple)):
        if depth == MAX_DEPTH:
            raise DecodeError("structured value too deep")
        return ListValue(tuple(decode_value(v, depth + 1) for v in value))
    raise DecodeError(f"unknown JSON datatype in jCard value: {type(value).__name__}")


# ── Reading ────────────────────────────────────────────────────────────────────

def format_number(value: float) -> str:
    """Shortest decimal text that reads back as ``value``, never in exponent form."""
    return format(Decimal(repr(value)).normalize(), "f")


def flatten(value: VariantValue) -> list[str]:
    out: list[str] = []
    _append_strings(value, out)
    return out


def _append_strings(value: VariantValue, out: list[str]) -> None:
    if isinstance(value, NullValue):
        out.append("")
    elif isinstance(value, BoolValue):
        out.append("true" if value.value else "false")
    elif isinstance(value, NumberValue):
        out.append(format_number(value.value))
    elif isinstance(value, TextValue):
        out.append(value.value)
    elif isinstance(value, ListValue):
        for item in value.items:
            _append_strings(item, out)
    else:
        raise TypeError(f"not a variant value: {value!r}")


def to_python(value: VariantValue) -> Any:
    """Inverse of :func:`decode_value`; integral numbers come back as ``int``."""
    if isinstance(value, NullValue):
        return None
    if isinstance(value, BoolValue):
        return value.value
    if isinstance(value, NumberValue):
        n = value.value
        return int(n) if n.is_integer() else n
    if isinstance(value, TextValue):
        return value.value
    if isinstance(value, ListValue):
        return [to_python(item) for item in value.items]
    raise TypeError(f"not a variant value: {value!r}")


def as_text(value: VariantValue) -> str | None:
    """The string of a text value, ``None`` for every other kind."""
    if isinstance(value, TextValue):
        return value.value
    return None


def as_texts(value: VariantValue) -> list[str] | None:
    """Components of a flat array of strings, ``None`` if it is anything else."""
    if not isinstance(value, ListValue):
        return None
    out: list[str] = []
    for item in value.items:
        if not isinstance(item, TextValue):
            return None
        out.append(item.value)
    return out
