"""Helpers that build a property, validate it and append it to a card.

Every ``add_*`` function returns the appended :class:`Property` or raises the
property's :class:`~jcard.errors.ValidationError`, in which case the card is
left untouched.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Union

from .card import Card
from .errors import ValidationError
from .model import Property
from .normalize import normalize_tel
from .registry import descriptor_for
from .syntax import validate_uri
from .temporal import validate_date_and_or_time, validate_utc_offset
from .values import decode_value

Params = Mapping[str, Union[str, Sequence[str]]]


def _params(params: Params | None) -> dict[str, list[str]]:
    """Parameter values as lists of strings; a key with an empty list is left out."""
    out: dict[str, list[str]] = {}
    for key, value in (params or {}).items():
        if isinstance(value, str):
            out[key] = [value]
            continue
        if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
            raise ValidationError(f"parameter {key} must be a string or a list of strings, but is {value!r}")
        if value:
            out[key] = list(value)
    return out


def _add(card: Card, name: str, type_: str, value: Any, params: Params | None) -> Property:
    prop = Property(
        name=name,
        parameters=_params(params),
        type=type_,
        value=decode_value(value),
        descriptor=descriptor_for(name),
    )
    card.append(prop)
    return prop


def _uri_or_text(value: str) -> str:
    return "uri" if validate_uri(value) else "text"


def _date_or_text(value: str) -> str:
    return "date-and-or-time" if validate_date_and_or_time(value) else "text"


# ── General ────────────────────────────────────────────────────────────────────

def add_version(card: Card, value: str = "4.0") -> Property:
    return _add(card, "version", "text", value, None)


def add_source(card: Card, uri: str, params: Params | None = None) -> Property:
    return _add(card, "source", "uri", uri, params)


def add_kind(card: Card, kind: str) -> Property:
    return _add(card, "kind", "text", kind, None)


def add_xml(card: Card, value: str, params: Params | None = None) -> Property:
    return _add(card, "xml", "text", value, params)


# ── Identification ─────────────────────────────────────────────────────────────

def add_fn(card: Card, name: str, params: Params | None = None) -> Property:
    return _add(card, "fn", "text", name, params)


def add_n(card: Card, components: Sequence[Any], params: Params | None = None) -> Property:
    """``components``: family, given, additional, prefixes, suffixes."""
    return _add(card, "n", "text", list(components), params)


def add_nickname(card: Card, nickname: str | Sequence[str], params: Params | None = None) -> Property:
    value = nickname if isinstance(nickname, str) else list(nickname)
    return _add(card, "nickname", "text", value, params)


def add_photo(card: Card, uri: str, params: Params | None = None) -> Property:
    return _add(card, "photo", "uri", uri, params)


def add_bday(card: Card, value: str, params: Params | None = None) -> Property:
    return _add(card, "bday", _date_or_text(value), value, params)


def add_anniversary(card: Card, value: str, params: Params | None = None) -> Property:
    return _add(card, "anniversary", _date_or_text(value), value, params)


def add_gender(card: Card, sex: str, identity: str | None = None) -> Property:
    value = sex if identity is None else [sex, identity]
    return _add(card, "gender", "text", value, None)


# ── Delivery addressing ────────────────────────────────────────────────────────

def add_adr(card: Card, components: Sequence[Any], params: Params | None = None) -> Property:
    """``components``: po box, extended, street, locality, region, postal code, country."""
    return _add(card, "adr", "text", list(components), params)


# ── Communications ─────────────────────────────────────────────────────────────

def add_tel(card: Card, number: str, params: Params | None = None) -> Property:
    return _add(card, "tel", "uri", normalize_tel(number), params)


def add_email(card: Card, address: str, params: Params | None = None) -> Property:
    return _add(card, "email", "text", address, params)


def add_impp(card: Card, uri: str, params: Params | None = None) -> Property:
    return _add(card, "impp", "uri", uri, params)


def add_lang(card: Card, tag: str, params: Params | None = None) -> Property:
    return _add(card, "lang", "language-tag", tag, params)


# ── Geographical ───────────────────────────────────────────────────────────────

def add_tz(card: Card, value: str, params: Params | None = None) -> Property:
    if validate_uri(value):
        type_ = "uri"
    elif validate_utc_offset(value):
        type_ = "utc-offset"
    else:
        type_ = "text"
    return _add(card, "tz", type_, value, params)


def add_geo(card: Card, uri: str, params: Params | None = None) -> Property:
    return _add(card, "geo", "uri", uri, params)


# ── Organizational ─────────────────────────────────────────────────────────────

def add_title(card: Card, title: str, params: Params | None = None) -> Property:
    return _add(card, "title", "text", title, params)


def add_role(card: Card, role: str, params: Params | None = None) -> Property:
    return _add(card, "role", "text", role, params)


def add_logo(card: Card, uri: str, params: Params | None = None) -> Property:
    return _add(card, "logo", "uri", uri, params)


def add_org(card: Card, units: str | Sequence[str], params: Params | None = None) -> Property:
    value = units if isinstance(units, str) else list(units)
    return _add(card, "org", "text", value, params)


def add_member(card: Card, uri: str, params: Params | None = None) -> Property:
    return _add(card, "member", "uri", uri, params)


def add_related(card: Card, value: str, params: Params | None = None) -> Property:
    return _add(card, "related", _uri_or_text(value), value, params)


# ── Explanatory ────────────────────────────────────────────────────────────────

def add_categories(card: Card, categories: Sequence[str], params: Params | None = None) -> Property:
    return _add(card, "categories", "text", list(categories), params)


def add_note(card: Card, note: str, params: Params | None = None) -> Property:
    return _add(card, "note", "text", note, params)


def add_prodid(card: Card, value: str) -> Property:
    return _add(card, "prodid", "text", value, None)


def add_rev(card: Card, timestamp: str) -> Property:
    return _add(card, "rev", "timestamp", timestamp, None)


def add_sound(card: Card, uri: str, params: Params | None = None) -> Property:
    return _add(card, "sound", "uri", uri, params)


def add_uid(card: Card, value: str) -> Property:
    return _add(card, "uid", _uri_or_text(value), value, None)


def add_clientpidmap(card: Card, source_id: int | str, uri: str) -> Property:
    return _add(card, "clientpidmap", "text", [str(source_id), uri], None)


def add_url(card: Card, uri: str, params: Params | None = None) -> Property:
    return _add(card, "url", "uri", uri, params)


# ── Security ───────────────────────────────────────────────────────────────────

def add_key(card: Card, value: str, params: Params | None = None) -> Property:
    return _add(card, "key", _uri_or_text(value), value, params)


# ── Calendar ───────────────────────────────────────────────────────────────────

def add_fburl(card: Card, uri: str, params: Params | None = None) -> Property:
    return _add(card, "fburl", "uri", uri, params)


def add_caladruri(card: Card, uri: str, params: Params | None = None) -> Property:
    return _add(card, "caladruri", "uri", uri, params)


def add_caluri(card: Card, uri: str, params: Params | None = None) -> Property:
    return _add(card, "caluri", "uri", uri, params)
