"""One validation function per vCard 4.0 property (RFC 6350 section 6).

The functions are looked up by the ``validator`` key of a property's
:class:`~jcard.model.TypeDescriptor` through :data:`VALIDATORS`.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from . import params, syntax
from .errors import ValidationError
from .params import parse_int
from .temporal import validate_date_and_or_time, validate_timestamp
from .values import ListValue, TextValue, as_text, as_texts

if TYPE_CHECKING:
    from .model import Property

logger = logging.getLogger(__name__)

ParamCheck = Callable[[list[str]], None]

ALLOWED_KINDS = frozenset({"individual", "group", "org", "location"})
ALLOWED_GENDERS = frozenset({"", "M", "F", "O", "N", "U"})

ADR_COMPONENTS = (
    "post office box",
    "extended address",
    "street address",
    "locality",
    "region",
    "postal code",
    "country name",
)


# ── Helpers ────────────────────────────────────────────────────────────────────

def _text(p: Property) -> str:
    text = as_text(p.value)
    if text is None:
        raise ValidationError(f"{p.name} expects a text value, but got {p.values()}")
    return text


def _uri(p: Property) -> str:
    value = _text(p)
    if not syntax.validate_uri(value):
        raise ValidationError(f"'{value}' is not a valid uri")
    return value


def _no_params(p: Property) -> None:
    if p.parameters:
        raise ValidationError(f"{p.name} must not have parameters, but has {p.parameters}")


def _check_params(
    p: Property,
    specific: Mapping[str, ParamCheck] | None = None,
    fallback: Callable[[str, list[str]], None] | None = params.validate_default,
) -> None:
    """Run the property-specific check for each parameter, else ``fallback``."""
    specific = specific or {}
    for key, values in p.parameters.items():
        if key in specific:
            specific[key](values)
        elif fallback is not None:
            fallback(key, values)
        else:
            raise ValidationError(f"unknown parameter type: {key}")


def _sort_as(p: Property) -> ParamCheck:
    return lambda values: params.validate_sort_as(p.value, values)


_LANGUAGE = {"language": params.validate_language}
_MEDIATYPE = {"mediatype": params.validate_mediatype}


# ── General (6.1) ──────────────────────────────────────────────────────────────

def validate_version(p: Property) -> None:
    _no_params(p)
    value = _text(p)
    if value != "4.0":
        raise ValidationError(f"only version 4.0 is supported, but version is {value}")


def validate_source(p: Property) -> None:
    _uri(p)
    _check_params(p, _MEDIATYPE)


def validate_kind(p: Property) -> None:
    value = as_text(p.value)
    if value not in ALLOWED_KINDS:
        raise ValidationError(f"invalid kind value. Expected one of {sorted(ALLOWED_KINDS)} but got {p.values()}")
    _no_params(p)


def validate_xml(p: Property) -> None:
    _text(p)
    _check_params(p, {"altid": params.validate_altid}, fallback=None)


# ── Identification (6.2) ───────────────────────────────────────────────────────

def validate_fn(p: Property) -> None:
    _check_params(p, _LANGUAGE)


def validate_n(p: Property) -> None:
    _check_params(
        p,
        {"language": params.validate_language, "sort-as": _sort_as(p), "altid": params.validate_altid},
        fallback=None,
    )


def validate_nickname(p: Property) -> None:
    _check_params(p, _LANGUAGE)


def validate_photo(p: Property) -> None:
    _uri(p)
    _check_params(p, _MEDIATYPE)


def _validate_date_or_text(p: Property) -> None:
    if p.type == "date-and-or-time":
        value = _text(p)
        if not validate_date_and_or_time(value):
            raise ValidationError(f"'{value}' is not a valid date-and-or-time")
    elif p.type != "text":
        raise ValidationError(f"only 'text' and 'date-and-or-time' allowed, but got {p.type}")
    _check_params(p, {"altid": params.validate_altid, "calscale": params.validate_calscale}, fallback=None)


def validate_bday(p: Property) -> None:
    _validate_date_or_text(p)


def validate_anniversary(p: Property) -> None:
    _validate_date_or_text(p)


def validate_gender(p: Property) -> None:
    _no_params(p)
    if isinstance(p.value, TextValue):
        sex = p.value.value
    elif isinstance(p.value, ListValue):
        if len(p.value) not in (1, 2):
            raise ValidationError("gender has too many values, 1 or 2 expected")
        # the identity component is free text
        sex = as_text(p.value.items[0])
    else:
        raise ValidationError(f"gender must be text or a list of text, but got {p.values()}")
    if sex not in ALLOWED_GENDERS:
        raise ValidationError(f"unknown gender: {sex} is none of {sorted(ALLOWED_GENDERS)}")


# ── Delivery addressing (6.3) ──────────────────────────────────────────────────

def _validate_geo_param(values: list[str]) -> None:
    for v in values:
        if not syntax.validate_geo(v):
            raise ValidationError(f"invalid geo coordinates: {v}")


def validate_adr(p: Property) -> None:
    # label and tz are free text
    _check_params(p, {
        "label": lambda values: None,
        "tz": lambda values: None,
        "geo": _validate_geo_param,
        "language": params.validate_language,
    })
    if p.type != "text":
        raise ValidationError(f"type must be 'text' but is {p.type}")
    if not isinstance(p.value, ListValue):
        raise ValidationError(f"adr value must be structured, but is {p.values()}")
    if len(p.value) != len(ADR_COMPONENTS):
        raise ValidationError(
            f"adr must have {len(ADR_COMPONENTS)} components ({', '.join(ADR_COMPONENTS)}), "
            f"but has {len(p.value)}"
        )
    components = p.values()
    if components[0] or components[1]:
        logger.debug("first two components of adr should be empty, but are %s", components[:2])


# ── Communications (6.4) ───────────────────────────────────────────────────────

def validate_tel(p: Property) -> None:
    value = _text(p)
    if not syntax.validate_tel(value):
        raise ValidationError(f"tel value is invalid (RFC 3966 section 3): {value}")
    _check_params(p, {"type": lambda values: params.validate_type(values, params.TEL_TYPES)})


def validate_email(p: Property) -> None:
    value = _text(p)
    if not syntax.validate_email(value):
        raise ValidationError(f"email value is invalid: {value}")
    _check_params(p)


def validate_impp(p: Property) -> None:
    _uri(p)
    _check_params(p, _MEDIATYPE)


def validate_lang(p: Property) -> None:
    value = _text(p)
    if not syntax.validate_language_tag(value):
        raise ValidationError(f"unknown language (RFC 5646): {value}")
    _check_params(p)


# ── Geographical (6.5) ─────────────────────────────────────────────────────────

def validate_tz(p: Property) -> None:
    _check_params(p, _MEDIATYPE)


def validate_geo(p: Property) -> None:
    value = _text(p)
    if not syntax.validate_geo(value):
        raise ValidationError(f"valid geo uri expected, but got {value}")
    _check_params(p, _MEDIATYPE)


# ── Organizational (6.6) ───────────────────────────────────────────────────────

def validate_title(p: Property) -> None:
    _check_params(p, _LANGUAGE)


def validate_role(p: Property) -> None:
    _check_params(p, _LANGUAGE)


def validate_logo(p: Property) -> None:
    _uri(p)
    _check_params(p, {**_LANGUAGE, **_MEDIATYPE})


def validate_org(p: Property) -> None:
    _check_params(p, {"language": params.validate_language, "sort-as": _sort_as(p)})


def validate_member(p: Property) -> None:
    _uri(p)
    _check_params(p, {
        "mediatype": params.validate_mediatype,
        "pref": params.validate_pref,
        "pid": params.validate_pid,
        "altid": params.validate_altid,
    }, fallback=None)


def validate_related(p: Property) -> None:
    if p.type == "uri":
        _uri(p)
        _check_params(p, _MEDIATYPE, fallback=params.validate_related)
    elif p.type == "text":
        _text(p)
        _check_params(p, _LANGUAGE, fallback=params.validate_related)
    else:
        raise ValidationError(f"type 'uri' or 'text' expected, but is {p.type}")


# ── Explanatory (6.7) ──────────────────────────────────────────────────────────

def validate_categories(p: Property) -> None:
    _check_params(p)


def validate_note(p: Property) -> None:
    _check_params(p, _LANGUAGE)


def validate_prodid(p: Property) -> None:
    _no_params(p)


def validate_rev(p: Property) -> None:
    _no_params(p)
    value = _text(p)
    if not validate_timestamp(value):
        raise ValidationError(f"expected valid timestamp, but got {value}")


def validate_sound(p: Property) -> None:
    _uri(p)
    _check_params(p, {**_LANGUAGE, **_MEDIATYPE})


def validate_uid(p: Property) -> None:
    _no_params(p)
    if p.type == "uri":
        value = _text(p)
        if not syntax.validate_uri(value):
            raise ValidationError(f"valid uri expected, but got {value}")
    elif p.type != "text":
        raise ValidationError(f"type 'uri' or 'text' expected, but is {p.type}")


def validate_clientpidmap(p: Property) -> None:
    _no_params(p)
    pair = as_texts(p.value)
    if pair is None or len(pair) != 2:
        raise ValidationError(f"a pair of values expected (digit, uri), but got {p.values()}")
    source_id = parse_int(pair[0])
    if source_id is None or source_id < 1:
        raise ValidationError(
            "the first field is a small integer (>0) corresponding to the second field "
            f"of a PID parameter instance, but got {pair[0]}"
        )
    if not syntax.validate_uri(pair[1]):
        raise ValidationError(f"the second field must be a uri, but is {pair[1]}")


def validate_url(p: Property) -> None:
    _uri(p)
    _check_params(p, _MEDIATYPE)


# ── Security (6.8) ─────────────────────────────────────────────────────────────

def validate_key(p: Property) -> None:
    if p.type == "uri":
        _uri(p)
    _check_params(p)


# ── Calendar (6.9) ─────────────────────────────────────────────────────────────

def validate_fburl(p: Property) -> None:
    _uri(p)
    _check_params(p, _MEDIATYPE)


def validate_caladruri(p: Property) -> None:
    _uri(p)
    _check_params(p, _MEDIATYPE)


def validate_caluri(p: Property) -> None:
    _uri(p)
    _check_params(p, _MEDIATYPE)


VALIDATORS: Mapping[str, Callable[[Property], None]] = MappingProxyType({
    "adr": validate_adr,
    "anniversary": validate_anniversary,
    "bday": validate_bday,
    "caladruri": validate_caladruri,
    "caluri": validate_caluri,
    "categories": validate_categories,
    "clientpidmap": validate_clientpidmap,
    "email": validate_email,
    "fburl": validate_fburl,
    "fn": validate_fn,
    "gender": validate_gender,
    "geo": validate_geo,
    "impp": validate_impp,
    "key": validate_key,
    "kind": validate_kind,
    "lang": validate_lang,
    "logo": validate_logo,
    "member": validate_member,
    "n": validate_n,
    "nickname": validate_nickname,
    "note": validate_note,
    "org": validate_org,
    "photo": validate_photo,
    "prodid": validate_prodid,
    "related": validate_related,
    "rev": validate_rev,
    "role": validate_role,
    "sound": validate_sound,
    "source": validate_source,
    "tel": validate_tel,
    "title": validate_title,
    "tz": validate_tz,
    "uid": validate_uid,
    "url": validate_url,
    "version": validate_version,
    "xml": validate_xml,
})
