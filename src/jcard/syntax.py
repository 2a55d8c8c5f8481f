from __future__ import annotations

import logging
import re

import langcodes

logger = logging.getLogger(__name__)

# ── URI (RFC 3986) ─────────────────────────────────────────────────────────────

_PCT = r"%[0-9A-F]{2}"
_URI = re.compile(
    r"([a-z0-9+.\-]+):"
    r"(?:"
    rf"//(?:((?:[a-z0-9\-._~!$&'()*+,;=:]|{_PCT})*)@)?"
    rf"((?:[a-z0-9\-._~!$&'()*+,;=]|{_PCT})*)"
    r"(?::(\d*))?"
    rf"(/(?:[a-z0-9\-._~!$&'()*+,;=:@/]|{_PCT})*)?"
    rf"|(/?(?:[a-z0-9\-._~!$&'()*+,;=:@]|{_PCT})+(?:[a-z0-9\-._~!$&'()*+,;=:@/]|{_PCT})*)?"
    r")"
    rf"(?:\?((?:[a-z0-9\-._~!$&'()*+,;=:/?@]|{_PCT})*))?"
    rf"(?:#((?:[a-z0-9\-._~!$&'()*+,;=:/?@]|{_PCT})*))?",
    re.IGNORECASE,
)


def validate_uri(value: str) -> bool:
    return _URI.fullmatch(value) is not None


# ── tel URI (RFC 3966 section 3) ───────────────────────────────────────────────

_TEL_GLOBAL = r"\+[\d().\-]*\d[\d().\-]*"
_TEL_LOCAL = r"[0-9A-F*#().\-]*[0-9A-F*#][0-9A-F*#().\-]*"
_TEL_PARAM = r"(?:;[a-z\d\-]+(?:=(?:[a-z\d\[\]/:&+$_!~*'().\-]|%[\dA-F]{2})+)?)"
_TEL_DOMAIN = r"(?:[a-z0-9]\.|[a-z0-9][a-z0-9\-]*[a-z0-9]\.)*(?:[a-z]|[a-z][a-z0-9\-]*[a-z0-9])"
_TEL = re.compile(
    rf"tel:((?:{_TEL_GLOBAL}|{_TEL_LOCAL}{_TEL_PARAM}*;phone-context=(?:{_TEL_GLOBAL}|{_TEL_DOMAIN})){_TEL_PARAM}*"
    rf"(?:,(?:{_TEL_GLOBAL}|{_TEL_LOCAL}{_TEL_PARAM}*;phone-context={_TEL_GLOBAL}){_TEL_PARAM}*)*)"
)


def validate_tel(value: str) -> bool:
    """Global numbers start with ``+``; local ones need a ``phone-context``."""
    return _TEL.fullmatch(value) is not None


# ── email ──────────────────────────────────────────────────────────────────────

_EMAIL = re.compile(r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}")


def validate_email(value: str) -> bool:
    return _EMAIL.fullmatch(value) is not None


# ── geo ────────────────────────────────────────────────────────────────────────

_GEO = re.compile(r"(?:geo:)?-?\d+\.\d+,\s*-?\d+\.\d+")


def validate_geo(value: str) -> bool:
    # geo URI parameters (crs, u) are not supported yet
    if _GEO.fullmatch(value) is None:
        logger.debug("unknown geo schema: %s", value)
        return False
    return True


# ── language tag (RFC 5646) ────────────────────────────────────────────────────

def validate_language_tag(value: str) -> bool:
    return langcodes.tag_is_valid(value)


# ── media type ─────────────────────────────────────────────────────────────────

_TOKEN = r"[0-9A-Za-z!#$%&'*+.^_`|~\-]+"
_MEDIA_TYPE = re.compile(
    rf"(?:application|audio|font|example|image|message|model|multipart|text|video|x-{_TOKEN})"
    rf"/{_TOKEN}"
    rf"(?:\s*;\s*{_TOKEN}=(?:{_TOKEN}|\"[^\"]*\"))*"
)


def validate_media_type(value: str) -> bool:
    return _MEDIA_TYPE.fullmatch(value) is not None
