from __future__ import annotations

from typing import Any

import pytest

from jcard.errors import ValidationError
from jcard.model import Property
from jcard.registry import descriptor_for
from jcard.values import decode_value


# ── helpers ────────────────────────────────────────────────────────────────────

def _prop(name: str, value: Any, type_: str = "text", **params: Any) -> Property:
    parameters = {k.replace("_", "-"): [v] if isinstance(v, str) else list(v) for k, v in params.items()}
    return Property(name, parameters, type_, decode_value(value), descriptor_for(name))


def _ok(p: Property) -> None:
    p.validate()


def _fails(p: Property, match: str | None = None) -> None:
    with pytest.raises(ValidationError, match=match):
        p.validate()


# ── descriptor checks ──────────────────────────────────────────────────────────

def test_missing_descriptor():
    p = Property("fn", {}, "text", decode_value("x"))
    _fails(p, "bad type info")


def test_mismatched_descriptor():
    p = Property("fn", {}, "text", decode_value("x"), descriptor_for("note"))
    _fails(p, "bad type info")


def test_error_message_prefix():
    with pytest.raises(ValidationError) as exc_info:
        _prop("version", "3.0").validate()
    assert str(exc_info.value).startswith("jCard error: ")


# ── general ────────────────────────────────────────────────────────────────────

def test_version():
    _ok(_prop("version", "4.0"))
    _fails(_prop("version", "3.0"), "4.0")
    _fails(_prop("version", "4.0", pref="1"), "parameters")


def test_kind():
    for kind in ("individual", "group", "org", "location"):
        _ok(_prop("kind", kind))
    _fails(_prop("kind", "robot"))


def test_source_and_xml():
    _ok(_prop("source", "ldap://ldap.example.com/cn=Babs%20Jensen", "uri"))
    _fails(_prop("source", "not a uri", "uri"))
    _ok(_prop("xml", "<a/>", altid="1"))
    _fails(_prop("xml", "<a/>", pref="1"), "unknown parameter")


# ── identification ─────────────────────────────────────────────────────────────

def test_fn_parameters():
    _ok(_prop("fn", "Simon", language="fr", pref="1"))
    _fails(_prop("fn", "Simon", label="x"), "unknown parameter")


def test_n_parameters():
    value = ["Stevenson", "John", "Philip,Paul", "Dr.", "Jr."]
    _ok(_prop("n", value, sort_as=["Stevenson", "John"], altid="1"))
    _fails(_prop("n", value, pref="1"), "unknown parameter")


def test_bday_and_anniversary():
    _ok(_prop("bday", "--02-03", "date-and-or-time"))
    _ok(_prop("bday", "circa 1800", "text"))
    _ok(_prop("anniversary", "2009-08-08T14:30:00-05:00", "date-and-or-time", calscale="gregorian"))
    _fails(_prop("bday", "circa 1800", "date-and-or-time"))
    _fails(_prop("bday", "--02-03", "uri"))
    _fails(_prop("bday", "--02-03", "date-and-or-time", pref="1"))


def test_gender():
    for value in ("", "M", "F", "O", "N", "U", ["M"], ["F", "grrrl"], ["", "it's complicated"]):
        _ok(_prop("gender", value))
    _fails(_prop("gender", "X"), "unknown gender")
    _fails(_prop("gender", ["M", "a", "b"]))
    _fails(_prop("gender", []))
    _fails(_prop("gender", 1))


def test_photo_requires_uri():
    _ok(_prop("photo", "http://www.example.com/pub/photos/jqpublic.gif", "uri", mediatype="image/gif"))
    _fails(_prop("photo", "jqpublic.gif", "uri"), "not a valid uri")


# ── delivery addressing ────────────────────────────────────────────────────────

def test_adr():
    value = ["", "", "123 Main Street", "Any Town", "CA", "91921-1234", "U.S.A."]
    _ok(_prop("adr", value, label="123 Main Street", geo="geo:12.3457,78.910", tz="-0500", type="home"))
    _fails(_prop("adr", value[:6]), "7 components")
    _fails(_prop("adr", value, "uri"))
    _fails(_prop("adr", "123 Main Street"))
    _fails(_prop("adr", value, geo="somewhere"), "geo")


# ── communications ─────────────────────────────────────────────────────────────

def test_tel():
    _ok(_prop("tel", "tel:+1-418-656-9254;ext=102", "uri", type=["work", "voice"], pref="1"))
    _fails(_prop("tel", "+1-418-656-9254", "uri"), "tel value is invalid")
    _fails(_prop("tel", "tel:+1-418-656-9254", "uri", type="mobile"))


def test_email():
    _ok(_prop("email", "jqpublic@xyz.example.com", type="work", pref="1"))
    _fails(_prop("email", "jqpublic"), "email value is invalid")
    _fails(_prop("email", "jqpublic@xyz.example.com", language="en"), "unknown parameter")


def test_impp_and_lang():
    _ok(_prop("impp", "xmpp:alice@example.com", "uri", pref="1"))
    _ok(_prop("lang", "fr", "language-tag", pref="1"))
    _fails(_prop("lang", "not a tag", "language-tag"), "unknown language")


# ── geographical ───────────────────────────────────────────────────────────────

def test_tz_and_geo():
    _ok(_prop("tz", "-05:00", "utc-offset"))
    _ok(_prop("tz", "Raleigh/North America", "text", mediatype="text/plain"))
    _ok(_prop("geo", "geo:37.386013,-122.082932", "uri"))
    _fails(_prop("geo", "Mountain View", "uri"), "geo")


# ── organizational ─────────────────────────────────────────────────────────────

def test_org():
    _ok(_prop("org", ["ABC, Inc.", "North American Division", "Marketing"], sort_as="ABC"))
    _ok(_prop("org", "Viagenie", type="work"))
    _fails(_prop("org", "Viagenie", sort_as="V"), "sort-as")


def test_logo_and_sound_accept_language():
    _ok(_prop("logo", "http://www.example.com/pub/logos/abccorp.jpg", "uri", language="en"))
    _ok(_prop("sound", "CID:JOHNQPUBLIC.part8.19960229T080000.xyzMail@example.com", "uri", language="en"))
    _fails(_prop("photo", "http://www.example.com/a.gif", "uri", language="en"))


def test_member():
    _ok(_prop("member", "urn:uuid:03a0e51f-d1aa-4385-8a53-e29025acd8af", "uri", pref="1", pid="1.1"))
    _fails(_prop("member", "urn:uuid:03a0e51f-d1aa-4385-8a53-e29025acd8af", "uri", type="work"))
    _fails(_prop("member", "Jane Doe", "uri"))


def test_related():
    _ok(_prop("related", "urn:uuid:f81d4fae-7dec-11d0-a765-00a0c91e6bf6", "uri", type="friend"))
    _ok(_prop("related", "Please contact my assistant Jane Doe", "text", type="contact", language="en"))
    _fails(_prop("related", "Jane", "text", mediatype="text/plain"))
    _fails(_prop("related", "Jane", "text", type="work"))
    _fails(_prop("related", "Jane", "date"), "uri' or 'text")


# ── explanatory ────────────────────────────────────────────────────────────────

def test_categories_and_note():
    _ok(_prop("categories", ["TRAVEL AGENT", "INTERNET"], type="work"))
    _ok(_prop("note", "This fax number is operational 0800 to 1715 EST, Mon-Fri.", language="en"))


def test_prodid_and_rev():
    _ok(_prop("prodid", "-//ONLINE DIRECTORY//NONSGML Version 1//EN"))
    _fails(_prop("prodid", "x", pref="1"))
    _ok(_prop("rev", "19951031T222710Z", "timestamp"))
    _fails(_prop("rev", "1995-10-31T22:27:10Z", "timestamp"), "timestamp")


def test_uid():
    _ok(_prop("uid", "urn:uuid:f81d4fae-7dec-11d0-a765-00a0c91e6bf6", "uri"))
    _ok(_prop("uid", "some opaque id", "text"))
    _fails(_prop("uid", "some opaque id", "uri"))
    _fails(_prop("uid", "1234", "integer"))


def test_clientpidmap():
    _ok(_prop("clientpidmap", ["1", "urn:uuid:3df403f4-5924-4bb7-b077-3c711d9eb34b"]))
    _fails(_prop("clientpidmap", ["0", "urn:uuid:3df403f4-5924-4bb7-b077-3c711d9eb34b"]), "integer")
    _fails(_prop("clientpidmap", ["x", "urn:uuid:3df403f4-5924-4bb7-b077-3c711d9eb34b"]))
    _fails(_prop("clientpidmap", ["1", "not a uri"]), "uri")
    _fails(_prop("clientpidmap", ["1"]), "pair")


# ── security, calendar ─────────────────────────────────────────────────────────

def test_key():
    _ok(_prop("key", "http://www.example.com/keys/jdoe.cer", "uri"))
    _ok(_prop("key", "-----BEGIN PGP PUBLIC KEY BLOCK-----", "text"))
    _fails(_prop("key", "jdoe.cer", "uri"))


def test_calendar_uris():
    for name in ("fburl", "caladruri", "caluri"):
        _ok(_prop(name, "http://www.example.com/busy/janedoe", "uri", pref="1", mediatype="text/calendar"))
        _fails(_prop(name, "janedoe", "uri"))
