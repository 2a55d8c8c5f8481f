from __future__ import annotations

import pytest

from jcard.errors import ValidationError
from jcard.params import (
    TEL_TYPES,
    parse_int,
    validate_calscale,
    validate_default,
    validate_language,
    validate_mediatype,
    validate_pid,
    validate_pref,
    validate_related,
    validate_sort_as,
    validate_type,
)
from jcard.values import TextValue, decode_value


def test_parse_int():
    assert parse_int("42") == 42
    assert parse_int("-3") == -3
    assert parse_int("4.2") is None
    assert parse_int(" 1") is None


def test_pref():
    validate_pref(["1"])
    validate_pref(["100"])
    for bad in (["101"], ["-1"], ["1", "2"], ["one"], []):
        with pytest.raises(ValidationError):
            validate_pref(bad)


def test_pid():
    validate_pid(["1", "1.2", "3.4.5"])
    for bad in (["1.a"], ["1..2"], [".1"], ["a"]):
        with pytest.raises(ValidationError, match="PID"):
            validate_pid(bad)


def test_type_default_and_tel():
    validate_type(["work", "home"])
    with pytest.raises(ValidationError):
        validate_type(["cell"])
    validate_type(["cell", "voice"], TEL_TYPES)


def test_mediatype():
    validate_mediatype(["text/plain"])
    with pytest.raises(ValidationError):
        validate_mediatype(["text/plain", "garbage"])


def test_language():
    validate_language(["en"])
    with pytest.raises(ValidationError, match="only one"):
        validate_language(["en", "fr"])
    with pytest.raises(ValidationError):
        validate_language(["not a tag"])


def test_calscale():
    validate_calscale(["gregorian"])
    with pytest.raises(ValidationError, match="gregorian"):
        validate_calscale(["julian"])


def test_sort_as():
    value = decode_value(["Stevenson", "John", "Philip,Paul", "Dr.", "Jr."])
    validate_sort_as(value, ["Stevenson", "John"])
    with pytest.raises(ValidationError):
        validate_sort_as(decode_value(["a"]), ["a", "b"])
    with pytest.raises(ValidationError):
        validate_sort_as(TextValue("Viagenie"), ["Viagenie"])


def test_default_dispatch():
    validate_default("altid", ["anything"])
    validate_default("pid", ["1.1"])
    with pytest.raises(ValidationError, match="unknown parameter type: label"):
        validate_default("label", ["x"])


def test_related_dispatch():
    validate_related("type", ["friend", "co-worker"])
    validate_related("pref", ["1"])
    with pytest.raises(ValidationError):
        validate_related("type", ["work"])
    with pytest.raises(ValidationError):
        validate_related("mediatype", ["text/plain"])


def test_sort_as_counts_top_level_components():
    value = decode_value(["Perreault", "Simon", "", "", ["ing. jr", "M.Sc."]])
    validate_sort_as(value, ["Perreault", "Simon", "", "", "ing"])
    with pytest.raises(ValidationError):
        validate_sort_as(value, ["a", "b", "c", "d", "e", "f"])
