"""Whole-card validation.

Each pass adds its failures to the ``errors`` mapping it is given and never
stops at the first one. Keys are human-readable and only meant for display.
"""
from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from .errors import ValidationError
from .model import Cardinality, Property
from .params import parse_int
from .values import as_text, as_texts

Errors = dict[str, ValidationError]


def check_mandatory(properties: Sequence[Property], errors: Errors) -> None:
    if not any(p.name == "version" for p in properties):
        errors["missing_property_version"] = ValidationError("missing mandatory property 'version'")


def check_properties(properties: Sequence[Property], errors: Errors) -> None:
    for i, p in enumerate(properties):
        try:
            p.validate()
        except ValidationError as exc:
            errors[f"{i}_{p.name}_validation"] = exc


def check_member_kind(properties: Sequence[Property], errors: Errors) -> None:
    """A card with ``member`` properties must be of kind ``group``."""
    if not any(p.name == "member" for p in properties):
        return
    kinds = [p for p in properties if p.name == "kind"]
    if not kinds:
        errors["member_kind_missing"] = ValidationError(
            "member property requires a kind property with the value 'group'"
        )
    elif as_text(kinds[0].value) != "group":
        errors["member_kind_not_group"] = ValidationError(
            f"member property requires kind 'group', but kind is {kinds[0].values()}"
        )


def check_cardinality(properties: Sequence[Property], errors: Errors) -> None:
    counts = Counter(p.name for p in properties)
    seen: set[str] = set()
    for p in properties:
        if p.name in seen or p.descriptor is None:
            continue
        seen.add(p.name)
        count = counts[p.name]
        cardinality = p.descriptor.cardinality
        if cardinality is Cardinality.MANY:
            ok = True
        elif cardinality is Cardinality.ONE_OR_MANY:
            ok = count >= 1
        elif cardinality is Cardinality.ZERO_OR_ONE:
            ok = count <= 1
        elif cardinality is Cardinality.EXACTLY_ONE:
            ok = count == 1
        else:
            errors[f"{p.name}_cardinality"] = ValidationError(
                f"unknown cardinality {cardinality!r} for {p.name}"
            )
            continue
        if not ok:
            errors[f"{p.name}_cardinality"] = ValidationError(
                f"cardinality of {p.name} is '{cardinality.value}', but found {count}"
            )


def _pid_sources(properties: Sequence[Property]) -> list[int]:
    # only "<local>.<source>" values refer to a clientpidmap entry
    out: list[int] = []
    for p in properties:
        for value in p.parameters.get("pid", []):
            parts = value.split(".")
            if len(parts) != 2:
                continue
            source = parse_int(parts[1])
            if source is not None and source not in out:
                out.append(source)
    return out


def _mapped_sources(properties: Sequence[Property]) -> set[int]:
    out: set[int] = set()
    for p in properties:
        if p.name != "clientpidmap":
            continue
        pair = as_texts(p.value)
        if pair is None or len(pair) != 2:
            continue
        source = parse_int(pair[0])
        if source is not None:
            out.add(source)
    return out


def check_pids(properties: Sequence[Property], errors: Errors) -> None:
    """Every pid source id needs a ``clientpidmap`` declaring it."""
    mapped = _mapped_sources(properties)
    for source in _pid_sources(properties):
        if source not in mapped:
            errors[f"pid_{source}_unmapped"] = ValidationError(
                f"pid source {source} has no matching clientpidmap"
            )


PASSES = (check_mandatory, check_properties, check_member_kind, check_cardinality, check_pids)


def validate_properties(properties: Sequence[Property]) -> Errors:
    errors: Errors = {}
    for check in PASSES:
        check(properties, errors)
    return errors
