"""Cards for people found in a directory service.

A :class:`Person` is the flat record an LDAP ``inetOrgPerson`` entry yields
(RFC 2798); :func:`card_from_person` turns it into a minimal card.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from . import builders
from .card import Card
from .errors import ValidationError
from .model import Property
from .registry import descriptor_for
from .values import TextValue

logger = logging.getLogger(__name__)

# (attribute, tel parameters)
_PHONES = (
    ("mobile", {"type": ["voice", "cell"], "pref": ["1"]}),
    ("telephone_number", {"type": ["work", "voice"], "pref": ["2"]}),
    ("facsimile_telephone_number", {"type": ["work", "fax"], "pref": ["3"]}),
)


@dataclass
class Person:
    display_name: str = ""
    sn: str = ""
    cn: str = ""
    mail: str = ""
    telephone_number: str = ""
    facsimile_telephone_number: str = ""
    mobile: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Person:
        """Read the LDAP attribute names (``displayName``, ``mail``, ...)."""

        def get(key: str) -> str:
            value = data.get(key)
            return str(value).strip() if value is not None else ""

        return cls(
            display_name=get("displayName"),
            sn=get("sn"),
            cn=get("cn"),
            mail=get("mail"),
            telephone_number=get("telephoneNumber"),
            facsimile_telephone_number=get("facsimileTelephoneNumber"),
            mobile=get("mobile"),
        )


def card_from_person(person: Person) -> Card:
    """version, fn, a work email and up to three ranked phone numbers.

    Fields that are empty are left out. Fields that do not validate are
    logged and left out too, so the card is always returned.
    """
    fn = person.display_name or person.cn
    card = Card([
        Property("version", {}, "text", TextValue("4.0"), descriptor_for("version")),
        Property("fn", {}, "text", TextValue(fn), descriptor_for("fn")),
    ])

    if person.mail:
        try:
            builders.add_email(card, person.mail, {"type": "work", "pref": "1"})
        except ValidationError as exc:
            logger.warning("%s: skipping mail %r: %s", fn, person.mail, exc.message)

    for attribute, params in _PHONES:
        number = getattr(person, attribute)
        if not number:
            continue
        try:
            builders.add_tel(card, number, params)
        except ValidationError as exc:
            logger.warning("%s: skipping %s %r: %s", fn, attribute, number, exc.message)

    return card
