from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum

from .errors import ValidationError
from .properties import VALIDATORS
from .values import NullValue, VariantValue, flatten, to_python


class Cardinality(Enum):
    """How often a property may occur in one card (RFC 6350 section 3.3)."""

    MANY = "*"
    ONE_OR_MANY = "1*"
    ZERO_OR_ONE = "*1"
    EXACTLY_ONE = "1"


@dataclass(frozen=True)
class TypeDescriptor:
    """Static facts about one property name.

    ``validator`` is the key of the property's validation function in
    :data:`jcard.properties.VALIDATORS`.
    """

    name: str
    cardinality: Cardinality
    spec_ref: str
    validator: str


@dataclass(eq=False)
class Property:
    """One jCard property: ``[name, parameters, type, value]``.

    Parameter values are always lists, even when the jCard held a single
    string. Properties compare by identity, so a card can hold two
    properties with equal content and still remove exactly one of them.
    """

    name: str
    parameters: dict[str, list[str]] = field(default_factory=dict)
    type: str = "text"
    value: VariantValue = field(default_factory=NullValue)
    descriptor: TypeDescriptor | None = None

    def values(self) -> list[str]:
        """The value flattened depth-first into strings."""
        return flatten(self.value)

    def validate(self) -> None:
        if self.descriptor is None or self.descriptor.name != self.name:
            bad = self.descriptor.name if self.descriptor else None
            raise ValidationError(f"property '{self.name}' has bad type info '{bad}'")
        VALIDATORS[self.descriptor.validator](self)

    def __str__(self) -> str:
        value = json.dumps(to_python(self.value), ensure_ascii=False)
        return f"  {self.name} (type={self.type}, parameters={self.parameters}): {value}"
