from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .errors import ValidationError
from .model import Property
from .validation import validate_properties

logger = logging.getLogger(__name__)

_ADR_FIELDS = (
    "po_box",
    "extended_address",
    "street_address",
    "locality",
    "region",
    "postal_code",
    "country",
)


class Card:
    """An ordered collection of jCard properties.

    The constructor takes the properties as they are; only :meth:`append`
    validates on the way in. Call :meth:`validate` to fill :attr:`errors`.
    """

    def __init__(self, properties: Iterable[Property] = ()):
        self.properties: list[Property] = list(properties)
        self.errors: dict[str, ValidationError] = {}

    def __iter__(self) -> Iterator[Property]:
        return iter(self.properties)

    def __len__(self) -> int:
        return len(self.properties)

    # ── Lookup ─────────────────────────────────────────────────────────────────

    def get(self, name: str) -> list[Property]:
        return [p for p in self.properties if p.name == name]

    def get_first(self, name: str) -> Property | None:
        """First property named ``name``; the ``pref`` parameter is not consulted."""
        for p in self.properties:
            if p.name == name:
                return p
        return None

    # ── Mutation ───────────────────────────────────────────────────────────────

    def append(self, prop: Property) -> None:
        try:
            prop.validate()
        except ValidationError as exc:
            logger.warning("rejected %s property: %s", prop.name, exc.message)
            raise
        self.properties.append(prop)

    def remove(self, prop: Property) -> bool:
        for i, p in enumerate(self.properties):
            if p is prop:
                del self.properties[i]
                return True
        return False

    def remove_all(self, name: str) -> bool:
        matches = self.get(name)
        if not matches:
            return False
        return all([self.remove(p) for p in matches])

    # ── Validation ─────────────────────────────────────────────────────────────

    def validate(self) -> bool:
        self.errors = validate_properties(self.properties)
        return not self.errors

    @property
    def is_valid(self) -> bool:
        """Result of the last :meth:`validate` call."""
        return not self.errors

    # ── Accessors ──────────────────────────────────────────────────────────────

    def _joined(self, name: str) -> str:
        p = self.get_first(name)
        return " ".join(p.values()) if p else ""

    def fn(self) -> str:
        return self._joined("fn")

    def n(self) -> str:
        return self._joined("n")

    def email(self) -> str:
        return self._joined("email")

    def lang(self) -> str:
        return self._joined("lang")

    def impp(self) -> str:
        return self._joined("impp")

    def tel(self) -> str:
        """First voice number, or the first number without a ``type``."""
        for p in self.get("tel"):
            types = p.parameters.get("type")
            if types is None or "voice" in types:
                return " ".join(p.values())
        return ""

    def fax(self) -> str:
        for p in self.get("tel"):
            if "fax" in p.parameters.get("type", []):
                return " ".join(p.values())
        return ""

    def _adr_component(self, index: int) -> str:
        p = self.get_first("adr")
        if p is None:
            return ""
        components = p.values()
        return components[index] if index < len(components) else ""

    def po_box(self) -> str:
        return self._adr_component(0)

    def extended_address(self) -> str:
        return self._adr_component(1)

    def street_address(self) -> str:
        return self._adr_component(2)

    def locality(self) -> str:
        return self._adr_component(3)

    def region(self) -> str:
        return self._adr_component(4)

    def postal_code(self) -> str:
        return self._adr_component(5)

    def country(self) -> str:
        return self._adr_component(6)

    def address(self) -> dict[str, str]:
        """All seven components of the first ``adr``, keyed by field name."""
        return {field: self._adr_component(i) for i, field in enumerate(_ADR_FIELDS)}

    def __str__(self) -> str:
        return "vCard[\n" + "\n".join(str(p) for p in self.properties) + "\n]"

    def __repr__(self) -> str:
        return f"Card({len(self.properties)} properties, errors={len(self.errors)})"
