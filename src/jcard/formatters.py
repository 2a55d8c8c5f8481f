from __future__ import annotations

import json

import phonenumbers
from phonenumbers import NumberParseException
from rich.table import Table
from rich.text import Text

from .card import Card
from .model import Property
from .values import to_python

# ── Phone formatting ───────────────────────────────────────────────────────────

def _format_spaced_international(num: phonenumbers.PhoneNumber) -> str:
    """Pretty international form, e.g. +44 7980 220 220."""
    intl = phonenumbers.format_number(num, phonenumbers.PhoneNumberFormat.INTERNATIONAL)
    out = intl.replace("-", " ").replace("(", "").replace(")", "")

    # GB mobile: +44 7xxx xxx xxx
    nsn = phonenumbers.national_significant_number(num)
    if phonenumbers.region_code_for_number(num) == "GB" and len(nsn) == 10 and nsn.startswith("7"):
        return f"+44 {nsn[0:4]} {nsn[4:7]} {nsn[7:]}"

    return " ".join(out.split())


def format_tel_display(uri: str, region: str = "GB") -> str:
    """Render a ``tel:`` URI for people to read.

    Numbers phonenumbers cannot parse or does not consider valid are shown
    as they are, minus the ``tel:`` prefix. URI parameters such as ``ext``
    are dropped.
    """
    number = uri[len("tel:"):] if uri.startswith("tel:") else uri
    number = number.split(";", 1)[0]
    try:
        parsed = phonenumbers.parse(number, region)
    except NumberParseException:
        return number
    if phonenumbers.is_possible_number(parsed) and phonenumbers.is_valid_number(parsed):
        return _format_spaced_international(parsed)
    return number


# ── Card table ─────────────────────────────────────────────────────────────────

def _format_parameters(p: Property) -> str:
    return "; ".join(f"{k}={','.join(v)}" for k, v in p.parameters.items())


def _format_value(p: Property, region: str) -> Text:
    if p.name == "tel":
        raw = " ".join(p.values())
        pretty = format_tel_display(raw, region)
        text = Text(raw)
        if pretty != raw:
            text.append(f"  {pretty}", style="dim")
        return text
    return Text(json.dumps(to_python(p.value), ensure_ascii=False))


def card_table(card: Card, region: str = "GB", title: str | None = None) -> Table:
    table = Table(show_header=True, header_style="bold", title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Property", style="cyan")
    table.add_column("Type")
    table.add_column("Parameters", style="dim")
    table.add_column("Value")
    for i, p in enumerate(card):
        table.add_row(str(i), p.name, p.type, _format_parameters(p), _format_value(p, region))
    return table
