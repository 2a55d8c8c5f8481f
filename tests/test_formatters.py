from __future__ import annotations

from pathlib import Path

from rich.console import Console

from jcard.formatters import card_table, format_tel_display
from jcard.io import read_jcard_file

DATA = Path(__file__).parent / "data"


def test_format_uk_mobile():
    assert format_tel_display("tel:+447980220220") == "+44 7980 220 220"


def test_format_local_number_with_region():
    assert format_tel_display("tel:07980220220", region="GB") == "+44 7980 220 220"


def test_unparseable_number_left_alone():
    assert format_tel_display("tel:7042;phone-context=example.com") == "7042"


def test_card_table_has_a_row_per_property():
    card = read_jcard_file(DATA / "ok_example.json")
    table = card_table(card, region="CA")
    assert table.row_count == len(card)

    console = Console(width=200, record=True)
    console.print(table)
    text = console.export_text()
    assert "Simon Perreault" in text
    assert "adr" in text
