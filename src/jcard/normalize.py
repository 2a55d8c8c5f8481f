from __future__ import annotations


def normalize_tel(number: str) -> str:
    """Turn a loosely written phone number into a ``tel:`` URI.

    ``0049 (0)175 4323456`` becomes ``tel:+49-175-4323456``; a local number
    keeps its ``;phone-context=...`` with the spaces removed. Normalizing an
    already normalized URI returns it unchanged.
    """
    number = number.strip()
    if number.startswith("tel:"):
        number = number[len("tel:"):]
    parts = number.split(";", 1)
    if len(parts) > 1:
        parts[1] = parts[1].replace(" ", "")
    else:
        if parts[0].startswith("00"):
            parts[0] = "+" + parts[0][2:]
        if parts[0].startswith("+"):
            parts[0] = parts[0].replace("(0)", "", 1)
    parts[0] = " ".join(parts[0].split()).replace(" ", "-")
    return "tel:" + ";".join(parts)
