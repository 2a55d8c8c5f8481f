from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .card import Card

console = Console()

# ── Palette ────────────────────────────────────────────────────────────────────
_GREEN   = "#3ecf8e"
_RED     = "#f05c5c"
_TEXT    = "#c9d1e0"
_MID     = "#8896af"
_DIM     = "#546075"


def print_validation(path: Path, card: Card, out: Console | None = None) -> None:
    """One panel per file: a tick, or every recorded error keyed as stored."""
    out = out or console
    title = Text(str(path), style=f"dim {_MID}")
    if card.is_valid:
        body = Text()
        body.append("✓  valid", style=f"bold {_GREEN}")
        body.append(f"  {len(card)} properties", style=f"dim {_DIM}")
        out.print(Panel(body, title=title, title_align="left", border_style=_GREEN, padding=(0, 2)))
        return

    body = Text()
    body.append(f"✗  {len(card.errors)} error(s)\n", style=f"bold {_RED}")
    for key, err in card.errors.items():
        body.append(f"\n  {key:<32}", style=_TEXT)
        body.append(f"  {err.message}", style=f"dim {_MID}")
    out.print(Panel(body, title=title, title_align="left", border_style=_RED, padding=(0, 2)))


def print_decode_failure(path: Path, message: str, out: Console | None = None) -> None:
    out = out or console
    body = Text()
    body.append("✗  not a jCard\n\n", style=f"bold {_RED}")
    body.append(f"  {message}", style=f"dim {_MID}")
    title = Text(str(path), style=f"dim {_MID}")
    out.print(Panel(body, title=title, title_align="left", border_style=_RED, padding=(0, 2)))


def print_totals(valid: int, total: int, out: Console | None = None) -> None:
    out = out or console
    colour = _GREEN if valid == total else _RED
    line = Text()
    line.append(f"  {valid}/{total}", style=f"bold {colour}")
    line.append(" file(s) valid", style=f"dim {_DIM}")
    out.print(line)
