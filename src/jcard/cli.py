from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .config import Settings, load_settings
from .directory import Person, card_from_person
from .errors import DecodeError
from .formatters import card_table
from .io import dumps, read_jcard_file, write_jcard_file
from .report import print_decode_failure, print_totals, print_validation

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="jcard: decode, validate and build jCard (RFC 7095) contact records.",
)
console = Console()


def _setup_logging(level: str) -> None:
    log = logging.getLogger("jcard")
    log.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        log.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj if isinstance(ctx.obj, Settings) else Settings()


@app.callback()
def main(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None, "--config", "-c",
        help="TOML settings file (default: ./jcard.toml if present)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output"),
) -> None:
    settings = load_settings(config)
    _setup_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


# ── `validate` command ─────────────────────────────────────────────────────────

@app.command()
def validate(
    files: list[Path] = typer.Argument(..., exists=True, dir_okay=False, help="jCard JSON files"),
) -> None:
    """Decode and validate each file; exit with 1 if any of them fails."""
    valid = 0
    for path in files:
        try:
            card = read_jcard_file(path)
        except DecodeError as exc:
            print_decode_failure(path, exc.message)
            continue
        if card.validate():
            valid += 1
        print_validation(path, card)

    print_totals(valid, len(files))
    if valid != len(files):
        raise typer.Exit(code=1)


# ── `show` command ─────────────────────────────────────────────────────────────

@app.command()
def show(
    ctx: typer.Context,
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="jCard JSON file"),
) -> None:
    """Print the properties of a card as a table."""
    settings = _settings(ctx)
    try:
        card = read_jcard_file(file)
    except DecodeError as exc:
        console.print(f"[bold red]{escape(str(exc))}[/bold red]")
        raise typer.Exit(code=1)
    console.print(card_table(card, region=settings.default_region, title=str(file)))


# ── `from-person` command ──────────────────────────────────────────────────────

@app.command("from-person")
def from_person(
    ctx: typer.Context,
    person_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False,
        help="JSON object with LDAP attributes (displayName, mail, mobile, ...)",
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the jCard here instead of stdout"),
) -> None:
    """Build a jCard from a directory person record."""
    settings = _settings(ctx)
    try:
        data = json.loads(person_file.read_text(encoding="utf-8"))
    except ValueError as exc:
        console.print(f"[bold red]{escape(str(person_file))}: not valid JSON ({escape(str(exc))})[/bold red]")
        raise typer.Exit(code=2)
    if not isinstance(data, dict):
        console.print(f"[bold red]{escape(str(person_file))}: expected a JSON object[/bold red]")
        raise typer.Exit(code=2)

    card = card_from_person(Person.from_mapping(data))
    if output is None:
        typer.echo(dumps(card, indent=settings.indent))
        return
    write_jcard_file(card, output, indent=settings.indent)
    console.print(f"[bold green]✓ Wrote {len(card)} properties → {escape(str(output))}[/bold green]")


if __name__ == "__main__":
    app()
