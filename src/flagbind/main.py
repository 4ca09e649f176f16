"""main.py – ``flagbind`` console script.

A runnable example of the library: ``flagbind demo`` binds a handful of
sample destinations, parses whatever follows ``--`` and shows the result.

    flagbind demo -- -name alice --count 3 -verbose extra
    flagbind demo --json -- -ratio 0.5
    flagbind demo -- -h
"""

from __future__ import annotations

from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from flagbind import __version__
from flagbind.cli import json_print, report_error
from flagbind.errors import ParseError
from flagbind.flag import Opt, Preset, Toggle
from flagbind.flagset import FlagSet

app = typer.Typer(
    help="Bind command-line flags directly to typed destinations.",
    rich_markup_mode="rich",
    epilog="""\
[bold]Examples:[/bold]

flagbind demo -- -name alice -count 3     Parse into the sample flags

flagbind demo --json -- -verbose rest     Machine-readable JSON output

flagbind demo -- -h                       Show the sample flag help

[dim]Tokens after '--' are handed to FlagSet.parse unchanged.[/dim]""",
)


def build_demo_flagset() -> tuple[FlagSet, dict[str, Any]]:
    """Return the sample FlagSet and its destinations keyed by flag name."""
    fs = FlagSet()
    dests: dict[str, Any] = {
        "name": fs.add("name", "Who to greet.", Opt(str)),
        "count": fs.add("count", "How many times (default 1).", Preset(1)),
        "ratio": fs.add("ratio", "A float, to show conversion errors.", Opt(float)),
        "verbose": fs.add("verbose", "Toggle verbose output.", Toggle()),
    }
    return fs, dests


def _render(console: Console, dests: dict[str, Any], rest: list[str]) -> None:
    table = Table(title="Bound flags")
    table.add_column("Flag", style="cyan")
    table.add_column("Kind")
    table.add_column("Value", style="green")
    for name, dest in dests.items():
        table.add_row(f"-{name}", type(dest).__name__, repr(dest.value))
    console.print(table)
    console.print(f"Unmatched: {rest!r}", markup=False, highlight=False)


@app.callback()
def callback() -> None:
    """Bind command-line flags directly to typed destinations."""


@app.command(context_settings={"ignore_unknown_options": True})
def demo(
    tokens: list[str] | None = typer.Argument(None, help="Tokens to parse (put them after '--')."),
    json_output: bool = typer.Option(False, "--json", help="Output results as JSON"),
) -> None:
    """Parse TOKENS into a sample FlagSet and show what was bound."""
    fs, dests = build_demo_flagset()
    try:
        rest = fs.parse(tokens or [])
    except ParseError as exc:
        raise typer.Exit(code=report_error(exc, fs.help_info)) from None

    if json_output:
        data = {name: dest.value for name, dest in dests.items()}
        data["unmatched"] = rest
        json_print(data)
        return

    _render(Console(stderr=True), dests, rest)


@app.command()
def version() -> None:
    """Print the flagbind version."""
    print(__version__)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
