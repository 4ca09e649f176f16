"""Process-level glue around ``FlagSet.parse``.

Everything that touches the outside world lives here: reading ``sys.argv``,
printing diagnostics and help to stderr, and exiting.  The parser itself
stays side-effect free.

Usage in a program::

    from flagbind import FlagSet, Opt
    from flagbind.cli import parse_args

    fs = FlagSet()
    out = fs.add("out", "Output file.", Opt(str))
    rest = parse_args(fs)          # exits 0 on -help, 1 on bad input
"""

from __future__ import annotations

import json
import sys
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from rich.console import Console

from flagbind.errors import HelpRequested, ParseError

if TYPE_CHECKING:
    from flagbind.flagset import FlagSet

EXIT_HELP = 0
EXIT_ERROR = 1

_err_console = Console(stderr=True, highlight=False)


# ---------------------------------------------------------------------------
# Help rendering
# ---------------------------------------------------------------------------


def show_help(help_info: Mapping[str, str], console: Console | None = None) -> None:
    """Write one ``--name`` line plus its description per flag."""
    console = console or _err_console
    for flag, info in help_info.items():
        console.print(f"--{flag}", markup=False, highlight=False, soft_wrap=True)
        console.print(f"\t {info}", markup=False, highlight=False, soft_wrap=True)


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------


def exit_code(error: ParseError) -> int:
    """Status the process should exit with for *error*."""
    if isinstance(error, HelpRequested):
        return EXIT_HELP
    return EXIT_ERROR


def describe(error: ParseError) -> str | None:
    """One-line diagnostic for *error*; None when nothing should be printed."""
    if isinstance(error, HelpRequested):
        return None
    return str(error)


def report_error(error: ParseError, help_info: Mapping[str, str], console: Console | None = None) -> int:
    """Print the diagnostic for *error* followed by help; return the exit status."""
    console = console or _err_console
    msg = describe(error)
    if msg is not None:
        console.print("[red bold]error:[/red bold] ", end="")
        console.print(msg, markup=False, highlight=False, soft_wrap=True)
    show_help(help_info, console)
    return exit_code(error)


def json_print(data: dict[str, Any] | list[Any]) -> None:
    """Print *data* as pretty-printed JSON to stdout."""
    print(json.dumps(data, indent=2))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def parse_args(flagset: FlagSet, argv: list[str] | None = None, *, console: Console | None = None) -> list[str]:
    """Parse *argv* (default ``sys.argv[1:]``) or exit the process.

    Returns the unmatched tokens on success.  On failure prints the error
    and the flag help to stderr and raises ``SystemExit`` with status 0 for
    a help request and 1 for anything else.
    """
    if argv is None:
        argv = sys.argv[1:]
    try:
        return flagset.parse(argv)
    except ParseError as exc:
        raise SystemExit(report_error(exc, flagset.help_info, console)) from None
