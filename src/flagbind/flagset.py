"""flagset.py – Flag registry and the tokenizing parse loop.

A ``FlagSet`` maps bare flag names to caller-owned destinations.  ``parse``
walks the tokens once, left to right, writing into destinations as it goes
and returning every token that is not a flag::

    from flagbind import FlagSet, Opt, Toggle

    fs = FlagSet()
    port = fs.add("port", "Port to listen on.", Opt(int))
    verbose = fs.add("v", "Verbose output.", Toggle())
    rest = fs.parse(["serve", "-port", "8080", "--v"])
    # port.value == 8080, bool(verbose) is True, rest == ["serve"]

The loop never prints and never exits; see ``flagbind.cli`` for that.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, TypeVar

from flagbind.errors import HelpRequested, MissingValue, ParseFromFailure, UnknownFlag
from flagbind.flag import Flaggable, expects_value

if TYPE_CHECKING:
    from rich.console import Console

# Reserved names, honoured only when nothing is bound under them.
HELP_LONG = "help"
HELP_SHORT = "h"

FLAG_MARKER = "-"

F = TypeVar("F")


class FlagSet:
    """Registry of named flag bindings."""

    def __init__(self) -> None:
        self._mappings: dict[str, Flaggable] = {}
        self._help_info: dict[str, str] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add(self, name: str, help_text: str, dest: F) -> F:
        """Bind *dest* under *name* and return it.

        *name* is given without dashes.  Registering a name twice replaces
        the earlier binding and its help text.
        """
        if not name or name.startswith(FLAG_MARKER):
            raise ValueError(f"Invalid flag name {name!r}: must be non-empty and not start with '-'")
        if not callable(getattr(dest, "parse_from", None)):
            raise TypeError(f"Flag {name!r}: {type(dest).__name__} has no parse_from() method")
        self._mappings[name] = dest  # type: ignore[assignment]
        self._help_info[name] = help_text
        return dest

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @property
    def help_info(self) -> Mapping[str, str]:
        """Read-only name -> help text view, in registration order."""
        return MappingProxyType(self._help_info)

    def get(self, name: str) -> Flaggable | None:
        return self._mappings.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._mappings

    def __iter__(self) -> Iterator[str]:
        return iter(self._mappings)

    def __len__(self) -> int:
        return len(self._mappings)

    def __repr__(self) -> str:
        return f"FlagSet({list(self._mappings)!r})"

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, tokens: Iterable[str]) -> list[str]:
        """Parse *tokens* into the bound destinations.

        Returns the tokens that do not start with ``-``, in input order.
        Raises a ``ParseError`` subclass on the first problem; destinations
        written before the failure keep their new values.
        """
        out: list[str] = []
        it = iter(tokens)
        for token in it:
            if not token.startswith(FLAG_MARKER):
                out.append(token)
                continue

            name = token.lstrip(FLAG_MARKER)
            dest = self._mappings.get(name)
            if dest is None:
                if name in (HELP_LONG, HELP_SHORT):
                    raise HelpRequested()
                raise UnknownFlag(name)

            if expects_value(dest):
                value = next(it, None)
                if value is None:
                    raise MissingValue(name)
            else:
                value = ""
            try:
                dest.parse_from(value)
            except (ValueError, TypeError) as exc:
                raise ParseFromFailure(name, value, getattr(exc, "message", None) or str(exc)) from exc
        return out

    def parse_args(self, argv: list[str] | None = None, *, console: Console | None = None) -> list[str]:
        """Parse the process arguments, printing help and exiting on error."""
        from flagbind.cli import parse_args

        return parse_args(self, argv, console=console)
