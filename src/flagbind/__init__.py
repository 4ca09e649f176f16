"""flagbind — bind command-line flags straight into typed destinations.

Callers own their destinations (``Opt``, ``Preset``, ``Toggle``, ``Callback``
or any object with a ``parse_from`` method), register them on a ``FlagSet``
and call ``parse``.  Values are written in place; only the non-flag tokens
come back.
"""

from flagbind.errors import HelpRequested, MissingValue, ParseError, ParseFromFailure, UnknownFlag
from flagbind.flag import Callback, ConversionError, Flaggable, Opt, Preset, Toggle, parse_bool
from flagbind.flagset import HELP_LONG, HELP_SHORT, FlagSet

__version__ = "0.1.0"

__all__ = [
    "HELP_LONG",
    "HELP_SHORT",
    "Callback",
    "ConversionError",
    "FlagSet",
    "Flaggable",
    "HelpRequested",
    "MissingValue",
    "Opt",
    "ParseError",
    "ParseFromFailure",
    "Preset",
    "Toggle",
    "UnknownFlag",
    "parse_bool",
]
