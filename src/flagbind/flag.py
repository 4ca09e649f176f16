"""flag.py – Flaggable destinations.

A *flaggable* is anything the parser can write a flag into.  The contract is
small: ``parse_from(token)`` converts a string and stores the result on the
object itself, and the optional ``expects_value()`` tells the parser whether
the flag swallows the following token (the default) or is complete on its own.

Built-in destinations::

    from flagbind.flag import Opt, Preset, Toggle

    port = Opt(int)          # .value is None until -port 8080 is seen
    retries = Preset(3)      # .value is 3 until -retries 5 is seen
    verbose = Toggle()       # flips on every -verbose

Because ``int``/``bool``/``None`` are immutable in Python, every destination
is a small mutable wrapper and the caller reads ``.value`` after parsing.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")

Converter = Callable[[str], Any]

_TRUE = "true"
_FALSE = "false"


class ConversionError(ValueError):
    """A token could not be converted into a destination's value type."""

    def __init__(self, token: str, message: str | None = None) -> None:
        self.token = token
        self.message = message or f"Failed to parse {token}"
        super().__init__(self.message)


# ---------------------------------------------------------------------------
# Capability contract
# ---------------------------------------------------------------------------


@runtime_checkable
class Flaggable(Protocol):
    """Something a flag can be bound to.

    Subclass it to inherit the default ``expects_value``; implementing
    ``parse_from`` alone is enough for structural use.
    """

    def expects_value(self) -> bool:
        """Whether the flag consumes the next token as its value.

        When this returns False, ``parse_from`` is called with an empty
        string and must ignore it.
        """
        return True

    def parse_from(self, token: str) -> None:
        """Convert *token* and store it, or raise ``ConversionError``."""
        ...


def expects_value(dest: object) -> bool:
    """Return ``dest.expects_value()``, defaulting to True when it is absent."""
    method = getattr(dest, "expects_value", None)
    if method is None:
        return True
    return bool(method())


# ---------------------------------------------------------------------------
# Converters
# ---------------------------------------------------------------------------


def parse_bool(token: str) -> bool:
    """Strict bool conversion: only ``"true"`` and ``"false"`` are accepted.

    ``bool("false")`` is True in Python, so ``bool`` is never used directly
    as a converter.
    """
    if token == _TRUE:
        return True
    if token == _FALSE:
        return False
    raise ValueError("provided string was not `true` or `false`")


def resolve_converter(kind: Converter) -> Converter:
    """Map a value type to the callable that builds it from a string."""
    if kind is bool:
        return parse_bool
    return kind


def convert(kind: Converter, token: str) -> Any:
    """Run *kind* on *token*, turning its failures into ``ConversionError``."""
    try:
        return resolve_converter(kind)(token)
    except (ValueError, TypeError) as exc:
        detail = str(exc)
        message = f"Failed to parse {token}"
        if detail:
            message = f"{message}: {detail}"
        raise ConversionError(token, message) from exc


# ---------------------------------------------------------------------------
# Built-in destinations
# ---------------------------------------------------------------------------


class Opt(Flaggable, Generic[T]):
    """Optional value: empty until a flag supplies one."""

    def __init__(self, kind: Callable[[str], T] = str) -> None:  # type: ignore[assignment]
        self.kind = kind
        self.value: T | None = None
        self._set = False

    @property
    def is_set(self) -> bool:
        """True once a parse succeeded, even if the converter returned None."""
        return self._set

    def parse_from(self, token: str) -> None:
        self.value = convert(self.kind, token)
        self._set = True

    def __repr__(self) -> str:
        return f"Opt({self.value!r})"


class Preset(Flaggable, Generic[T]):
    """Value with a default that a flag may overwrite.

    The converter defaults to ``type(default)``; pass *kind* explicitly when
    the default's type cannot build itself from a string.
    """

    def __init__(self, default: T, kind: Callable[[str], T] | None = None) -> None:
        if kind is None:
            if default is None:
                raise TypeError("Preset(None) needs an explicit kind")
            kind = type(default)
        self.kind = kind
        self.value: T = default

    def into_inner(self) -> T:
        return self.value

    def parse_from(self, token: str) -> None:
        self.value = convert(self.kind, token)

    def __repr__(self) -> str:
        return f"Preset({self.value!r})"


class Toggle(Flaggable):
    """Boolean switch flipped by every occurrence of its flag."""

    def __init__(self, state: bool = False) -> None:
        self.value = state

    def expects_value(self) -> bool:
        return False

    def parse_from(self, token: str) -> None:
        self.value = not self.value

    def __bool__(self) -> bool:
        return self.value

    def __repr__(self) -> str:
        return f"Toggle({self.value!r})"


class Callback(Flaggable):
    """Hand each converted value to *func* instead of storing it.

    Useful for writing into storage the caller cannot wrap, e.g.
    ``Callback(lambda v: setattr(opts, "port", v), int)``.
    """

    def __init__(self, func: Callable[[Any], object], kind: Converter = str) -> None:
        self.func = func
        self.kind = kind

    def parse_from(self, token: str) -> None:
        self.func(convert(self.kind, token))

    def __repr__(self) -> str:
        name = getattr(self.func, "__name__", repr(self.func))
        return f"Callback({name})"
