"""Parse errors raised by ``FlagSet.parse``.

Exactly one of these ends a failed parse.  They compare equal by kind and
fields, so callers and tests can match on whole values::

    with pytest.raises(ParseError) as exc_info:
        fs.parse(["-xyz"])
    assert exc_info.value == UnknownFlag("xyz")
"""

from __future__ import annotations


class ParseError(Exception):
    """Base class for every parse failure."""

    def _fields(self) -> tuple[object, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._fields() == other._fields()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._fields()))

    def __repr__(self) -> str:
        args = ", ".join(repr(f) for f in self._fields())
        return f"{type(self).__name__}({args})"


class ParseFromFailure(ParseError):
    """A value token could not be converted to the destination's type."""

    def __init__(self, name: str, value: str, message: str) -> None:
        self.name = name
        self.value = value
        self.message = message
        super().__init__(f"Invalid value {value!r} for flag -{name}: {message}")

    def _fields(self) -> tuple[object, ...]:
        return (self.name, self.value, self.message)


class MissingValue(ParseError):
    """A value-consuming flag was the last token."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Missing value for flag -{name}")

    def _fields(self) -> tuple[object, ...]:
        return (self.name,)


class HelpRequested(ParseError):
    """``-h`` / ``-help`` was given and no binding claims that name."""

    def __init__(self) -> None:
        super().__init__("Help requested")


class UnknownFlag(ParseError):
    """A flag token whose bare name has no binding."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown flag -{name}")

    def _fields(self) -> tuple[object, ...]:
        return (self.name,)
