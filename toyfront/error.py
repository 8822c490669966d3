"""Lexical and syntax errors of the toy language."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional


class LexicalError(Exception):
    """A problem found while splitting source text into tokens."""

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class InvalidInteger(LexicalError):
    """An integer literal that does not fit in a signed 64-bit value."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        return f"Invalid integer: {self.reason}"


class InvalidToken(LexicalError):
    """Text that matches no token."""

    def __str__(self) -> str:
        return "Invalid token"


@dataclass(frozen=True)
class ParseError:
    """A syntax error with an optional explanatory note."""

    message: str
    note: Optional[str] = None

    def with_note(self, note: object) -> ParseError:
        """Return a copy of this error carrying *note*."""
        return replace(self, note=str(note))

    def report(self, source: str) -> str:
        """Render the error as a human-readable report for *source*."""
        lines = [f"Error: {self.message}"]
        if self.note is not None:
            lines.append(f"    Note: {self.note}")
        return "\n".join(lines) + "\n"

    @classmethod
    def invalid_token(cls) -> ParseError:
        return cls("invalid token")

    @classmethod
    def unrecognized_token(cls, token: object, expected: Iterable[str]) -> ParseError:
        return cls(f"unrecognised token '{token}', expected {', '.join(expected)}")

    @classmethod
    def extra_token(cls, token: object) -> ParseError:
        return cls(f"extra token '{token}' encountered")

    @classmethod
    def unrecognized_eof(cls, expected: Iterable[str]) -> ParseError:
        return cls(f"unexpected end of file, expecting {', '.join(expected)}")

    @classmethod
    def user(cls, error: object) -> ParseError:
        return cls(str(error))


class ParseFailure(Exception):
    """Raised when a source text has syntax errors; holds all of them."""

    def __init__(self, errors: Iterable[ParseError]) -> None:
        self.errors = list(errors)
        super().__init__(f"Parsing failed with {len(self.errors)} errors")