"""Tokens of the toy language and the raw scanner that produces them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Union

from .error import InvalidInteger, InvalidToken, LexicalError

_I64_MAX = 2**63 - 1


class TokenKind(Enum):
    """Kinds of token; the value is the name used when a token is displayed."""

    VAR = "Var"
    PRINT = "Print"
    IDENTIFIER = "Identifier"
    INTEGER = "Integer"
    LPAREN = "LParen"
    RPAREN = "RParen"
    ASSIGN = "Assign"
    SEMICOLON = "Semicolon"
    ADD = "Add"
    SUB = "Sub"
    MUL = "Mul"
    DIV = "Div"
    ERROR = "Error"


@dataclass(frozen=True)
class Token:
    """A single token; identifiers carry their text, integers their value."""

    kind: TokenKind
    value: Union[str, int, None] = None

    def __str__(self) -> str:
        if self.kind is TokenKind.IDENTIFIER:
            return f'{self.kind.value}("{self.value}")'
        if self.kind is TokenKind.INTEGER:
            return f"{self.kind.value}({self.value})"
        return self.kind.value


_KEYWORDS = {"var": TokenKind.VAR, "print": TokenKind.PRINT}

_PUNCTUATION = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "=": TokenKind.ASSIGN,
    ";": TokenKind.SEMICOLON,
    "+": TokenKind.ADD,
    "-": TokenKind.SUB,
    "*": TokenKind.MUL,
    "/": TokenKind.DIV,
}

_PATTERN = re.compile(
    r"(?P<skip>[ \t\n\f]+|#.*\n?)"
    r"|(?P<word>[_a-zA-Z][_0-9a-zA-Z]*)"
    r"|(?P<integer>[1-9][0-9]*)"
    r"|(?P<punct>[()=;+\-*/])"
)


def _classify(match: re.Match[str]) -> Union[Token, LexicalError]:
    text = match.group()
    if match.lastgroup == "word":
        kind = _KEYWORDS.get(text)
        return Token(kind) if kind else Token(TokenKind.IDENTIFIER, text)
    if match.lastgroup == "integer":
        number = int(text)
        if number > _I64_MAX:
            return InvalidInteger("number too large to fit in target type")
        return Token(TokenKind.INTEGER, number)
    return Token(_PUNCTUATION[text])


def scan(source: str) -> Iterator[tuple[int, Union[Token, LexicalError], int]]:
    """Yield ``(start, token_or_error, end)`` for each lexeme of *source*.

    Whitespace and ``#`` comments are skipped. Text that matches no token
    yields an :class:`InvalidToken` one character wide.
    """
    pos = 0
    while pos < len(source):
        match = _PATTERN.match(source, pos)
        if match is None:
            yield pos, InvalidToken(), pos + 1
            pos += 1
            continue
        pos = match.end()
        if match.lastgroup != "skip":
            yield match.start(), _classify(match), match.end()