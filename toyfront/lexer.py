"""Token stream used by the parser."""

from __future__ import annotations

from .error import LexicalError
from .tokens import Token, TokenKind, scan


class Lexer:
    """Iterate over ``(start, token, end)`` triples of a source text.

    Lexical errors do not stop the stream; they appear as ``Error`` tokens.
    """

    def __init__(self, source: str) -> None:
        self._tokens = scan(source)

    def __iter__(self) -> Lexer:
        return self

    def __next__(self) -> tuple[int, Token, int]:
        start, item, end = next(self._tokens)
        if isinstance(item, LexicalError):
            item = Token(TokenKind.ERROR)
        return start, item, end