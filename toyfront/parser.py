"""Recursive-descent parser for the toy language with error recovery."""

from __future__ import annotations

from typing import NoReturn, Optional

from .ast import (
    BinaryOperation,
    Expression,
    Integer,
    Operator,
    PrintStatement,
    Program,
    Statement,
    Variable,
    VarStatement,
)
from .error import ParseError, ParseFailure
from .lexer import Lexer
from .tokens import Token, TokenKind

_SYMBOLS = {
    TokenKind.VAR: "var",
    TokenKind.PRINT: "print",
    TokenKind.IDENTIFIER: "identifier",
    TokenKind.INTEGER: "integer",
    TokenKind.LPAREN: "(",
    TokenKind.RPAREN: ")",
    TokenKind.ASSIGN: "=",
    TokenKind.SEMICOLON: ";",
    TokenKind.ADD: "+",
    TokenKind.SUB: "-",
    TokenKind.MUL: "*",
    TokenKind.DIV: "/",
}

_ORDER = list(TokenKind)

_OPERATORS = {
    TokenKind.ADD: Operator.ADD,
    TokenKind.SUB: Operator.SUB,
    TokenKind.MUL: Operator.MUL,
    TokenKind.DIV: Operator.DIV,
}

_ALL_OPERATORS = tuple(_OPERATORS)


def _expected(kinds: tuple[TokenKind, ...]) -> list[str]:
    return [f'"{_SYMBOLS[kind]}"' for kind in sorted(set(kinds), key=_ORDER.index)]


class _SyntaxError(Exception):
    def __init__(self, error: ParseError) -> None:
        super().__init__(error.message)
        self.error = error


class Parser:
    """Parse one source text into a :class:`Program`.

    A statement with a syntax error is skipped up to and including the next
    ``;`` and parsing resumes; all errors are reported together.
    """

    def __init__(self, source: str) -> None:
        self._tokens = list(Lexer(source))
        self._pos = 0
        self._errors: list[ParseError] = []

    def parse_program(self) -> Program:
        """Return the program, or raise :class:`ParseFailure` with every error."""
        statements: list[Statement] = []
        while self._peek() is not None:
            try:
                statements.append(self._statement())
            except _SyntaxError as exc:
                self._errors.append(exc.error)
                self._synchronize()
        if self._errors:
            raise ParseFailure(self._errors)
        return Program(statements)

    def _peek(self) -> Optional[tuple[int, Token, int]]:
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _check(self, *kinds: TokenKind) -> bool:
        spanned = self._peek()
        return spanned is not None and spanned[1].kind in kinds

    def _advance(self) -> Token:
        _, token, _ = self._tokens[self._pos]
        self._pos += 1
        return token

    def _fail(self, *kinds: TokenKind) -> NoReturn:
        expected = _expected(kinds)
        spanned = self._peek()
        if spanned is None:
            raise _SyntaxError(ParseError.unrecognized_eof(expected))
        raise _SyntaxError(ParseError.unrecognized_token(spanned[1], expected))

    def _expect(self, kind: TokenKind, *also: TokenKind) -> Token:
        if self._check(kind):
            return self._advance()
        self._fail(kind, *also)

    def _synchronize(self) -> None:
        while self._peek() is not None:
            if self._advance().kind is TokenKind.SEMICOLON:
                return

    def _statement(self) -> Statement:
        if self._check(TokenKind.VAR):
            self._advance()
            name = self._expect(TokenKind.IDENTIFIER).value
            self._expect(TokenKind.ASSIGN)
            value = self._expression()
            self._expect(TokenKind.SEMICOLON, *_ALL_OPERATORS)
            return VarStatement(name, value)
        if self._check(TokenKind.PRINT):
            self._advance()
            self._expect(TokenKind.LPAREN)
            value = self._expression()
            self._expect(TokenKind.RPAREN, *_ALL_OPERATORS)
            self._expect(TokenKind.SEMICOLON)
            return PrintStatement(value)
        self._fail(TokenKind.VAR, TokenKind.PRINT)

    def _expression(self) -> Expression:
        expr = self._term()
        while self._check(TokenKind.ADD, TokenKind.SUB):
            operator = _OPERATORS[self._advance().kind]
            expr = BinaryOperation(expr, operator, self._term())
        return expr

    def _term(self) -> Expression:
        expr = self._factor()
        while self._check(TokenKind.MUL, TokenKind.DIV):
            operator = _OPERATORS[self._advance().kind]
            expr = BinaryOperation(expr, operator, self._factor())
        return expr

    def _factor(self) -> Expression:
        if self._check(TokenKind.INTEGER):
            return Integer(self._advance().value)
        if self._check(TokenKind.IDENTIFIER):
            return Variable(self._advance().value)
        if self._check(TokenKind.LPAREN):
            self._advance()
            expr = self._expression()
            self._expect(TokenKind.RPAREN, *_ALL_OPERATORS)
            return expr
        self._fail(TokenKind.LPAREN, TokenKind.IDENTIFIER, TokenKind.INTEGER)


def parse(source: str) -> Program:
    """Parse *source* into a program; raise :class:`ParseFailure` on syntax errors."""
    return Parser(source).parse_program()