import pytest

from toyfront.lexer import Lexer
from toyfront.tokens import Token, TokenKind


def test_lex_var():
    lexer = Lexer("var x = 42;")
    assert next(lexer) == (0, Token(TokenKind.VAR), 3)
    assert next(lexer) == (4, Token(TokenKind.IDENTIFIER, "x"), 5)
    assert next(lexer) == (6, Token(TokenKind.ASSIGN), 7)
    assert next(lexer) == (8, Token(TokenKind.INTEGER, 42), 10)
    assert next(lexer) == (10, Token(TokenKind.SEMICOLON), 11)


def test_exhausted_lexer_stops():
    lexer = Lexer("x")
    assert next(lexer) == (0, Token(TokenKind.IDENTIFIER, "x"), 1)
    with pytest.raises(StopIteration):
        next(lexer)


def test_invalid_character_becomes_error_token():
    assert list(Lexer("x != 1")) == [
        (0, Token(TokenKind.IDENTIFIER, "x"), 1),
        (2, Token(TokenKind.ERROR), 3),
        (3, Token(TokenKind.ASSIGN), 4),
        (5, Token(TokenKind.INTEGER, 1), 6),
    ]


def test_overflow_becomes_error_token():
    source = "123456789012345678901234"
    assert list(Lexer(source)) == [(0, Token(TokenKind.ERROR), len(source))]


def test_lexer_is_its_own_iterator():
    lexer = Lexer("")
    assert iter(lexer) is lexer
    assert list(lexer) == []