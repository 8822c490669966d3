from toyfront.error import (
    InvalidInteger,
    InvalidToken,
    LexicalError,
    ParseError,
    ParseFailure,
)
from toyfront.tokens import Token, TokenKind


def test_lexical_error_messages():
    assert str(InvalidToken()) == "Invalid token"
    reason = "too big"
    assert str(InvalidInteger(reason)) == f"Invalid integer: {reason}"


def test_lexical_errors_compare_by_kind_and_reason():
    assert InvalidToken() == InvalidToken()
    assert InvalidInteger("a") == InvalidInteger("a")
    assert InvalidInteger("a") != InvalidInteger("b")
    assert InvalidInteger("a") != InvalidToken()
    assert isinstance(InvalidToken(), LexicalError)


def test_invalid_token():
    assert ParseError.invalid_token() == ParseError("invalid token")


def test_unrecognized_token():
    error = ParseError.unrecognized_token(Token(TokenKind.VAR), ['"="', '";"'])
    assert error.message == "unrecognised token 'Var', expected \"=\", \";\""
    assert error.note is None


def test_extra_token():
    error = ParseError.extra_token(Token(TokenKind.ERROR))
    assert error.message == "extra token 'Error' encountered"


def test_unrecognized_eof():
    error = ParseError.unrecognized_eof(['";"'])
    assert error.message == 'unexpected end of file, expecting ";"'


def test_user_error_uses_its_text():
    assert ParseError.user(InvalidToken()).message == str(InvalidToken())


def test_with_note_returns_new_error():
    error = ParseError("boom")
    noted = error.with_note("look here")
    assert noted == ParseError("boom", "look here")
    assert error.note is None


def test_report_contains_message_and_note():
    report = ParseError("boom").with_note("look here").report("var x = 1;")
    assert "boom" in report
    assert "look here" in report
    assert report.endswith("\n")


def test_report_without_note_omits_it():
    report = ParseError("boom").report("")
    assert "Note" not in report
    assert "boom" in report


def test_parse_failure_holds_errors():
    errors = [ParseError("a"), ParseError("b")]
    failure = ParseFailure(errors)
    assert failure.errors == errors
    assert str(len(errors)) in str(failure)