"""
Tests for the error hierarchy and message formatting.
"""

from cfront.errors import CFrontError, SourceLocation
from cfront.frontend.errors import (
    ExpectedTokenError,
    FrontendError,
    LexicalError,
    NumberOverflowError,
    ParseError,
    SourceReadError,
    TypeExpectedError,
    UnknownCharacterError,
)
from cfront.frontend.lexer import CToken, CTokenType


class TestSourceLocation:

    def test_str(self):
        assert str(SourceLocation("a.c", 3, 14)) == "a.c:3:14"

    def test_offset_default(self):
        assert SourceLocation("a.c", 1, 1).offset == 0


class TestMessageFormat:
    """FrontendError renders location, source line, caret and hint."""

    def test_full_message(self):
        error = FrontendError(
            "something broke",
            SourceLocation("a.c", 2, 3),
            hint="try again",
            source_line="xyz",
        )
        assert str(error) == "a.c:2:3: error: something broke\n    xyz\n      ^\nhint: try again"

    def test_without_location(self):
        assert str(FrontendError("oops")) == "error: oops"

    def test_hierarchy(self):
        assert issubclass(FrontendError, CFrontError)
        assert issubclass(UnknownCharacterError, LexicalError)
        assert issubclass(NumberOverflowError, LexicalError)
        assert issubclass(ExpectedTokenError, ParseError)
        assert issubclass(SourceReadError, FrontendError)


class TestParseErrorDetails:

    def test_expected_token_error_fields(self):
        found = CToken(CTokenType.NUMBER, 3, line=1, column=9, filename="x.c")
        error = ExpectedTokenError(CToken.of(CTokenType.SEMICOLON), found, index=4, rule="block")

        assert error.expected.type == CTokenType.SEMICOLON
        assert error.actual is found
        assert error.index == 4
        assert error.rule == "block"
        assert str(error) == "x.c:1:9: error: expected ';', found number 3"

    def test_type_expected_message(self):
        eof = CToken(CTokenType.EOF, line=1, column=1)
        error = TypeExpectedError(eof, 0)
        assert error.message == "expected a type ('int'), found end of input"
        assert error.rule == "type"

    def test_unknown_character_position(self):
        error = UnknownCharacterError("@", SourceLocation("a.c", 1, 5, 4))
        assert error.position == 4
        assert "(0x40)" in error.message
