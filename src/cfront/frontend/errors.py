"""
Front-End Error Hierarchy
=========================

This module defines the exceptions raised by the tokenizer, the parser
and the file-reading entry point. All of them inherit from FrontendError,
which itself inherits from CFrontError.

Exception Hierarchy
-------------------
FrontendError (base for all front-end errors)
├── LexicalError - the tokenizer rejected the input
│   ├── UnknownCharacterError - character not valid in any token
│   └── NumberOverflowError - numeric literal above 64 bits
├── ParseError - the parser rejected the token sequence
│   ├── NameExpectedError - identifier expected
│   ├── NumberExpectedError - numeric literal expected
│   ├── TypeExpectedError - type keyword expected
│   └── ExpectedTokenError - a specific token expected
└── SourceReadError - the input file could not be read

Error Message Format
--------------------
    main.c:1:12: error: expected 'return', found identifier 'retrun'
        int main(){retrun 0;}
                   ^
    hint: statements must start with 'return'

Only the first failure is ever reported: the tokenizer and the parser
stop at the first error, so a caller receives exactly one exception.
"""

from typing import Optional

from cfront.errors import CFrontError, SourceLocation


# =============================================================================
# Base Front-End Exception
# =============================================================================

class FrontendError(CFrontError):
    """
    Base exception for all front-end errors.

    Provides source location tracking, source line context and hints.

    Attributes:
        message: The error description
        location: Where in the source the error occurred
        hint: A suggestion for fixing the error
        source_line: The actual source text at the error location
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example:
            main.c:3:5: error: invalid character '@' (0x40)
                @return 0;
                ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(FrontendError):
    """
    The tokenizer could not turn the source into tokens.

    Raised instead of aborting, so that callers can report the problem
    and carry on.
    """
    pass


class UnknownCharacterError(LexicalError):
    """
    Character that does not start any token.

    Example:
        int main() { return 0 @ }
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"invalid character '{char}' (0x{ord(char):02X})",
            location=location,
            source_line=source_line,
        )

    @property
    def position(self) -> Optional[int]:
        """Character offset of the offending character."""
        return self.location.offset if self.location else None


class NumberOverflowError(LexicalError):
    """
    Numeric literal that does not fit in an unsigned 64-bit integer.

    Literals are never wrapped or saturated; anything above
    18446744073709551615 is rejected.
    """

    def __init__(
        self,
        literal: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.literal = literal
        super().__init__(
            f"integer literal '{literal}' is too large",
            location=location,
            hint="numeric literals must fit in 64 bits (at most 18446744073709551615)",
            source_line=source_line,
        )


# =============================================================================
# Syntax Errors
# =============================================================================

def describe_token(token) -> str:
    """Describe a token in words for error messages."""
    from cfront.frontend.lexer import CTokenType

    if token is None:
        return "nothing"
    if token.type == CTokenType.EOF:
        return "end of input"
    if token.type == CTokenType.KEYWORD:
        return f"'{token.value}'"
    if token.type == CTokenType.IDENTIFIER:
        return f"identifier '{token.value}'"
    if token.type == CTokenType.NUMBER:
        return f"number {token.value}"
    return f"'{token.value}'"


class ParseError(FrontendError):
    """
    The parser rejected the token sequence.

    Every parse error records which grammar rule failed and what was
    found instead.

    Attributes:
        token: The token found where something else was required
        index: Position of that token in the token sequence
        rule: Name of the grammar rule that failed
    """

    rule = "program"
    expected_description = "valid syntax"

    def __init__(
        self,
        token=None,
        index: Optional[int] = None,
        source_line: Optional[str] = None,
        hint: Optional[str] = None,
        message: Optional[str] = None,
    ):
        self.token = token
        self.index = index
        if message is None:
            message = f"expected {self.expected_description}, found {describe_token(token)}"
        location = token.location if token is not None else None
        super().__init__(message, location=location, hint=hint, source_line=source_line)


class NameExpectedError(ParseError):
    """An identifier was required (function name)."""

    rule = "name"
    expected_description = "a name"


class NumberExpectedError(ParseError):
    """A numeric literal was required (the only expression form)."""

    rule = "expr"
    expected_description = "a number"


class TypeExpectedError(ParseError):
    """A type keyword was required; only 'int' is accepted."""

    rule = "type"
    expected_description = "a type ('int')"


class ExpectedTokenError(ParseError):
    """
    A specific token was required but another one was found.

    Raised by the parser's generic token-equality check, used for all
    punctuation and for the 'return' keyword.

    Attributes:
        expected: The token the grammar required
        actual: The token that was found (same object as ``token``)
    """

    def __init__(
        self,
        expected,
        actual,
        index: Optional[int] = None,
        rule: str = "token",
        source_line: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        self.expected = expected
        self.rule = rule
        super().__init__(
            actual,
            index=index,
            source_line=source_line,
            hint=hint,
            message=f"expected {describe_token(expected)}, found {describe_token(actual)}",
        )

    @property
    def actual(self):
        return self.token


# =============================================================================
# Input Errors
# =============================================================================

class SourceReadError(FrontendError):
    """
    The source file could not be read.

    Raised when the file does not exist, is not readable, or is not
    valid UTF-8 text.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read '{path}': {reason}")
