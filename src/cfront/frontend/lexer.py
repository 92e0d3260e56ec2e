"""
Lexer (Tokenizer)
=================

This module converts C source text into a sequence of tokens for the
parser. The sequence always ends with exactly one EOF token.

Token Categories
----------------
- Keywords: int, long, unsigned, short, struct, return
- Identifiers: a letter or underscore, then letters, digits, underscores
- Numbers: decimal integer literals, 0 .. 2**64 - 1
- Operators: + - * / % & | ^ ~ ! = < > && || << >>
- Punctuation: ( ) { } [ ] ; : , . ? ' "

Operator Matching
-----------------
Operators are resolved longest-match-first against the OPERATORS table
through a lookahead window of MAX_OPERATOR_LENGTH characters, so "&&"
becomes one AND token while "& &" becomes two AMPERSAND tokens. Adding a
three-character operator to the table widens the window automatically.

Example Usage
-------------
>>> from cfront.frontend.lexer import tokenize
>>> for token in tokenize('int main() { return 42; }', "test.c"):
...     print(token)
Token(KEYWORD, 'int', 1:1)
Token(IDENTIFIER, 'main', 1:5)
Token(LPAREN, '(', 1:9)
Token(RPAREN, ')', 1:10)
Token(LBRACE, '{', 1:12)
Token(KEYWORD, 'return', 1:14)
Token(NUMBER, 42, 1:21)
Token(SEMICOLON, ';', 1:23)
Token(RBRACE, '}', 1:25)
Token(EOF, 1:26)
"""

import logging
import string
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator

from cfront.errors import SourceLocation
from cfront.frontend.errors import NumberOverflowError, UnknownCharacterError

logger = logging.getLogger(__name__)


# =============================================================================
# Token Type Enumeration
# =============================================================================

class CTokenType(Enum):
    """Token kinds produced by the lexer."""

    # === Structural ===
    EOF = auto()            # End-marker, always the last token

    # === Words and Literals ===
    KEYWORD = auto()        # Reserved word, value is its text
    IDENTIFIER = auto()     # Name, value is its text
    NUMBER = auto()         # Integer literal, value is an int

    # === Brackets ===
    LBRACE = auto()         # {
    RBRACE = auto()         # }
    LPAREN = auto()         # (
    RPAREN = auto()         # )
    LBRACKET = auto()       # [
    RBRACKET = auto()       # ]

    # === Arithmetic ===
    PLUS = auto()           # +
    MINUS = auto()          # -
    STAR = auto()           # *
    SLASH = auto()          # /
    PERCENT = auto()        # %

    # === Logical ===
    AND = auto()            # &&
    OR = auto()             # ||
    NOT = auto()            # !

    # === Bitwise ===
    AMPERSAND = auto()      # &
    PIPE = auto()           # |
    CARET = auto()          # ^
    TILDE = auto()          # ~
    LSHIFT = auto()         # <<
    RSHIFT = auto()         # >>

    # === Relational and Assignment ===
    LT = auto()             # <
    GT = auto()             # >
    ASSIGN = auto()         # =

    # === Separators ===
    SEMICOLON = auto()      # ;
    COLON = auto()          # :
    COMMA = auto()          # ,
    DOT = auto()            # .
    QUESTION = auto()       # ?
    QUOTE = auto()          # '
    DOUBLE_QUOTE = auto()   # "


# =============================================================================
# Lookup Tables
# =============================================================================

KEYWORDS = frozenset({"int", "long", "unsigned", "short", "struct", "return"})

OPERATORS: dict[str, CTokenType] = {
    "(": CTokenType.LPAREN,
    ")": CTokenType.RPAREN,
    "{": CTokenType.LBRACE,
    "}": CTokenType.RBRACE,
    "[": CTokenType.LBRACKET,
    "]": CTokenType.RBRACKET,
    "+": CTokenType.PLUS,
    "-": CTokenType.MINUS,
    "*": CTokenType.STAR,
    "/": CTokenType.SLASH,
    "%": CTokenType.PERCENT,
    "!": CTokenType.NOT,
    "^": CTokenType.CARET,
    "~": CTokenType.TILDE,
    "&": CTokenType.AMPERSAND,
    "|": CTokenType.PIPE,
    "&&": CTokenType.AND,
    "||": CTokenType.OR,
    "<": CTokenType.LT,
    ">": CTokenType.GT,
    "<<": CTokenType.LSHIFT,
    ">>": CTokenType.RSHIFT,
    "=": CTokenType.ASSIGN,
    ";": CTokenType.SEMICOLON,
    ":": CTokenType.COLON,
    ",": CTokenType.COMMA,
    ".": CTokenType.DOT,
    "?": CTokenType.QUESTION,
    "'": CTokenType.QUOTE,
    '"': CTokenType.DOUBLE_QUOTE,
}

# Text of each operator token, used when building tokens to compare against
OPERATOR_TEXT: dict[CTokenType, str] = {kind: text for text, kind in OPERATORS.items()}

MAX_OPERATOR_LENGTH = max(len(text) for text in OPERATORS)

MAX_NUMBER = 2**64 - 1


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class CToken:
    """
    A single token from C source code.

    Equality looks at type and value only; the position fields are
    carried for diagnostics but ignored when comparing, so the same
    text with different spacing produces equal token sequences.

    Attributes:
        type: The CTokenType classification
        value: Text for keywords, identifiers and operators, int for
               numbers, None for EOF
        line: Line number in source (1-indexed)
        column: Column number in source (1-indexed)
        offset: Character offset in source (0-indexed)
        filename: Name of the source file
    """
    type: CTokenType
    value: str | int | None = None
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)
    offset: int = field(default=0, compare=False)
    filename: str = field(default="<input>", compare=False)

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.value is not None:
            if isinstance(self.value, int):
                return f"Token({self.type.name}, {self.value}, {self.line}:{self.column})"
            return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"
        return f"Token({self.type.name}, {self.line}:{self.column})"

    @classmethod
    def of(cls, token_type: CTokenType, value: str | int | None = None) -> "CToken":
        """
        Build a position-less token, mostly for comparisons.

        Operator tokens get their text filled in automatically:
            CToken.of(CTokenType.RBRACE) == CToken(CTokenType.RBRACE, "}")
        """
        if value is None:
            value = OPERATOR_TEXT.get(token_type)
        return cls(token_type, value)

    @classmethod
    def keyword(cls, text: str) -> "CToken":
        """Build a position-less KEYWORD token."""
        return cls(CTokenType.KEYWORD, text)

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column, self.offset)

    def is_keyword(self, text: str) -> bool:
        """Return True if this is the keyword `text`."""
        return self.type == CTokenType.KEYWORD and self.value == text


# =============================================================================
# Lexer Implementation
# =============================================================================

class CLexer:
    """
    Tokenizes C source code.

    Each instance holds its own cursor, so independent lexers can run
    concurrently on different inputs.

    Usage:
        lexer = CLexer(source_text, filename)
        tokens = list(lexer.tokenize())

    Attributes:
        source: The source code being tokenized
        filename: Name of the source file (for error reporting)
    """

    DIGITS = string.digits

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
    ):
        """
        Initialize the lexer with source code.

        Args:
            source: The C source code to tokenize
            filename: Name of the source file (for error messages)
        """
        self.source = source
        self.filename = filename

        self._pos = 0
        self._line = 1
        self._column = 1

        # Track line start position for error reporting
        self._line_start_pos = 0

    def tokenize(self) -> Iterator[CToken]:
        """
        Generate tokens from the source code.

        Yields:
            CToken objects, always ending with one EOF token

        Raises:
            UnknownCharacterError: If a character starts no token
            NumberOverflowError: If a literal exceeds 64 bits
        """
        while True:
            self._skip_whitespace()
            if self._at_end():
                break

            token = self._scan_token()
            logger.debug(f"Scanned {token!r}")
            yield token

        yield self._make_token(CTokenType.EOF, None, self._line, self._column, self._pos)

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _peek(self, offset: int = 0) -> str:
        """
        Look at character at current position + offset without advancing.

        Returns empty string if past end of source.
        """
        pos = self._pos + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _lookahead(self, length: int) -> str:
        """Return up to `length` characters from the cursor without advancing."""
        return self.source[self._pos:self._pos + length]

    def _advance(self) -> str:
        """
        Consume and return the current character, advancing position.

        Updates line and column tracking for error reporting.
        """
        if self._at_end():
            return ""

        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 1
            self._line_start_pos = self._pos
        else:
            self._column += 1

        return char

    # =========================================================================
    # Token Creation
    # =========================================================================

    def _make_token(
        self,
        token_type: CTokenType,
        value: str | int | None,
        start_line: int,
        start_column: int,
        start_offset: int,
    ) -> CToken:
        return CToken(
            type=token_type,
            value=value,
            line=start_line,
            column=start_column,
            offset=start_offset,
            filename=self.filename,
        )

    def _get_current_line(self) -> str:
        """Get the current line of source text for error reporting."""
        line_end = self.source.find("\n", self._line_start_pos)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[self._line_start_pos:line_end]

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _skip_whitespace(self) -> None:
        while not self._at_end() and self._peek().isspace():
            self._advance()

    def _scan_token(self) -> CToken:
        start = (self._line, self._column, self._pos)
        char = self._peek()

        if char.isalpha() or char == "_":
            return self._scan_identifier(*start)

        if char in self.DIGITS:
            return self._scan_number(*start)

        return self._scan_operator(*start)

    def _scan_identifier(self, start_line: int, start_column: int, start_offset: int) -> CToken:
        """
        Scan an identifier or keyword.

        Keywords are identifier-shaped words found in KEYWORDS.
        """
        chars = []
        while not self._at_end():
            char = self._peek()
            if not (char.isalpha() or char in self.DIGITS or char == "_"):
                break
            chars.append(self._advance())

        name = "".join(chars)
        token_type = CTokenType.KEYWORD if name in KEYWORDS else CTokenType.IDENTIFIER
        return self._make_token(token_type, name, start_line, start_column, start_offset)

    def _scan_number(self, start_line: int, start_column: int, start_offset: int) -> CToken:
        """
        Scan a decimal integer literal.

        The value is accumulated most significant digit first. Literals
        larger than MAX_NUMBER are rejected rather than wrapped. Once the
        value overflows, the remaining digits are only collected for the
        error message.
        """
        chars = []
        value = 0
        overflow = False
        while self._peek() and self._peek() in self.DIGITS:
            char = self._advance()
            chars.append(char)
            if not overflow:
                value = value * 10 + int(char)
                overflow = value > MAX_NUMBER

        if overflow:
            raise NumberOverflowError(
                "".join(chars),
                SourceLocation(self.filename, start_line, start_column, start_offset),
                self._get_current_line(),
            )

        return self._make_token(CTokenType.NUMBER, value, start_line, start_column, start_offset)

    def _scan_operator(self, start_line: int, start_column: int, start_offset: int) -> CToken:
        """
        Scan an operator or punctuation token, longest match first.

        Raises:
            UnknownCharacterError: If no operator starts here
        """
        for length in range(MAX_OPERATOR_LENGTH, 0, -1):
            candidate = self._lookahead(length)
            if len(candidate) == length and candidate in OPERATORS:
                for _ in range(length):
                    self._advance()
                return self._make_token(
                    OPERATORS[candidate], candidate, start_line, start_column, start_offset
                )

        raise UnknownCharacterError(
            self._peek(),
            SourceLocation(self.filename, start_line, start_column, start_offset),
            self._get_current_line(),
        )


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(source: str, filename: str = "<input>") -> list[CToken]:
    """
    Convert source text into a list of tokens ending with EOF.

    Args:
        source: The C source code
        filename: Source filename for error messages

    Returns:
        The complete token sequence

    Raises:
        LexicalError: If the source contains an unknown character or an
            oversized number
    """
    return list(CLexer(source, filename).tokenize())
