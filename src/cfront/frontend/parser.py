"""
Recursive Descent Parser
========================

This module implements a recursive descent parser for the supported C
subset. It takes the token sequence from the lexer and builds an
Abstract Syntax Tree (AST), using a single token of lookahead and no
backtracking.

Grammar (EBNF)
--------------
program     ::= declaration+
declaration ::= type IDENTIFIER '(' ')' block
block       ::= '{' (statement (';' statement)* ';'?)? '}'
statement   ::= 'return' expression
expression  ::= NUMBER
type        ::= 'int'

Separators
----------
Inside a block, ';' separates statements and is optional before '}'.
Two statements without ';' between them are rejected.

Between declarations, stray ';' tokens are skipped. In legacy mode the
parser instead discards exactly one token, whatever it is, after every
declaration not followed by EOF.

Errors
------
The first failure raises a ParseError subclass and no partial AST is
returned.

Example Usage
-------------
>>> from cfront.frontend.lexer import tokenize
>>> from cfront.frontend.parser import parse_program
>>> program = parse_program(tokenize('int main() { return 42; }'))
>>> program.declarations[0].name
'main'
"""

import logging
from typing import Optional

from cfront.errors import SourceLocation
from cfront.frontend.lexer import CLexer, CToken, CTokenType
from cfront.frontend.types import CType
from cfront.frontend.ast import (
    ProgramNode,
    FunctionNode,
    ParameterNode,
    BlockStatement,
    ReturnStatement,
    Statement,
    Expression,
    NumberLiteral,
)
from cfront.frontend.errors import (
    ExpectedTokenError,
    NameExpectedError,
    NumberExpectedError,
    TypeExpectedError,
)

logger = logging.getLogger(__name__)


RETURN_KEYWORD = CToken.keyword("return")


class CParser:
    """
    Recursive descent parser.

    Each grammar rule is one _parse_* method; the only state shared
    between them is the cursor into the token list.

    Attributes:
        tokens: List of tokens to parse (must end with EOF)
        filename: Source filename for error reporting
        legacy_separators: Discard one token between declarations
    """

    def __init__(
        self,
        tokens: list[CToken],
        filename: str = "<input>",
        source_lines: Optional[list[str]] = None,
        legacy_separators: bool = False,
    ):
        """
        Initialize the parser.

        Args:
            tokens: List of tokens from the lexer
            filename: Source filename for error messages
            source_lines: Original source lines for error context
            legacy_separators: Keep the old declaration separator rule
        """
        if not tokens or tokens[-1].type != CTokenType.EOF:
            raise ValueError("token sequence must end with an EOF token")

        self.tokens = tokens
        self.filename = filename
        self.source_lines = source_lines or []
        self.legacy_separators = legacy_separators

        self._pos = 0

    def parse(self) -> ProgramNode:
        """
        Parse the token stream into an AST.

        Returns:
            ProgramNode containing at least one declaration

        Raises:
            ParseError: At the first syntax error
        """
        declarations = [self._parse_declaration()]

        while not self._at_end():
            if self.legacy_separators:
                skipped = self._advance()
                logger.debug(f"Discarding {skipped!r} between declarations")
            else:
                while self._match(CTokenType.SEMICOLON):
                    pass
                if self._at_end():
                    break
            declarations.append(self._parse_declaration())

        logger.debug(f"Parsed {len(declarations)} declaration(s)")
        return ProgramNode(
            declarations=declarations,
            location=SourceLocation(self.filename, 1, 1),
        )

    # =========================================================================
    # Token Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._peek().type == CTokenType.EOF

    def _peek(self) -> CToken:
        """Look at the current token without consuming it."""
        return self.tokens[self._pos]

    def _advance(self) -> CToken:
        """Consume and return the current token (EOF is never consumed)."""
        token = self.tokens[self._pos]
        if token.type != CTokenType.EOF:
            self._pos += 1
        return token

    def _check(self, *types: CTokenType) -> bool:
        return self._peek().type in types

    def _match(self, *types: CTokenType) -> Optional[CToken]:
        """
        Consume current token if it matches one of the types.

        Returns:
            The consumed token, or None if no match
        """
        if self._check(*types):
            return self._advance()
        return None

    def _expect(self, expected: CToken, rule: str = "token") -> CToken:
        """
        Consume the current token, which must equal `expected`.

        Args:
            expected: The required token (compared by type and value)
            rule: Grammar rule name for the error

        Raises:
            ExpectedTokenError: If a different token is found
        """
        index = self._pos
        token = self._advance()
        if token == expected:
            return token
        raise ExpectedTokenError(
            expected,
            token,
            index=index,
            rule=rule,
            source_line=self._get_source_line(token.line),
        )

    def _get_source_line(self, line: int) -> Optional[str]:
        """Get source line for error reporting."""
        if 0 < line <= len(self.source_lines):
            return self.source_lines[line - 1]
        return None

    # =========================================================================
    # Declarations
    # =========================================================================

    def _parse_declaration(self) -> FunctionNode:
        """Parse a function definition."""
        location = self._peek().location
        return_type = self._parse_type()
        name = self._parse_name()

        self._expect(CToken.of(CTokenType.LPAREN), rule="declaration")
        parameters = self._parse_parameter_list()
        self._expect(CToken.of(CTokenType.RPAREN), rule="declaration")

        body = self._parse_block()

        logger.debug(f"Parsed function '{name}' with {len(body.statements)} statement(s)")
        return FunctionNode(
            return_type=return_type,
            name=name,
            parameters=parameters,
            body=body,
            location=location,
        )

    def _parse_parameter_list(self) -> list[ParameterNode]:
        """Parse function parameters; only the empty list is supported."""
        return []

    def _parse_type(self) -> CType:
        index = self._pos
        token = self._advance()
        if token.type == CTokenType.KEYWORD:
            ctype = CType(token.value)
            if ctype.is_primitive:
                return ctype
        raise TypeExpectedError(token, index, self._get_source_line(token.line))

    def _parse_name(self) -> str:
        index = self._pos
        token = self._advance()
        if token.type == CTokenType.IDENTIFIER:
            return token.value
        raise NameExpectedError(token, index, self._get_source_line(token.line))

    # =========================================================================
    # Blocks and Statements
    # =========================================================================

    def _parse_block(self) -> BlockStatement:
        """Parse a block statement { ... }."""
        location = self._peek().location
        self._expect(CToken.of(CTokenType.LBRACE), rule="block")

        statements = []
        while not self._check(CTokenType.RBRACE):
            statements.append(self._parse_statement())
            if not self._match(CTokenType.SEMICOLON):
                break

        self._expect(CToken.of(CTokenType.RBRACE), rule="block")

        return BlockStatement(statements=statements, location=location)

    def _parse_statement(self) -> Statement:
        token = self._peek()
        if token.is_keyword("return"):
            self._advance()
            value = self._parse_expression()
            return ReturnStatement(value=value, location=token.location)

        raise ExpectedTokenError(
            RETURN_KEYWORD,
            token,
            index=self._pos,
            rule="statement",
            source_line=self._get_source_line(token.line),
            hint="statements must start with 'return'",
        )

    # =========================================================================
    # Expressions
    # =========================================================================

    def _parse_expression(self) -> Expression:
        index = self._pos
        token = self._advance()
        if token.type == CTokenType.NUMBER:
            return NumberLiteral(value=token.value, location=token.location)
        raise NumberExpectedError(token, index, self._get_source_line(token.line))


# =============================================================================
# Convenience Functions
# =============================================================================

def parse_program(
    tokens: list[CToken],
    filename: str = "<input>",
    source_lines: Optional[list[str]] = None,
    legacy_separators: bool = False,
) -> ProgramNode:
    """
    Parse a token sequence into a program.

    Args:
        tokens: Token sequence ending with EOF
        filename: Source filename for error messages
        source_lines: Original source lines for error context
        legacy_separators: Discard one token between declarations

    Returns:
        The root ProgramNode of the AST

    Raises:
        ParseError: If parsing fails
    """
    parser = CParser(tokens, filename, source_lines, legacy_separators)
    return parser.parse()


def parse_source(
    source: str,
    filename: str = "<input>",
    legacy_separators: bool = False,
) -> ProgramNode:
    """
    Parse C source code into an AST.

    This is a convenience function that combines lexing and parsing.

    Raises:
        LexicalError: If tokenizing fails
        ParseError: If parsing fails
    """
    lexer = CLexer(source, filename)
    tokens = list(lexer.tokenize())
    return parse_program(tokens, filename, source.split("\n"), legacy_separators)
