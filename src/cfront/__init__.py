"""
cfront - A Front-End for a Small Subset of C
============================================

This package turns C source text into a token sequence and then into an
Abstract Syntax Tree. It is meant for learning and experimenting with
compiler construction, not for compiling real programs.

Main Components
---------------
- **frontend**: lexer, recursive descent parser, AST model and the
  pipeline that runs them
- **cli**: the ``cfc`` command-line tool

Quick Start
-----------
    >>> from cfront import parse_source
    >>> program = parse_source("int main() { return 0; }")
    >>> program.declarations[0].body.statements
    [ReturnStatement(value=NumberLiteral(value=0))]

Or use the command-line tool:
    $ cfc main.c
"""

__version__ = "0.1.0"

from cfront.errors import CFrontError, SourceLocation
from cfront.frontend import (
    FrontendError,
    LexicalError,
    UnknownCharacterError,
    NumberOverflowError,
    ParseError,
    NameExpectedError,
    NumberExpectedError,
    TypeExpectedError,
    ExpectedTokenError,
    SourceReadError,
    CTokenType,
    CToken,
    tokenize,
    parse_program,
    parse_source,
    ProgramNode,
    Frontend,
    FrontendOptions,
    FrontendResult,
    run_frontend,
)

__all__ = [
    "__version__",
    # Exception hierarchy
    "CFrontError",
    "SourceLocation",
    "FrontendError",
    "LexicalError",
    "UnknownCharacterError",
    "NumberOverflowError",
    "ParseError",
    "NameExpectedError",
    "NumberExpectedError",
    "TypeExpectedError",
    "ExpectedTokenError",
    "SourceReadError",
    # Core operations
    "CTokenType",
    "CToken",
    "tokenize",
    "parse_program",
    "parse_source",
    "ProgramNode",
    # Pipeline
    "Frontend",
    "FrontendOptions",
    "FrontendResult",
    "run_frontend",
]
