"""
C Subset Front-End
==================

This package turns C source text into tokens and then into an Abstract
Syntax Tree for a small subset of C: top-level functions without
parameters whose bodies are sequences of ``return <number>`` statements.

Pipeline
--------
    C Source → Lexer → Parser → AST

Usage
-----
>>> from cfront.frontend import tokenize, parse_program
>>> program = parse_program(tokenize('int main() { return 0; }'))
>>> program.declarations[0].name
'main'

Language Subset
---------------
Supported:
- Types: int
- Declarations: functions with an empty parameter list
- Statements: return
- Expressions: decimal integer literals (64-bit unsigned)

The lexer already recognizes the keywords and operators of a larger
subset (long, unsigned, short, struct, arithmetic, logical, bitwise and
relational operators) so the grammar can grow without lexer changes.
"""

from cfront.frontend.errors import (
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
)
from cfront.frontend.lexer import CLexer, CTokenType, CToken, KEYWORDS, tokenize
from cfront.frontend.parser import CParser, parse_program, parse_source
from cfront.frontend.types import CType, TYPE_INT
from cfront.frontend.ast import (
    ASTNode,
    Expression,
    Statement,
    Declaration,
    ProgramNode,
    FunctionNode,
    ParameterNode,
    BlockStatement,
    ReturnStatement,
    NumberLiteral,
    ASTVisitor,
    ASTPrinter,
)
from cfront.frontend.pipeline import (
    Frontend,
    FrontendOptions,
    FrontendResult,
    run_frontend,
)

__all__ = [
    # Errors
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
    # Lexer
    "CLexer",
    "CTokenType",
    "CToken",
    "KEYWORDS",
    "tokenize",
    # Parser
    "CParser",
    "parse_program",
    "parse_source",
    # Types
    "CType",
    "TYPE_INT",
    # AST Nodes
    "ASTNode",
    "Expression",
    "Statement",
    "Declaration",
    "ProgramNode",
    "FunctionNode",
    "ParameterNode",
    "BlockStatement",
    "ReturnStatement",
    "NumberLiteral",
    "ASTVisitor",
    "ASTPrinter",
    # Pipeline
    "Frontend",
    "FrontendOptions",
    "FrontendResult",
    "run_frontend",
]
