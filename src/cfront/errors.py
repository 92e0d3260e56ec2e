"""
cfront Error Hierarchy
======================

This module defines the root of the exception hierarchy for cfront.
All exceptions inherit from CFrontError, allowing callers to catch every
front-end failure with a single except clause if desired.

Exception Hierarchy
-------------------
CFrontError (base)
└── FrontendError (see cfront.frontend.errors)
    ├── LexicalError - the tokenizer rejected the input
    ├── ParseError - the parser rejected the token sequence
    └── SourceReadError - the source file could not be read

Design Philosophy
-----------------
Each exception captures source location information (filename, line,
column, offset) when applicable, so that diagnostics can point at the
exact character that caused the failure.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass


# =============================================================================
# Base Exception Class
# =============================================================================

class CFrontError(Exception):
    """
    Base exception for all cfront errors.

    All exceptions in the package inherit from this class:

        try:
            program = parse_source(text)
        except CFrontError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Tokens, AST nodes and errors all carry one of these. The frozen
    design ensures locations cannot be accidentally modified.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        offset: Character offset from the start of the source (0-indexed)
    """
    filename: str
    line: int
    column: int
    offset: int = 0

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"
