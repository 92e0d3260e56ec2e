"""
cfront Command-Line Interface
=============================

This package provides the command-line tools for cfront:

- **cfc**: tokenize and parse a C source file, print the AST

Each tool is implemented as a Click-based CLI application.
"""

__all__ = ["cfc"]
