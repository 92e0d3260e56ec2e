"""
Front-End Pipeline
==================

This module runs the complete front-end:

    Source → Lex → Parse → AST

Usage
-----
Programmatic:
    >>> from cfront.frontend import run_frontend
    >>> result = run_frontend('int main() { return 0; }')
    >>> result.success, result.declaration_count
    (True, 1)

Failures do not raise: a lexical or syntax error is stored in
``result.error`` and ``result.success`` is False. Only reading a file can
raise, with SourceReadError, so that callers can tell "the file is bad"
apart from "the program is bad".
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from cfront.frontend.ast import ProgramNode
from cfront.frontend.errors import FrontendError, SourceReadError
from cfront.frontend.lexer import CLexer, CToken
from cfront.frontend.parser import CParser

logger = logging.getLogger(__name__)


_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class FrontendOptions:
    """
    Front-end configuration options.

    Attributes:
        legacy_separators: Between declarations, discard exactly one
                           token (whatever it is) instead of skipping
                           only stray ';' tokens.
        keep_tokens: Keep the token list on the result (for dumps).
    """
    legacy_separators: bool = False
    keep_tokens: bool = True

    @classmethod
    def from_env(cls) -> "FrontendOptions":
        """
        Create FrontendOptions from environment variables.

        Environment variables (all optional):
            CFRONT_LEGACY_SEPARATORS: "1", "true", "yes" or "on" to enable
        """
        options = cls()
        if value := os.environ.get("CFRONT_LEGACY_SEPARATORS"):
            options.legacy_separators = value.strip().lower() in _TRUTHY
        return options


@dataclass
class FrontendResult:
    """
    Result of one front-end run.

    Exactly one of ``program`` and ``error`` is set.

    Attributes:
        filename: Source filename
        success: True if tokenizing and parsing succeeded
        tokens: Token sequence (empty if lexing failed or not kept)
        token_count: Number of tokens produced
        program: The parsed program (if successful)
        error: The first error encountered (if not successful)
    """
    filename: str = ""
    success: bool = False
    tokens: list[CToken] = field(default_factory=list)
    token_count: int = 0
    program: Optional[ProgramNode] = None
    error: Optional[FrontendError] = None

    @property
    def declaration_count(self) -> int:
        return len(self.program.declarations) if self.program is not None else 0


class Frontend:
    """
    Runs the tokenizer and parser over a source text.

    Each call works on fresh lexer and parser instances, so one Frontend
    can be shared between threads.

    Example:
        frontend = Frontend()
        result = frontend.process_file("main.c")
        if result.success:
            print(result.program)

    Attributes:
        options: Front-end configuration options
    """

    def __init__(self, options: Optional[FrontendOptions] = None):
        self.options = options or FrontendOptions()

    def process_source(self, source: str, filename: str = "<input>") -> FrontendResult:
        """
        Tokenize and parse source text.

        Args:
            source: C source code
            filename: Source filename for error messages

        Returns:
            FrontendResult holding either the program or the error
        """
        result = FrontendResult(filename=filename)

        try:
            tokens = list(CLexer(source, filename).tokenize())
            result.token_count = len(tokens)
            if self.options.keep_tokens:
                result.tokens = tokens
            logger.debug(f"{filename}: {len(tokens)} tokens")

            parser = CParser(
                tokens,
                filename,
                source.split("\n"),
                legacy_separators=self.options.legacy_separators,
            )
            result.program = parser.parse()
            result.success = True
            logger.debug(f"{filename}: parsed {result.declaration_count} declaration(s)")

        except FrontendError as e:
            logger.debug(f"{filename}: {type(e).__name__}: {e.message}")
            result.error = e

        return result

    def process_file(self, filepath: str | Path) -> FrontendResult:
        """
        Read a UTF-8 source file and run the front-end on it.

        Args:
            filepath: Path to the C source file

        Returns:
            FrontendResult holding either the program or the error

        Raises:
            SourceReadError: If the file cannot be read or decoded
        """
        path = Path(filepath)
        try:
            source = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise SourceReadError(str(path), f"not valid UTF-8 ({e.reason})") from e
        except OSError as e:
            raise SourceReadError(str(path), e.strerror or str(e)) from e

        return self.process_source(source, str(path))


def run_frontend(
    source: str,
    filename: str = "<input>",
    options: Optional[FrontendOptions] = None,
) -> FrontendResult:
    """Tokenize and parse source text with a one-off Frontend."""
    return Frontend(options).process_source(source, filename)
