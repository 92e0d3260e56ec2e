"""
Parser Test Suite
=================

Tests for the recursive descent parser: the supported grammar, the
block and declaration separator rules, and the error taxonomy.

Test Organization
-----------------
- TestFunctions: declarations and their parts
- TestBlocks: statement lists and the ';' separator rule
- TestDeclarationSequence: several declarations, default and legacy mode
- TestParseErrors: which error is raised for which input
"""

import pytest

from cfront.frontend.lexer import CToken, CTokenType, tokenize
from cfront.frontend.parser import CParser, parse_program, parse_source
from cfront.frontend.types import CType, TYPE_INT
from cfront.frontend.ast import (
    BlockStatement,
    FunctionNode,
    NumberLiteral,
    ProgramNode,
    ReturnStatement,
)
from cfront.frontend.errors import (
    ExpectedTokenError,
    NameExpectedError,
    NumberExpectedError,
    ParseError,
    TypeExpectedError,
)


def returns(*values: int) -> list[ReturnStatement]:
    """Build the expected statement list for a body of return statements."""
    return [ReturnStatement(NumberLiteral(v)) for v in values]


# =============================================================================
# Function Declaration Tests
# =============================================================================

class TestFunctions:
    """Tests for function declarations."""

    def test_happy_path(self):
        program = parse_program(tokenize("int main(){return 0;}"))

        assert isinstance(program, ProgramNode)
        assert len(program.declarations) == 1

        func = program.declarations[0]
        assert isinstance(func, FunctionNode)
        assert func.name == "main"
        assert func.return_type == TYPE_INT
        assert str(func.return_type) == "int"
        assert func.parameters == []
        assert func.body.statements == returns(0)

    def test_whole_tree_equality(self):
        """Locations are ignored when comparing trees."""
        program = parse_source("int main() { return 7; }")
        expected = ProgramNode(declarations=[
            FunctionNode(
                return_type=CType("int"),
                name="main",
                parameters=[],
                body=BlockStatement(returns(7)),
            )
        ])
        assert program == expected

    def test_empty_body(self):
        func = parse_source("int main() {}").declarations[0]
        assert func.body.statements == []

    def test_large_return_value(self):
        func = parse_source("int main() { return 18446744073709551615; }").declarations[0]
        assert func.body.statements[0].value.value == 2**64 - 1

    def test_node_locations(self):
        func = parse_source("\n  int main() {\n return 3; }", "loc.c").declarations[0]
        assert (func.location.line, func.location.column) == (2, 3)
        assert func.location.filename == "loc.c"

        stmt = func.body.statements[0]
        assert (stmt.location.line, stmt.location.column) == (3, 2)
        assert (stmt.value.location.line, stmt.value.location.column) == (3, 9)

    def test_program_is_sequence_like(self):
        program = parse_source("int a(){} int b(){}")
        assert len(program) == 2
        assert [d.name for d in program] == ["a", "b"]
        assert program[1].name == "b"


# =============================================================================
# Block Tests
# =============================================================================

class TestBlocks:
    """Statements inside braces are separated by ';'."""

    def test_two_statements(self):
        func = parse_source("int main(){return 0; return 1}").declarations[0]
        assert func.body.statements == returns(0, 1)

    def test_trailing_semicolon_optional(self):
        func = parse_source("int main(){return 0; return 1;}").declarations[0]
        assert func.body.statements == returns(0, 1)

    def test_single_statement_without_semicolon(self):
        func = parse_source("int main(){return 5}").declarations[0]
        assert func.body.statements == returns(5)

    def test_statement_order_preserved(self):
        func = parse_source("int main(){return 3; return 1; return 2;}").declarations[0]
        assert func.body.statements == returns(3, 1, 2)

    def test_missing_separator_rejected(self):
        with pytest.raises(ExpectedTokenError) as exc_info:
            parse_source("int main(){return 0 return 1}")

        error = exc_info.value
        assert error.expected == CToken.of(CTokenType.RBRACE)
        assert error.actual == CToken.keyword("return")
        assert error.rule == "block"

    def test_lone_semicolon_rejected(self):
        with pytest.raises(ExpectedTokenError) as exc_info:
            parse_source("int main(){;}")
        assert exc_info.value.expected == CToken.keyword("return")
        assert exc_info.value.actual == CToken.of(CTokenType.SEMICOLON)

    def test_double_semicolon_rejected(self):
        with pytest.raises(ExpectedTokenError):
            parse_source("int main(){return 0;;}")

    def test_unterminated_block_after_semicolon(self):
        with pytest.raises(ExpectedTokenError) as exc_info:
            parse_source("int main(){return 0;")
        assert exc_info.value.actual.type == CTokenType.EOF

    def test_unterminated_block_after_statement(self):
        with pytest.raises(ExpectedTokenError) as exc_info:
            parse_source("int main(){return 0")
        assert exc_info.value.expected == CToken.of(CTokenType.RBRACE)
        assert exc_info.value.actual.type == CTokenType.EOF


# =============================================================================
# Declaration Sequence Tests
# =============================================================================

class TestDeclarationSequence:
    """Several top-level declarations."""

    def test_adjacent_declarations(self):
        program = parse_source("int f(){return 1;} int g(){return 2;}")
        assert [d.name for d in program.declarations] == ["f", "g"]
        assert program.declarations[1].body.statements == returns(2)

    def test_semicolons_between_declarations(self):
        program = parse_source("int f(){}; int g(){};; int h(){}")
        assert [d.name for d in program.declarations] == ["f", "g", "h"]

    def test_trailing_semicolon(self):
        program = parse_source("int f(){};")
        assert len(program.declarations) == 1

    def test_many_declarations(self):
        """Declaration lists are built iteratively, not recursively."""
        source = "int f(){return 1;}\n" * 3000
        program = parse_source(source)
        assert len(program.declarations) == 3000

    def test_legacy_mode_discards_one_token(self):
        program = parse_source("int f(){}; int g(){}", legacy_separators=True)
        assert [d.name for d in program.declarations] == ["f", "g"]

    def test_legacy_mode_discards_any_token(self):
        program = parse_source("int f(){} } int g(){}", legacy_separators=True)
        assert [d.name for d in program.declarations] == ["f", "g"]

    def test_legacy_mode_eats_next_type(self):
        """Without a separator the legacy rule swallows the next 'int'."""
        with pytest.raises(TypeExpectedError) as exc_info:
            parse_source("int f(){} int g(){}", legacy_separators=True)
        assert exc_info.value.token == CToken(CTokenType.IDENTIFIER, "g")

    def test_legacy_mode_trailing_semicolon(self):
        with pytest.raises(TypeExpectedError) as exc_info:
            parse_source("int f(){};", legacy_separators=True)
        assert exc_info.value.token.type == CTokenType.EOF

    def test_default_mode_rejects_stray_token(self):
        with pytest.raises(TypeExpectedError):
            parse_source("int f(){} } int g(){}")


# =============================================================================
# Parse Error Tests
# =============================================================================

class TestParseErrors:
    """Each grammar rule raises its own error."""

    def test_misspelled_return(self):
        with pytest.raises(ExpectedTokenError) as exc_info:
            parse_program(tokenize("int main(){retrun 0;}"))

        error = exc_info.value
        assert error.expected == CToken.keyword("return")
        assert error.actual == CToken(CTokenType.IDENTIFIER, "retrun")
        assert error.rule == "statement"
        assert error.index == 5
        assert error.location.column == 12
        assert "expected 'return', found identifier 'retrun'" in str(error)

    def test_error_message_shows_source_line(self):
        with pytest.raises(ExpectedTokenError) as exc_info:
            parse_source("int main(){retrun 0;}", "m.c")

        lines = str(exc_info.value).splitlines()
        assert lines[0] == "m.c:1:12: error: expected 'return', found identifier 'retrun'"
        assert lines[1] == "    int main(){retrun 0;}"
        assert lines[2] == " " * 15 + "^"
        assert lines[3] == "hint: statements must start with 'return'"

    @pytest.mark.parametrize("breaker", ["\f", "\v", "\x1c", "\u2028"])
    def test_source_line_matches_token_line(self, breaker):
        """Only newline ends a line, other line-like whitespace does not."""
        with pytest.raises(ExpectedTokenError) as exc_info:
            parse_source(f"int main(){{{breaker}\nretrun 0;}}")

        error = exc_info.value
        assert error.location.line == 2
        assert error.location.column == 1
        assert error.source_line == "retrun 0;}"

    def test_name_expected(self):
        with pytest.raises(NameExpectedError) as exc_info:
            parse_source("int 5(){}")
        assert exc_info.value.token == CToken(CTokenType.NUMBER, 5)
        assert exc_info.value.rule == "name"
        assert exc_info.value.index == 1

    def test_keyword_is_not_a_name(self):
        with pytest.raises(NameExpectedError):
            parse_source("int return(){}")

    def test_number_expected(self):
        with pytest.raises(NumberExpectedError) as exc_info:
            parse_source("int main(){return x;}")
        assert exc_info.value.token == CToken(CTokenType.IDENTIFIER, "x")
        assert exc_info.value.rule == "expr"

    def test_type_expected_for_identifier(self):
        with pytest.raises(TypeExpectedError) as exc_info:
            parse_source("main(){}")
        assert exc_info.value.rule == "type"
        assert exc_info.value.index == 0

    def test_only_int_is_a_type(self):
        with pytest.raises(TypeExpectedError) as exc_info:
            parse_source("long main(){}")
        assert exc_info.value.token == CToken.keyword("long")

    def test_empty_program_rejected(self):
        """At least one declaration is required."""
        with pytest.raises(TypeExpectedError) as exc_info:
            parse_source("")
        assert exc_info.value.token.type == CTokenType.EOF
        assert "end of input" in str(exc_info.value)

    def test_parameters_not_supported(self):
        with pytest.raises(ExpectedTokenError) as exc_info:
            parse_source("int main(int){}")
        assert exc_info.value.expected == CToken.of(CTokenType.RPAREN)
        assert exc_info.value.actual == CToken.keyword("int")

    def test_missing_parenthesis(self):
        with pytest.raises(ExpectedTokenError) as exc_info:
            parse_source("int main{}")
        assert exc_info.value.expected == CToken.of(CTokenType.LPAREN)

    def test_all_errors_are_parse_errors(self):
        for source in ["", "int 5(){}", "int f(){return x}", "int f(){retrun 0}"]:
            with pytest.raises(ParseError):
                parse_source(source)

    def test_token_list_must_end_with_eof(self):
        with pytest.raises(ValueError):
            CParser([])
        with pytest.raises(ValueError):
            CParser([CToken.keyword("int")])
