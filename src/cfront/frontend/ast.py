"""
Abstract Syntax Tree (AST) Definitions
======================================

This module defines the AST node types produced by the parser.

Node Hierarchy
--------------
ASTNode (base)
├── ProgramNode - root node, ordered top-level declarations
├── Declarations
│   ├── FunctionNode - function definition
│   └── ParameterNode - (type, name) parameter pair
├── Statements
│   ├── BlockStatement - ordered statements in braces
│   └── ReturnStatement - return <expr>
└── Expressions
    └── NumberLiteral - non-negative 64-bit integer constant

Design Notes
------------
- All nodes are dataclasses. The abstract bases (Expression, Statement,
  Declaration) are the open sum types; each subclass is one variant.
  New variants (arithmetic expressions, variable declarations, structs)
  are added as new subclasses plus one ``visit_*`` method, so existing
  call sites keep working.
- Each node stores its source location for error reporting. Locations
  are excluded from equality and repr, so trees built by hand in tests
  compare equal to parsed trees.
- Nodes are created fresh for every parse and owned by the caller.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from cfront.errors import SourceLocation
from cfront.frontend.types import CType, TYPE_INT


# =============================================================================
# AST Node Base Classes
# =============================================================================

@dataclass
class ASTNode:
    """
    Base class for all AST nodes.

    Attributes:
        location: Source location where this node starts (not compared)
    """
    location: Optional[SourceLocation] = field(
        default=None, compare=False, repr=False, kw_only=True
    )


@dataclass
class Expression(ASTNode):
    """Base class for expression nodes (nodes that evaluate to a value)."""
    pass


@dataclass
class Statement(ASTNode):
    """Base class for statement nodes."""
    pass


@dataclass
class Declaration(ASTNode):
    """Base class for top-level declarations."""
    pass


# =============================================================================
# Expression Nodes
# =============================================================================

@dataclass
class NumberLiteral(Expression):
    """
    Integer constant.

    Attributes:
        value: The literal value, 0 <= value < 2**64
    """
    value: int = 0


# =============================================================================
# Statement Nodes
# =============================================================================

@dataclass
class ReturnStatement(Statement):
    """
    Return statement.

    Attributes:
        value: The returned expression
    """
    value: Expression = None


@dataclass
class BlockStatement(Statement):
    """
    Block enclosed in braces.

    Attributes:
        statements: Statements in execution order (may be empty)
    """
    statements: list[Statement] = field(default_factory=list)


# =============================================================================
# Declaration Nodes
# =============================================================================

@dataclass
class ParameterNode(Declaration):
    """
    Function parameter declaration.

    Attributes:
        param_type: The C type of the parameter
        name: Parameter name
    """
    param_type: CType = TYPE_INT
    name: str = ""


@dataclass
class FunctionNode(Declaration):
    """
    Function definition.

    Attributes:
        return_type: The return type
        name: Function name
        parameters: Ordered parameter list (always empty for now)
        body: The function body
    """
    return_type: CType = TYPE_INT
    name: str = ""
    parameters: list[ParameterNode] = field(default_factory=list)
    body: BlockStatement = field(default_factory=BlockStatement)


# =============================================================================
# Program Root Node
# =============================================================================

@dataclass
class ProgramNode(ASTNode):
    """
    Root node of the AST.

    Attributes:
        declarations: Top-level declarations in source order
    """
    declarations: list[Declaration] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.declarations)

    def __iter__(self):
        return iter(self.declarations)

    def __getitem__(self, index):
        return self.declarations[index]


# =============================================================================
# AST Visitor Pattern
# =============================================================================

class ASTVisitor:
    """
    Base class for AST visitors.

    Subclasses override visit_* methods for the node types they care
    about; everything else falls through to generic_visit, which walks
    the children.

    Usage:
        class ReturnCounter(ASTVisitor):
            def __init__(self):
                self.count = 0

            def visit_ReturnStatement(self, node):
                self.count += 1

        counter = ReturnCounter()
        counter.visit(program)
    """

    def visit(self, node: ASTNode) -> Any:
        """
        Visit a node by dispatching to the method named after its class.

        Args:
            node: The AST node to visit

        Returns:
            Whatever the visit method returns
        """
        method_name = f"visit_{node.__class__.__name__}"
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node)

    def generic_visit(self, node: ASTNode) -> None:
        """Visit all child nodes, in field order."""
        for field_value in node.__dict__.values():
            if isinstance(field_value, ASTNode):
                self.visit(field_value)
            elif isinstance(field_value, list):
                for item in field_value:
                    if isinstance(item, ASTNode):
                        self.visit(item)

    def visit_ProgramNode(self, node: ProgramNode): return self.generic_visit(node)
    def visit_FunctionNode(self, node: FunctionNode): return self.generic_visit(node)
    def visit_ParameterNode(self, node: ParameterNode): return self.generic_visit(node)
    def visit_BlockStatement(self, node: BlockStatement): return self.generic_visit(node)
    def visit_ReturnStatement(self, node: ReturnStatement): return self.generic_visit(node)
    def visit_NumberLiteral(self, node: NumberLiteral): return self.generic_visit(node)


# =============================================================================
# AST Pretty Printer
# =============================================================================

class ASTPrinter(ASTVisitor):
    """
    Pretty printer for AST dumps.

    Usage:
        printer = ASTPrinter()
        print(printer.print(program))

    Output:
        Program
          Function: int main()
            Block
              Return 0
    """

    def __init__(self):
        self.output: list[str] = []
        self.indent_level = 0

    def print(self, node: ASTNode) -> str:
        """Print the AST and return it as a string."""
        self.output = []
        self.indent_level = 0
        self.visit(node)
        return "\n".join(self.output)

    def _emit(self, text: str) -> None:
        indent = "  " * self.indent_level
        self.output.append(f"{indent}{text}")

    def _indent(self) -> None:
        self.indent_level += 1

    def _dedent(self) -> None:
        self.indent_level = max(0, self.indent_level - 1)

    def visit_ProgramNode(self, node: ProgramNode):
        self._emit("Program")
        self._indent()
        for decl in node.declarations:
            self.visit(decl)
        self._dedent()

    def visit_FunctionNode(self, node: FunctionNode):
        params = ", ".join(f"{p.param_type} {p.name}" for p in node.parameters)
        self._emit(f"Function: {node.return_type} {node.name}({params})")
        self._indent()
        self.visit(node.body)
        self._dedent()

    def visit_BlockStatement(self, node: BlockStatement):
        self._emit("Block")
        self._indent()
        for stmt in node.statements:
            self.visit(stmt)
        self._dedent()

    def visit_ReturnStatement(self, node: ReturnStatement):
        self._emit(f"Return {self._expr_str(node.value)}")

    def _expr_str(self, expr: Expression) -> str:
        """Convert an expression to its source-like text."""
        if isinstance(expr, NumberLiteral):
            return str(expr.value)
        return f"<{type(expr).__name__}>"
