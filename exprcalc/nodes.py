# nodes.py

"""
AST node set and the visitor protocol.

Each node type corresponds to one grammar production. Nodes are immutable and
own their children exclusively, so a tree is always acyclic. A node exposes a
single operation, accept(visitor), which calls the visitor method named after
the node's own type and returns whatever that method returns.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Tuple

from .lexer import Token


# ---------------------------
# Visitor protocol
# ---------------------------

class ASTVisitor(ABC):
    """Interface every tree interpretation implements, one method per node type."""

    @abstractmethod
    def visit_value_expr(self, node: 'ValueExpr') -> Any:
        ...

    @abstractmethod
    def visit_ref_expr(self, node: 'RefExpr') -> Any:
        ...

    @abstractmethod
    def visit_unary_expr(self, node: 'UnaryExpr') -> Any:
        ...

    @abstractmethod
    def visit_factorial_expr(self, node: 'FactorialExpr') -> Any:
        ...

    @abstractmethod
    def visit_binary_expr(self, node: 'BinaryExpr') -> Any:
        ...

    @abstractmethod
    def visit_assign_expr(self, node: 'AssignExpr') -> Any:
        ...

    @abstractmethod
    def visit_statement_list_expr(self, node: 'StatementListExpr') -> Any:
        ...

    @abstractmethod
    def get_output(self) -> Any:
        """Return the result accumulated by the last traversal."""


# ---------------------------
# AST Nodes
# ---------------------------

class AST(ABC):
    """Base AST node."""

    @abstractmethod
    def accept(self, visitor: ASTVisitor) -> Any:
        ...


@dataclass(frozen=True)
class ValueExpr(AST):
    """A numeric literal, kept as its source text until evaluation."""
    num: str

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_value_expr(self)


@dataclass(frozen=True)
class RefExpr(AST):
    """A reference to a named constant or variable."""
    token: Token

    @property
    def name(self) -> str:
        return self.token.value

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_ref_expr(self)


@dataclass(frozen=True)
class UnaryExpr(AST):
    """A sign applied to an operand; op is TokenType.PLUS or TokenType.MINUS."""
    op: str
    operand: AST

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_unary_expr(self)


@dataclass(frozen=True)
class FactorialExpr(AST):
    operand: AST

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_factorial_expr(self)


@dataclass(frozen=True)
class BinaryExpr(AST):
    """A binary operation; op is one of PLUS, MINUS, MULT, DIVI, POW."""
    left: AST
    op: str
    right: AST

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_binary_expr(self)


@dataclass(frozen=True)
class AssignExpr(AST):
    """Binds the value of an expression to the identifier token `id`."""
    id: Token
    value: AST

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_assign_expr(self)


@dataclass(frozen=True)
class StatementListExpr(AST):
    """Root of a parsed program: assignments in execution order."""
    statements: Tuple[AssignExpr, ...] = ()

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_statement_list_expr(self)
