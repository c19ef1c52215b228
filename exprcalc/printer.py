# printer.py

"""
Visitor that renders a parsed program back to display markup.

Parenthesization is decided per node by looking at the type of the immediate
child and, for binary children, at the child's operator compared with the
parent's. There is no global precedence table; the rules below are the whole
policy:

- a unary or factorial operand is bare if it is a literal, a reference or a
  factorial, and parenthesized otherwise;
- a binary left operand is bare if it is a literal, a reference, a factorial,
  or a binary node whose operator is division, exponentiation or the parent's
  own operator;
- a binary right operand is bare under the same conditions, and also whenever
  the parent itself is an exponentiation.

Constants are printed symbolically and unknown identifiers are echoed as they
were written.
"""

from dataclasses import dataclass, field
from typing import Dict

from .errors import EvalError
from .lexer import TokenType
from .nodes import (
    AST, ASTVisitor, AssignExpr, BinaryExpr, FactorialExpr, RefExpr,
    StatementListExpr, UnaryExpr, ValueExpr,
)


@dataclass(frozen=True)
class PrintStyle:
    """Markup used by PrinterVisitor; binary templates take {left} and {right}."""
    binary: Dict[str, str]
    negate: str
    factorial: str
    constants: Dict[str, str] = field(default_factory=dict)
    statement_end: str = '\n'


HTML_STYLE = PrintStyle(
    binary={
        TokenType.PLUS: '{left} &plus; {right}',
        TokenType.MINUS: '{left} &minus; {right}',
        TokenType.MULT: '{left} &times; {right}',
        TokenType.DIVI: '<sup>{left}</sup>&frasl;<sub>{right}</sub>',
        TokenType.POW: '{left}<sup>{right}</sup>',
    },
    negate='&minus;',
    factorial='!',
    constants={'pi': '&pi;', 'e': '<i>e</i>'},
    statement_end='<br>',
)

TEXT_STYLE = PrintStyle(
    binary={
        TokenType.PLUS: '{left} + {right}',
        TokenType.MINUS: '{left} − {right}',
        TokenType.MULT: '{left} × {right}',
        TokenType.DIVI: '{left}/{right}',
        TokenType.POW: '{left}^({right})',
    },
    negate='−',
    factorial='!',
    constants={'pi': 'π', 'e': 'e'},
    statement_end='\n',
)

_LAYOUT_OPERATORS = (TokenType.DIVI, TokenType.POW)


def _is_atomic(node: AST) -> bool:
    return isinstance(node, (ValueExpr, RefExpr, FactorialExpr))


def _left_is_bare(parent: BinaryExpr) -> bool:
    child = parent.left
    if _is_atomic(child):
        return True
    return isinstance(child, BinaryExpr) and (child.op in _LAYOUT_OPERATORS or child.op == parent.op)


def _right_is_bare(parent: BinaryExpr) -> bool:
    child = parent.right
    if _is_atomic(child) or parent.op == TokenType.POW:
        return True
    return isinstance(child, BinaryExpr) and (child.op in _LAYOUT_OPERATORS or child.op == parent.op)


def _wrap(text: str, bare: bool) -> str:
    return text if bare else f"({text})"


class PrinterVisitor(ASTVisitor):
    """Renders AST nodes as a string using the given PrintStyle."""

    def __init__(self, style: PrintStyle = HTML_STYLE):
        self.style = style
        self.output = ''

    def get_output(self) -> str:
        return self.output

    def render(self, node: AST) -> str:
        self.output = node.accept(self)
        return self.output

    def visit_value_expr(self, node: ValueExpr) -> str:
        return node.num

    def visit_ref_expr(self, node: RefExpr) -> str:
        return self.style.constants.get(node.name, node.name)

    def visit_unary_expr(self, node: UnaryExpr) -> str:
        sign = self.style.negate if node.op == TokenType.MINUS else ''
        return sign + _wrap(node.operand.accept(self), _is_atomic(node.operand))

    def visit_factorial_expr(self, node: FactorialExpr) -> str:
        return self.style.factorial + _wrap(node.operand.accept(self), _is_atomic(node.operand))

    def visit_binary_expr(self, node: BinaryExpr) -> str:
        template = self.style.binary.get(node.op)
        if template is None:
            raise EvalError(f"Unknown binary operator: {node.op}")
        left = _wrap(node.left.accept(self), _left_is_bare(node))
        right = _wrap(node.right.accept(self), _right_is_bare(node))
        return template.format(left=left, right=right)

    def visit_assign_expr(self, node: AssignExpr) -> str:
        return f"{node.id.value} = {node.value.accept(self)}"

    def visit_statement_list_expr(self, node: StatementListExpr) -> str:
        self.output = ''.join(
            statement.accept(self) + self.style.statement_end
            for statement in node.statements
        )
        return self.output
