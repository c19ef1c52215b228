# evaluator.py

"""
Visitor that evaluates a parsed program to a number.

The visitor owns a symbol table seeded with the constants ``pi`` and ``e``.
Assignments write into it and references read from it; a reference to a name
that was never bound raises UndefinedSymbolError. The result of a program is
whatever ends up bound to ``out``.

Arithmetic follows IEEE-754 float semantics: division by zero and illegal
powers give infinities or NaN instead of raising.
"""

import logging
import math
from typing import Dict, Optional

from .errors import EvalError, UndefinedSymbolError
from .lexer import TokenType
from .nodes import (
    AST, ASTVisitor, AssignExpr, BinaryExpr, FactorialExpr, RefExpr,
    StatementListExpr, UnaryExpr, ValueExpr,
)

logger = logging.getLogger(__name__)

# Name of the variable holding the result of a program.
OUTPUT_NAME = 'out'


def initial_symbols() -> Dict[str, float]:
    """Return a fresh symbol table holding only the built-in constants."""
    return {'pi': math.pi, 'e': math.e}


# ---------------------------
# Numeric helpers
# ---------------------------

def to_number(text: str) -> float:
    """Convert literal text to a float; text such as '1.2.3' yields NaN."""
    try:
        return float(text)
    except ValueError:
        return math.nan


def factorial(num: float) -> float:
    """Multiply 2, 3, ... while the counter is <= num.

    Negative operands give 1 and non-integers stop at the largest integer not
    above them, so ``factorial(3.5) == 6``.
    """
    if num == math.inf:
        return math.inf
    val = 1.0
    i = 2
    while i <= num:
        val *= i
        if math.isinf(val):
            break
        i += 1
    return val


def divide(left: float, right: float) -> float:
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and int(x) % 2 == 1


def power(base: float, exponent: float) -> float:
    """math.pow with overflow and pole errors mapped to infinities, domain errors to NaN."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0 and exponent < 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


_BINARY_OPERATIONS = {
    TokenType.PLUS: lambda left, right: left + right,
    TokenType.MINUS: lambda left, right: left - right,
    TokenType.MULT: lambda left, right: left * right,
    TokenType.DIVI: divide,
    TokenType.POW: power,
}


# ---------------------------
# Evaluator
# ---------------------------

class CalculatorVisitor(ASTVisitor):
    """Evaluates AST nodes against its own symbol table."""

    def __init__(self):
        self.symbols: Dict[str, float] = initial_symbols()

    def get_output(self) -> Optional[float]:
        """Value bound to ``out``, or None when the program never assigned it."""
        return self.symbols.get(OUTPUT_NAME)

    def evaluate(self, node: AST) -> Optional[float]:
        return node.accept(self)

    def visit_value_expr(self, node: ValueExpr) -> float:
        return to_number(node.num)

    def visit_ref_expr(self, node: RefExpr) -> float:
        if node.name not in self.symbols:
            raise UndefinedSymbolError(node.name)
        return self.symbols[node.name]

    def visit_unary_expr(self, node: UnaryExpr) -> float:
        value = node.operand.accept(self)
        if node.op == TokenType.MINUS:
            return -value
        if node.op == TokenType.PLUS:
            return value
        raise EvalError(f"Unknown unary operator: {node.op}")

    def visit_factorial_expr(self, node: FactorialExpr) -> float:
        return factorial(node.operand.accept(self))

    def visit_binary_expr(self, node: BinaryExpr) -> float:
        left = node.left.accept(self)
        right = node.right.accept(self)
        operation = _BINARY_OPERATIONS.get(node.op)
        if operation is None:
            raise EvalError(f"Unknown binary operator: {node.op}")
        return operation(left, right)

    def visit_assign_expr(self, node: AssignExpr) -> float:
        value = node.value.accept(self)
        self.symbols[node.id.value] = value
        logger.debug(f"{node.id.value} = {value!r}")
        return value

    def visit_statement_list_expr(self, node: StatementListExpr) -> Optional[float]:
        for statement in node.statements:
            statement.accept(self)
        return self.get_output()
