# interpreter.py

"""
Entry points tying the parser to the visitors.

Each call builds its own Parser and visitor, so no state survives between
calls: every program starts from a symbol table holding only ``pi`` and ``e``.
Lexical, syntax and symbol errors propagate to the caller unchanged.
"""

import logging
import math
from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from .errors import EvalError
from .evaluator import CalculatorVisitor
from .nodes import ASTVisitor
from .parser import Parser
from .printer import HTML_STYLE, PrinterVisitor, PrintStyle

logger = logging.getLogger(__name__)


class Interpretation(BaseModel):
    """Both readings of one program: its printed form and its result."""
    printed: str
    out: Optional[float] = None
    symbols: Dict[str, float] = Field(default_factory=dict)

    def out_text(self) -> str:
        return 'undefined' if self.out is None else format_number(self.out)

    def display(self) -> str:
        """The printed program followed by ``<br>out = <value>``."""
        return f"{self.printed} <br>out = {self.out_text()}"


def format_number(value: float) -> str:
    """Format a result the way a script runtime would: integral values lose '.0'."""
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if 'e' in text and abs(value) >= 1e-6:
        return format(Decimal(text), 'f')
    return text.replace('e-0', 'e-')


def interpret(text: str, visitor: ASTVisitor) -> Any:
    """Parse `text`, run `visitor` over the tree and return its output."""
    try:
        root = Parser(text).parse()
        root.accept(visitor)
    except RecursionError:
        raise EvalError("expression nested too deeply") from None
    return visitor.get_output()


def evaluate(text: str) -> Optional[float]:
    """Return the value a program binds to ``out``, or None if it never does."""
    return interpret(text, CalculatorVisitor())


def render(text: str, style: PrintStyle = HTML_STYLE) -> str:
    return interpret(text, PrinterVisitor(style))


def run(text: str, style: PrintStyle = HTML_STYLE) -> Interpretation:
    """Evaluate and print a program, parsing it once for each visitor."""
    calculator = CalculatorVisitor()
    out = interpret(text, calculator)
    printed = render(text, style)
    logger.debug(f"Program produced out={out!r} with {len(calculator.symbols)} symbols")
    return Interpretation(printed=printed, out=out, symbols=dict(calculator.symbols))
