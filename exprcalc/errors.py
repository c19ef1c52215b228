# errors.py

"""
Error classes shared by the lexer, parser and visitors.

Every failure raised by the interpreter core derives from CalculatorError, so a
caller can surface any of them with a single except clause.
"""

from typing import Optional


class CalculatorError(Exception):
    """Base class for calculator errors."""
    pass


class LexError(CalculatorError):
    """Raised when the lexer meets a character that starts no token."""

    def __init__(self, char: str, pos: int):
        self.char = char
        self.pos = pos
        super().__init__(f"Unexpected character '{char}' at position {pos}")


class ParseError(CalculatorError):
    """Raised when the current token does not match what the grammar expects."""

    def __init__(self, expected: str, actual: str, pos: Optional[int] = None):
        self.expected = expected
        self.actual = actual
        self.pos = pos
        msg = f"Invalid syntax: expected {expected} but got {actual}"
        if pos is not None:
            msg += f" at position {pos}"
        super().__init__(msg)


class EvalError(CalculatorError):
    """Raised when a visitor meets a node or operator it cannot handle."""
    pass


class UndefinedSymbolError(EvalError):
    """Raised when a referenced identifier has no binding in the symbol table."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Undefined symbol '{name}'")
