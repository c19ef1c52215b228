"""A small arithmetic language: lexer, parser, AST and evaluating/printing visitors."""

from .errors import CalculatorError, EvalError, LexError, ParseError, UndefinedSymbolError
from .evaluator import CalculatorVisitor
from .interpreter import Interpretation, evaluate, interpret, render, run
from .lexer import Lexer, Token, TokenType
from .nodes import (
    AST, ASTVisitor, AssignExpr, BinaryExpr, FactorialExpr, RefExpr,
    StatementListExpr, UnaryExpr, ValueExpr,
)
from .parser import Parser
from .printer import HTML_STYLE, TEXT_STYLE, PrinterVisitor, PrintStyle

__all__ = [
    "CalculatorError", "EvalError", "LexError", "ParseError", "UndefinedSymbolError",
    "Lexer", "Token", "TokenType",
    "AST", "ASTVisitor", "AssignExpr", "BinaryExpr", "FactorialExpr", "RefExpr",
    "StatementListExpr", "UnaryExpr", "ValueExpr",
    "Parser", "CalculatorVisitor", "PrinterVisitor", "PrintStyle",
    "HTML_STYLE", "TEXT_STYLE",
    "Interpretation", "interpret", "evaluate", "render", "run",
]
