# test_printer.py

import pytest

from exprcalc.errors import EvalError
from exprcalc.lexer import Token, TokenType
from exprcalc.nodes import BinaryExpr, RefExpr, ValueExpr
from exprcalc.parser import Parser
from exprcalc.printer import HTML_STYLE, TEXT_STYLE, PrinterVisitor


def print_program(text, style=HTML_STYLE):
    visitor = PrinterVisitor(style)
    Parser(text).parse().accept(visitor)
    return visitor.get_output()


def print_value(expr, style=HTML_STYLE):
    """Printed right-hand side of `out = <expr>`."""
    printed = print_program(f"out = {expr}", style)
    prefix, suffix = "out = ", style.statement_end
    assert printed.startswith(prefix) and printed.endswith(suffix)
    return printed[len(prefix):-len(suffix)]


# ---------------------------
# Leaves
# ---------------------------

def test_printer_literal_keeps_source_text():
    assert print_value("3.50") == "3.50"


def test_printer_constants():
    assert print_value("pi") == "&pi;"
    assert print_value("PI") == "&pi;"
    assert print_value("e") == "<i>e</i>"


def test_printer_unknown_identifier_is_echoed():
    assert print_value("zeta") == "zeta"


# ---------------------------
# Parenthesization
# ---------------------------

@pytest.mark.parametrize("expr,expected", [
    ("(1+2)*3", "(1 &plus; 2) &times; 3"),
    ("3*(1+2)", "3 &times; (1 &plus; 2)"),
    ("2^3^4", "2<sup>3<sup>4</sup></sup>"),
    ("1/2", "<sup>1</sup>&frasl;<sub>2</sub>"),
    ("(1+2)/3", "<sup>(1 &plus; 2)</sup>&frasl;<sub>3</sub>"),
    ("1 - 2 - 3", "1 &minus; 2 &minus; 3"),
    ("1 - (2 + 3)", "1 &minus; (2 &plus; 3)"),
    ("(1 + 2) - 3", "(1 &plus; 2) &minus; 3"),
    ("2 * 3 * 4", "2 &times; 3 &times; 4"),
    ("2 * 3 / 4", "2 &times; <sup>3</sup>&frasl;<sub>4</sub>"),
    ("(2 / 3) * 4", "<sup>2</sup>&frasl;<sub>3</sub> &times; 4"),
    ("2 * 3^2", "2 &times; 3<sup>2</sup>"),
    ("2^(1+2)", "2<sup>1 &plus; 2</sup>"),
    ("(1+2)^2", "(1 &plus; 2)<sup>2</sup>"),
    ("2 * 3 + 1", "(2 &times; 3) &plus; 1"),
    ("2 * -3", "2 &times; (&minus;3)"),
    ("2 * 3!", "2 &times; !3"),
    ("2 * pi", "2 &times; &pi;"),
    ("(2^3) * 4", "2<sup>3</sup> &times; 4"),
])
def test_printer_binary_parenthesization(expr, expected):
    assert print_value(expr) == expected


@pytest.mark.parametrize("expr,expected", [
    ("-3", "&minus;3"),
    ("+3", "3"),
    ("-pi", "&minus;&pi;"),
    ("-x", "&minus;x"),
    ("-3!", "&minus;!3"),
    ("--3", "&minus;(&minus;3)"),
    ("-(1+2)", "&minus;(1 &plus; 2)"),
    ("+(1+2)", "(1 &plus; 2)"),
])
def test_printer_unary(expr, expected):
    assert print_value(expr) == expected


@pytest.mark.parametrize("expr,expected", [
    ("3!", "!3"),
    ("!3", "!3"),
    ("!!3", "!!3"),
    ("n!", "!n"),
    ("(1+2)!", "!(1 &plus; 2)"),
    ("(-2)!", "!(&minus;2)"),
])
def test_printer_factorial(expr, expected):
    assert print_value(expr) == expected


# ---------------------------
# Programs
# ---------------------------

def test_printer_statement_list():
    assert print_program("x = 1; out = x * pi") == "x = 1<br>out = x &times; &pi;<br>"


def test_printer_empty_program():
    assert print_program("") == ""


def test_printer_does_not_need_bound_symbols():
    assert print_program("out = z + 1") == "out = z &plus; 1<br>"


def test_printer_text_style():
    assert print_program("x = 1; out = -x", TEXT_STYLE) == "x = 1\nout = −x\n"
    assert print_value("2^(1+2)/pi", TEXT_STYLE) == "2^((1 + 2)/π)"
    assert print_value("(1 - 2) * e", TEXT_STYLE) == "(1 − 2) × e"


def test_printer_render_bare_node():
    node = BinaryExpr(ValueExpr('1'), TokenType.POW, RefExpr(Token(TokenType.ID, 'e')))
    visitor = PrinterVisitor()
    assert visitor.render(node) == "1<sup><i>e</i></sup>"
    assert visitor.get_output() == "1<sup><i>e</i></sup>"


def test_printer_invalid_binary_operator():
    node = BinaryExpr(ValueExpr('1'), "INVALID", ValueExpr('2'))
    with pytest.raises(EvalError):
        PrinterVisitor().render(node)
