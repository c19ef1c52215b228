# parser.py

"""
Recursive descent parser for calculator programs.

Grammar (one method per production):

    program    : (assignment (EOL | SEMICOLON)?)* EOF
    assignment : ID ASSIGN expr
    expr       : term ((PLUS | MINUS) expr)?
    term       : factor (NUMBER-lookahead | (MULT | DIVI | POW) term)?
    factor     : (PLUS | MINUS) factor
               | FACTORIAL factor
               | (LPAREN expr RPAREN | ID | NUMBER) FACTORIAL*

Because expr recurses into expr and term into term, every binary operator is
right-associative: ``1 - 2 - 3`` parses as ``1 - (2 - 3)``. Multiplication,
division and exponentiation share one level; addition and subtraction share
the level above it. When a factor is directly followed by another NUMBER
token the parser inserts a multiplication, so ``2 3`` means ``2 * 3``. Only a
NUMBER triggers this, not an identifier or an opening parenthesis.
"""

import logging
from typing import List

from .errors import ParseError
from .lexer import Lexer, Token, TokenType
from .nodes import (
    AST, AssignExpr, BinaryExpr, FactorialExpr, RefExpr, StatementListExpr,
    UnaryExpr, ValueExpr,
)

logger = logging.getLogger(__name__)

_SEPARATORS = (TokenType.EOL, TokenType.SEMICOLON)
_SIGNS = (TokenType.PLUS, TokenType.MINUS)
_TERM_OPERATORS = (TokenType.MULT, TokenType.DIVI, TokenType.POW)


class Parser:
    """Parses program text into a StatementListExpr with one token of lookahead."""

    def __init__(self, text: str):
        self.lexer = Lexer(text)
        self.current_token = self.lexer.next_token()

    def eat(self, token_type: str) -> Token:
        """
        Consumes and returns the current token if it matches the expected type.
        Raises ParseError otherwise.
        """
        token = self.current_token
        if token.type != token_type:
            raise ParseError(token_type, token.type, token.pos)
        self.current_token = self.lexer.next_token()
        return token

    def parse(self) -> StatementListExpr:
        """
        Parses the whole input and returns the root node.
        """
        return self.program()

    def program(self) -> StatementListExpr:
        """
        program : (assignment (EOL | SEMICOLON)?)* EOF
        """
        statements: List[AssignExpr] = []
        while self.current_token.type != TokenType.EOF:
            statements.append(self.assignment())
            if self.current_token.type in _SEPARATORS:
                self.eat(self.current_token.type)
        logger.debug(f"Parsed {len(statements)} statement(s)")
        return StatementListExpr(tuple(statements))

    def assignment(self) -> AssignExpr:
        """
        assignment : ID ASSIGN expr
        """
        target = self.eat(TokenType.ID)
        self.eat(TokenType.ASSIGN)
        return AssignExpr(target, self.expr())

    def expr(self) -> AST:
        """
        expr : term ((PLUS | MINUS) expr)?
        """
        left = self.term()
        if self.current_token.type in _SIGNS:
            op = self.eat(self.current_token.type).type
            return BinaryExpr(left, op, self.expr())
        return left

    def term(self) -> AST:
        """
        term : factor (NUMBER-lookahead | (MULT | DIVI | POW) term)?
        """
        left = self.factor()
        if self.current_token.type == TokenType.NUMBER:
            return BinaryExpr(left, TokenType.MULT, self.term())
        if self.current_token.type in _TERM_OPERATORS:
            op = self.eat(self.current_token.type).type
            return BinaryExpr(left, op, self.term())
        return left

    def factor(self) -> AST:
        """
        factor : (PLUS | MINUS) factor
               | FACTORIAL factor
               | (LPAREN expr RPAREN | ID | NUMBER) FACTORIAL*
        """
        token = self.current_token
        if token.type in _SIGNS:
            self.eat(token.type)
            return UnaryExpr(token.type, self.factor())
        if token.type == TokenType.FACTORIAL:
            self.eat(TokenType.FACTORIAL)
            return FactorialExpr(self.factor())

        if token.type == TokenType.LPAREN:
            node = self.closure()
        elif token.type == TokenType.ID:
            node = RefExpr(self.eat(TokenType.ID))
        else:
            node = ValueExpr(self.eat(TokenType.NUMBER).value)

        while self.current_token.type == TokenType.FACTORIAL:
            self.eat(TokenType.FACTORIAL)
            node = FactorialExpr(node)
        return node

    def closure(self) -> AST:
        """
        closure : LPAREN expr RPAREN
        """
        self.eat(TokenType.LPAREN)
        node = self.expr()
        self.eat(TokenType.RPAREN)
        return node
