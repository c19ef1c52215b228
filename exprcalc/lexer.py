# lexer.py

"""
Tokenizer for calculator programs.

The lexer hands out one token per call to next_token(), scanning the input
lazily from a cursor. Horizontal whitespace is skipped, while a newline is
significant and comes back as an EOL token because it ends a statement.
Once the cursor runs past the end of the text every further call returns EOF.
"""

import logging
import string
from dataclasses import dataclass
from typing import Iterator, List, Optional

from .errors import LexError

logger = logging.getLogger(__name__)


# ---------------------------
# Tokens
# ---------------------------

class TokenType:
    """Enumeration of token types."""
    ID = 'ID'
    NUMBER = 'NUMBER'
    ASSIGN = 'ASSIGN'
    LPAREN = 'LPAREN'
    RPAREN = 'RPAREN'
    COMMA = 'COMMA'
    SEMICOLON = 'SEMICOLON'
    PLUS = 'PLUS'
    MINUS = 'MINUS'
    MULT = 'MULT'
    DIVI = 'DIVI'
    POW = 'POW'
    FACTORIAL = 'FACTORIAL'
    EOL = 'EOL'
    EOF = 'EOF'


@dataclass(frozen=True)
class Token:
    """A token with its type, the text it was read from, and its start position."""
    type: str
    value: Optional[str] = None
    pos: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.value!r}, pos={self.pos})"


# Single-character tokens and the type each one produces.
_SINGLE_CHAR_TOKENS = {
    '+': TokenType.PLUS,
    '-': TokenType.MINUS,
    '*': TokenType.MULT,
    '/': TokenType.DIVI,
    '^': TokenType.POW,
    '!': TokenType.FACTORIAL,
    '=': TokenType.ASSIGN,
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    ',': TokenType.COMMA,
}

_WHITESPACE = '\t\v\f '
_NUMBER_CHARS = string.digits + '.'
_LETTERS = string.ascii_letters
_ALNUM = string.ascii_letters + string.digits

# Identifiers that name built-in constants, matched case-insensitively.
CONSTANT_NAMES = ('e', 'pi')


# ---------------------------
# Lexer
# ---------------------------

class Lexer:
    """Produces tokens on demand from an input string.

    Recognized tokens: ID, NUMBER, the operators ``+ - * / ^ !``, ``=``,
    parentheses, comma, semicolon, EOL (newline) and EOF.
    """

    def __init__(self, text: str, pos: int = 0):
        self.text = text
        self.pos = pos
        self.len = len(text)

    def _peek(self) -> str:
        return self.text[self.pos] if self.pos < self.len else ''

    def _advance(self, n: int = 1) -> None:
        self.pos += n

    def _read_while(self, chars: str) -> str:
        start = self.pos
        while self._peek() and self._peek() in chars:
            self._advance()
        return self.text[start:self.pos]

    def _read_ident(self) -> Token:
        start = self.pos
        self._advance()
        self._read_while(_ALNUM)
        raw = self.text[start:self.pos]
        lowered = raw.lower()
        if lowered in CONSTANT_NAMES:
            return Token(TokenType.ID, lowered, start)
        return Token(TokenType.ID, raw, start)

    def next_token(self) -> Token:
        """Return the next token and move the cursor past it."""
        self._read_while(_WHITESPACE)
        ch = self._peek()
        start = self.pos

        if ch == '':
            return Token(TokenType.EOF, None, start)
        if ch == '\n':
            self._advance()
            return Token(TokenType.EOL, ch, start)
        if ch == ';':
            self._advance()
            return Token(TokenType.SEMICOLON, ch, start)
        if ch in _NUMBER_CHARS:
            # No check of the digit grouping here; '1.2.3' is one NUMBER token.
            return Token(TokenType.NUMBER, self._read_while(_NUMBER_CHARS), start)
        if ch in _SINGLE_CHAR_TOKENS:
            self._advance()
            return Token(_SINGLE_CHAR_TOKENS[ch], ch, start)
        if ch in _LETTERS:
            return self._read_ident()
        raise LexError(ch, start)

    def tokens(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF."""
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                return

    def tokenize(self) -> List[Token]:
        tokens = list(self.tokens())
        logger.debug(f"Tokenized {self.len} characters into {len(tokens)} tokens")
        return tokens
