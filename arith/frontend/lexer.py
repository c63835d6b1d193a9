from __future__ import annotations
from typing import Iterator, List
from arith.frontend.utils import Token, TokenId, symbols
from arith.frontend.errors import LexError

# Literals must fit a signed 32-bit integer
INT_MAX = 2**31 - 1

def is_digit(char: str) -> bool:
    return '0' <= char <= '9'

class Lexer:
    """
    Turns a source string into tokens, one per call to `next_token`. Once
    the end of input is reached, every further call returns an EOF token.
    """

    def __init__(self, src: str) -> None:
        self.src = src
        self.pos = 0

    def current_char(self) -> str|None:
        return self.src[self.pos] if self.pos < len(self.src) else None

    def skip_whitespace(self):
        while (char := self.current_char()) is not None and char.isspace():
            self.pos += 1

    def integer(self) -> Token:
        start = self.pos
        while (char := self.current_char()) is not None and is_digit(char):
            self.pos += 1
        digits = self.src[start:self.pos]
        value = int(digits)
        if value > INT_MAX:
            raise LexError(f"integer literal out of range: {digits}", start)
        return Token(TokenId.INTEGER, value, start)

    def next_token(self) -> Token:
        self.skip_whitespace()
        char = self.current_char()

        if char is None:
            return Token(TokenId.EOF, position=self.pos)
        if is_digit(char):
            return self.integer()
        if char in symbols:
            self.pos += 1
            return Token(symbols[char], position=self.pos - 1)

        raise LexError(f"invalid character: {char!r} at position {self.pos}", self.pos, char)

    def __iter__(self) -> Iterator[Token]:
        while (tok := self.next_token()).token_id is not TokenId.EOF:
            yield tok
        yield tok

def tokenize(src: str) -> List[Token]:
    return list(Lexer(src))
