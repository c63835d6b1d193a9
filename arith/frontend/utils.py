from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass

class TokenId(Enum):
    INTEGER = auto()
    PLUS = auto()
    MINUS = auto()
    MUL = auto()
    DIV = auto()
    LPAREN = auto()
    RPAREN = auto()
    EOF = auto()

add_ops = [TokenId.PLUS, TokenId.MINUS]
mul_ops = [TokenId.MUL, TokenId.DIV]
unary_ops = add_ops

symbols = {
    '+': TokenId.PLUS,
    '-': TokenId.MINUS,
    '*': TokenId.MUL,
    '/': TokenId.DIV,
    '(': TokenId.LPAREN,
    ')': TokenId.RPAREN,
}

@dataclass(frozen=True)
class Token:
    token_id: TokenId
    value: int|None = None # Only set on INTEGER tokens
    position: int = 0

    def __repr__(self) -> str:
        return f'Token({self.token_id.name}, {self.value})'

    def __str__(self) -> str:
        if self.token_id is TokenId.INTEGER:
            return str(self.value)
        return self.token_id.name
