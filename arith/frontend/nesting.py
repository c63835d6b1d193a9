from __future__ import annotations
from typing import List
from arith.frontend.utils import Token

class NestingStack:
    """Open parentheses the parser has consumed but not yet matched."""

    def __init__(self) -> None:
        self.stack: List[Token] = []

    def __len__(self) -> int:
        return len(self.stack)

    def is_empty(self) -> bool:
        return not self.stack

    def push(self, tok: Token):
        self.stack.append(tok)

    def pop(self) -> Token:
        if self.is_empty():
            raise IndexError("cannot pop from empty nesting stack")
        return self.stack.pop()

    def peek(self) -> Token:
        if self.is_empty():
            raise IndexError("nesting stack is empty")
        return self.stack[-1]
