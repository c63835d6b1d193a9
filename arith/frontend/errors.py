"""
Errors raised by the calculator pipeline. Each stage raises the first error
it finds; only the driver catches them.
"""

from __future__ import annotations

class CalcError(Exception):
    pass

class LexError(CalcError):
    def __init__(self, message: str, position: int, char: str|None = None) -> None:
        super().__init__(message)
        self.position = position
        self.char = char

class ParseError(CalcError):
    def __init__(self, message: str, position: int|None = None) -> None:
        if position is not None:
            message = f"{message} at position {position}"
        super().__init__(message)
        self.position = position

class DomainError(CalcError):
    pass

class StructuralError(CalcError):
    pass
