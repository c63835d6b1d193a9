from __future__ import annotations
from dataclasses import dataclass
from typing import Union
from arith.frontend.utils import TokenId

@dataclass(frozen=True)
class Literal:
    value: int

    def __str__(self) -> str:
        return str(self.value)

@dataclass(frozen=True)
class Unary:
    op: TokenId
    operand: AstNode

    def __str__(self) -> str:
        return f'({self.op.name})({self.operand})'

@dataclass(frozen=True)
class Binary:
    op: TokenId
    left: AstNode
    right: AstNode

    def __str__(self) -> str:
        return f'({self.left} {self.op.name} {self.right})'

@dataclass(frozen=True)
class ErrorNode:
    """
    Stand-in returned by `try_parse` next to the error that stopped parsing.
    Evaluating it re-raises that error.
    """
    error: Exception

    def __str__(self) -> str:
        return f'Node: {self.error}'

AstNode = Union[Literal, Unary, Binary, ErrorNode]

def children(node: AstNode) -> list:
    if isinstance(node, Unary):
        return [node.operand]
    elif isinstance(node, Binary):
        return [node.left, node.right]
    return []

def dump(node: AstNode) -> str:
    ret = ""
    pending = [(node, 0)]
    while pending:
        node, level = pending.pop()
        if isinstance(node, Literal):
            label = f'Literal({node.value})'
        elif isinstance(node, ErrorNode):
            label = f'Error({node.error})'
        else:
            label = f'{type(node).__name__}({node.op.name})'

        ret += "\t" * level + label + "\n"
        pending.extend((child, level + 1) for child in reversed(children(node)))
    return ret
