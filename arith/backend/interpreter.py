from __future__ import annotations
from arith.frontend.utils import TokenId
from arith.frontend.errors import DomainError, StructuralError
from arith.frontend.nodes import AstNode, Literal, Unary, Binary, ErrorNode
from arith.frontend.parser import parse

def divide(x: int, y: int) -> int:
    if y == 0:
        raise DomainError("division by zero")
    quotient = abs(x) // abs(y) # Truncates toward zero, unlike x // y
    return quotient if (x < 0) == (y < 0) else -quotient

op_map = {
    TokenId.PLUS: lambda x, y: x + y,
    TokenId.MINUS: lambda x, y: x - y,
    TokenId.MUL: lambda x, y: x * y,
    TokenId.DIV: divide
}

unary_op_map = {
    TokenId.PLUS: lambda x: x,
    TokenId.MINUS: lambda x: -x
}

def check_int(value, where: str) -> int:
    # bool is an int subclass, but never a valid result here
    if not isinstance(value, int) or isinstance(value, bool):
        raise StructuralError(f"{where} evaluated to a non-integer value: {value!r}")
    return value

def evaluate_node(tree: AstNode) -> int:
    if isinstance(tree, Literal):
        return check_int(tree.value, "literal")
    elif isinstance(tree, Unary):
        if tree.op not in unary_op_map:
            raise StructuralError(f"unknown unary operator {tree.op}")
        value = check_int(evaluate_node(tree.operand), "operand")
        return unary_op_map[tree.op](value)
    elif isinstance(tree, Binary):
        if tree.op not in op_map:
            raise StructuralError(f"unknown binary operator {tree.op}")
        lhs = check_int(evaluate_node(tree.left), "left operand")
        rhs = check_int(evaluate_node(tree.right), "right operand")
        return op_map[tree.op](lhs, rhs)
    elif isinstance(tree, ErrorNode):
        raise tree.error

    raise StructuralError(f"cannot evaluate {type(tree).__name__}")

def evaluate(tree: AstNode) -> int:
    if tree is None:
        raise StructuralError("parsed an empty expression")
    try:
        return evaluate_node(tree)
    except RecursionError:
        raise StructuralError("expression nested too deeply") from None

def interpret(src: str) -> int:
    return evaluate(parse(src))
