from __future__ import annotations
from typing import Tuple
from arith.frontend.utils import Token, TokenId, add_ops, mul_ops, unary_ops
from arith.frontend.errors import CalcError, ParseError
from arith.frontend.lexer import Lexer
from arith.frontend.nesting import NestingStack
from arith.frontend.nodes import AstNode, Literal, Unary, Binary, ErrorNode

# Grammar:
# expr   = term, { add_op, term } ;
# term   = factor, { mul_op, factor } ;
# factor = unary_op, factor | "(", expr, ")" | integer ;
# add_op = "+" | "-" ;
# mul_op = "*" | "/" ;

class Parser:
    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer
        self.stack = NestingStack()
        self.current_token: Token = lexer.next_token()

    def look(self) -> TokenId:
        return self.current_token.token_id

    def consume(self, token_id: TokenId) -> Token:
        """
        Moves past the current token, which must be of kind `token_id`, while
        keeping track of parentheses nesting and rejecting integers that
        directly follow one another.
        """
        tok = self.current_token
        if tok.token_id is not token_id:
            raise ParseError(f"syntax error: expected {token_id.name} but received {tok.token_id.name}", tok.position)

        if tok.token_id is TokenId.LPAREN:
            self.stack.push(tok)
        elif tok.token_id is TokenId.RPAREN:
            if self.stack.is_empty() or self.stack.peek().token_id is not TokenId.LPAREN:
                raise ParseError("syntax error: unexpected ')'", tok.position)
            self.stack.pop()

        self.current_token = self.lexer.next_token()

        if tok.token_id is TokenId.INTEGER and self.look() is TokenId.INTEGER:
            raise ParseError("syntax error: missing operator between integers", self.current_token.position)
        if self.look() is TokenId.RPAREN and self.stack.is_empty():
            raise ParseError("syntax error: unexpected ')'", self.current_token.position)
        return tok

    def factor(self) -> AstNode:
        tok = self.current_token

        if tok.token_id in unary_ops:
            self.consume(tok.token_id)
            return Unary(tok.token_id, self.factor())
        elif tok.token_id is TokenId.INTEGER:
            self.consume(TokenId.INTEGER)
            return Literal(tok.value)
        elif tok.token_id is TokenId.LPAREN:
            self.consume(TokenId.LPAREN)
            tree = self.expr()
            self.consume(TokenId.RPAREN)
            return tree

        raise ParseError(f"syntax error: unexpected {tok.token_id.name}", tok.position)

    def term(self) -> AstNode:
        tree = self.factor()
        while self.look() in mul_ops:
            op = self.consume(self.look())
            rhs = self.factor()
            tree = Binary(op.token_id, tree, rhs) # LHS of '*' in (a/b)*c is (a/b)
        return tree

    def expr(self) -> AstNode:
        tree = self.term()
        while self.look() in add_ops:
            op = self.consume(self.look())
            rhs = self.term()
            tree = Binary(op.token_id, tree, rhs)
        return tree

    def parse(self) -> AstNode:
        try:
            tree = self.expr()
        except RecursionError:
            raise ParseError("syntax error: expression nested too deeply", self.current_token.position) from None
        if not self.stack.is_empty():
            raise ParseError("syntax error: missing opening or closing parentheses: parentheses not balanced")
        if self.look() is not TokenId.EOF:
            raise ParseError("syntax error: unexpected input at end of expression", self.current_token.position)
        return tree

def parse(src: str) -> AstNode:
    return Parser(Lexer(src)).parse()

def try_parse(src: str) -> Tuple[AstNode, CalcError|None]:
    """
    Same as `parse`, but returns `(tree, error)` instead of raising. On
    failure the tree is an `ErrorNode`; always check the error first.
    """
    try:
        return parse(src), None
    except CalcError as err:
        return ErrorNode(err), err
