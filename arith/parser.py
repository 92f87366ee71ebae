import logging
from dataclasses import dataclass
from typing import Optional

from arith.nodes import Assignment, BinaryOp, BinaryOperator, Identifier, Literal, Node, to_source
from arith.tokenizer import Token, TokenType, tokenize
from arith.utils import CalcError, render_pointer

logger = logging.getLogger(__name__)

MAX_NESTING_DEPTH = 100


@dataclass
class ParseError(CalcError):
    errmsg: str
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        return "\n".join([f"[Parser error] {self.errmsg}", *render_pointer(self.code, self.error_char_idx)])


class NumberFormatError(ParseError):
    pass


ADDITIVE_OPERATORS = {
    TokenType.PLUS: BinaryOperator.ADD,
    TokenType.MINUS: BinaryOperator.SUB,
}

MULTIPLICATIVE_OPERATORS = {
    TokenType.ASTERISK: BinaryOperator.MUL,
    TokenType.SOLIDUS: BinaryOperator.DIV,
}


class TokenCursor:
    """Read position over a token list; looking past the end yields None"""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self.position = 0

    def at_end(self) -> bool:
        return self.position >= len(self._tokens)

    def peek(self, offset: int = 0) -> Optional[Token]:
        idx = self.position + offset
        if idx < len(self._tokens):
            return self._tokens[idx]
        return None

    def advance(self) -> Optional[Token]:
        token = self.peek()
        if token is not None:
            self.position += 1
        return token


class Parser:
    """Recursive descent over the grammar

    statement := IDENT '=' expr | expr
    expr      := term (('+' | '-') term)*
    term      := factor (('*' | '/') factor)*
    factor    := NUMBER | IDENT | '(' expr ')'
    """

    def __init__(self, tokens: list[Token], code: str) -> None:
        self.code = code
        self.cursor = TokenCursor(tokens)
        self.depth = 0

    def error(self, errmsg: str, token: Optional[Token] = None) -> ParseError:
        if token is None:
            token = self.cursor.peek()
        error_char_idx = token.span.start if token is not None else len(self.code)
        return ParseError(errmsg, code=self.code, error_char_idx=error_char_idx)

    def parse(self) -> Node:
        if self.cursor.at_end():
            raise self.error("Empty expression")
        statement = self.parse_statement()
        trailing = self.cursor.peek()
        if trailing is not None:
            if trailing.type is TokenType.EQUALS:
                raise self.error("Left side of an assignment must be a single identifier")
            raise self.error(f"Unexpected token after end of expression: {trailing.type}")
        return statement

    def parse_statement(self) -> Node:
        first, second = self.cursor.peek(), self.cursor.peek(1)
        if (
            first is not None
            and first.type is TokenType.IDENTIFIER
            and second is not None
            and second.type is TokenType.EQUALS
        ):
            self.cursor.advance()
            self.cursor.advance()
            return Assignment(name=first.lexeme(self.code), value=self.parse_expr())
        return self.parse_expr()

    def parse_expr(self) -> Node:
        left = self.parse_term()
        while True:
            token = self.cursor.peek()
            if token is None or token.type not in ADDITIVE_OPERATORS:
                break
            self.cursor.advance()
            right = self.parse_term()
            left = BinaryOp(operator=ADDITIVE_OPERATORS[token.type], left=left, right=right)
        return left

    def parse_term(self) -> Node:
        left = self.parse_factor()
        while True:
            token = self.cursor.peek()
            if token is None or token.type not in MULTIPLICATIVE_OPERATORS:
                break
            self.cursor.advance()
            right = self.parse_factor()
            left = BinaryOp(operator=MULTIPLICATIVE_OPERATORS[token.type], left=left, right=right)
        return left

    def parse_factor(self) -> Node:
        token = self.cursor.advance()
        if token is None:
            raise self.error("Unexpected end of input, expected a number, a variable or '('")
        if token.type is TokenType.NUMBER:
            return self.convert_number(token)
        elif token.type is TokenType.IDENTIFIER:
            return Identifier(token.lexeme(self.code))
        elif token.type is TokenType.LEFT_PAREN:
            return self.parse_parenthesized(token)
        else:
            raise self.error(f"Expected a number, a variable or '(', found {token.type}", token=token)

    def parse_parenthesized(self, open_paren: Token) -> Node:
        if self.depth >= MAX_NESTING_DEPTH:
            raise self.error(f"Parentheses nested deeper than {MAX_NESTING_DEPTH} levels", token=open_paren)
        self.depth += 1
        inner = self.parse_expr()
        self.depth -= 1
        close_paren = self.cursor.advance()
        if close_paren is None:
            raise self.error(f"Expected ')' to close '(' at column {open_paren.span.start + 1}")
        if close_paren.type is not TokenType.RIGHT_PAREN:
            raise self.error(
                f"Expected ')' to close '(' at column {open_paren.span.start + 1}, found {close_paren.type}",
                token=close_paren,
            )
        return inner

    def convert_number(self, token: Token) -> Literal:
        lexeme = token.lexeme(self.code)
        try:
            return Literal(float(lexeme))
        except ValueError:
            raise NumberFormatError(
                f"Invalid number literal: {lexeme!r}", code=self.code, error_char_idx=token.span.start
            ) from None


def parse(tokens: list[Token], code: str) -> Node:
    tree = Parser(tokens, code).parse()
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Parsed %r as %s", code, to_source(tree))
    return tree


def tokenize_and_parse(code: str) -> Node:
    return parse(tokenize(code), code)
