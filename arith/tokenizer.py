import enum
import logging
import string
from dataclasses import dataclass
from typing import Callable

from arith.utils import CalcError, PrintableEnum, render_pointer

logger = logging.getLogger(__name__)


@dataclass
class LexError(CalcError):
    errmsg: str
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        return "\n".join([f"[Lexer error] {self.errmsg}", *render_pointer(self.code, self.error_char_idx)])


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    ASTERISK = enum.auto()
    SOLIDUS = enum.auto()
    LEFT_PAREN = enum.auto()
    RIGHT_PAREN = enum.auto()
    EQUALS = enum.auto()
    IDENTIFIER = enum.auto()


@dataclass(frozen=True)
class Span:
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Token:
    """A lexical unit; refers back to the source text instead of holding a converted value"""

    type: TokenType
    span: Span

    def lexeme(self, code: str) -> str:
        return code[self.span.start : self.span.end]

    def describe(self, code: str) -> str:
        return f"<{self.type}>{self.lexeme(code)}"


def _is_valid_in_number(s: str) -> bool:
    return s in string.digits or s == "."


def _is_valid_identifier_start(s: str) -> bool:
    return s in string.ascii_letters


def _is_valid_in_identifier(s: str) -> bool:
    return s in string.ascii_letters or s in string.digits


SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SOLIDUS,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "=": TokenType.EQUALS,
}


def _scan_while(code: str, start: int, predicate: Callable[[str], bool]) -> int:
    end = start + 1
    while end < len(code) and predicate(code[end]):
        end += 1
    return end


def tokenize(code: str) -> list[Token]:
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        char = code[i]
        if _is_valid_in_number(char):
            end = _scan_while(code, i, _is_valid_in_number)
            tokens.append(Token(type=TokenType.NUMBER, span=Span(i, end)))
            i = end
        elif _is_valid_identifier_start(char):
            end = _scan_while(code, i, _is_valid_in_identifier)
            tokens.append(Token(type=TokenType.IDENTIFIER, span=Span(i, end)))
            i = end
        elif char in SINGLE_CHAR_TOKENS:
            tokens.append(Token(type=SINGLE_CHAR_TOKENS[char], span=Span(i, i + 1)))
            i += 1
        elif char.isspace():
            i += 1
        else:
            raise LexError(f"Unexpected character: {char!r}", code=code, error_char_idx=i)

    logger.debug("Tokenized %r into %d tokens", code, len(tokens))
    return tokens
