import pytest

from arith.tokenizer import LexError, Span, Token, TokenType, tokenize


@pytest.mark.parametrize(
    "code, expected_types",
    [
        pytest.param("", []),
        pytest.param("   ", []),
        pytest.param("1", [TokenType.NUMBER]),
        pytest.param(
            "+-*/()=",
            [
                TokenType.PLUS,
                TokenType.MINUS,
                TokenType.ASTERISK,
                TokenType.SOLIDUS,
                TokenType.LEFT_PAREN,
                TokenType.RIGHT_PAREN,
                TokenType.EQUALS,
            ],
        ),
        pytest.param("x1 = 2.5", [TokenType.IDENTIFIER, TokenType.EQUALS, TokenType.NUMBER]),
        pytest.param("(a+b)", [TokenType.LEFT_PAREN, TokenType.IDENTIFIER, TokenType.PLUS, TokenType.IDENTIFIER, TokenType.RIGHT_PAREN]),
        pytest.param("2x", [TokenType.NUMBER, TokenType.IDENTIFIER]),
        pytest.param("1.2.3", [TokenType.NUMBER]),
        pytest.param("1 2", [TokenType.NUMBER, TokenType.NUMBER]),
    ],
)
def test_token_types(code: str, expected_types: list[TokenType]) -> None:
    assert [t.type for t in tokenize(code)] == expected_types


def test_spans_point_into_source() -> None:
    code = "  abc1 =  12.5*(x)"
    tokens = tokenize(code)
    assert tokens == [
        Token(TokenType.IDENTIFIER, Span(2, 6)),
        Token(TokenType.EQUALS, Span(7, 8)),
        Token(TokenType.NUMBER, Span(10, 14)),
        Token(TokenType.ASTERISK, Span(14, 15)),
        Token(TokenType.LEFT_PAREN, Span(15, 16)),
        Token(TokenType.IDENTIFIER, Span(16, 17)),
        Token(TokenType.RIGHT_PAREN, Span(17, 18)),
    ]
    assert [t.lexeme(code) for t in tokens] == ["abc1", "=", "12.5", "*", "(", "x", ")"]


def test_describe() -> None:
    code = "x = 1.5"
    assert [t.describe(code) for t in tokenize(code)] == ["<IDENTIFIER>x", "<EQUALS>=", "<NUMBER>1.5"]


@pytest.mark.parametrize("code", ["a = 1 + 2", "(foo * 3.25) / bar2 - 1.2.3", "x=y"])
def test_retokenizing_lexeme_yields_same_token(code: str) -> None:
    for token in tokenize(code):
        lexeme = token.lexeme(code)
        assert tokenize(lexeme) == [Token(token.type, Span(0, len(lexeme)))]


def test_tokenize_is_deterministic() -> None:
    code = "a = (1 + 2) * b"
    assert tokenize(code) == tokenize(code)


@pytest.mark.parametrize(
    "code, error_char_idx",
    [
        pytest.param("1 % 2", 2),
        pytest.param("2 ^ 3", 2),
        pytest.param("x_y", 1),
        pytest.param("1;", 1),
        pytest.param("café", 3),
        pytest.param("²", 0),
    ],
)
def test_unexpected_character(code: str, error_char_idx: int) -> None:
    with pytest.raises(LexError) as exc_info:
        tokenize(code)
    assert exc_info.value.error_char_idx == error_char_idx
    assert exc_info.value.code == code


def test_lex_error_message_points_at_character() -> None:
    with pytest.raises(LexError) as exc_info:
        tokenize("1 + $")
    assert str(exc_info.value) == "\n".join(["[Lexer error] Unexpected character: '$'", "1 + $", "    ^"])
