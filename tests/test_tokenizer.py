import pytest

from Calculator import error as E
from Calculator.Tokenizer import Token, TokenType, tokenize


def kinds(tokens):
    return [token.type for token in tokens]


def test_simple_expression():
    tokens = tokenize("2 + 3.5")
    assert tokens == [
        Token(TokenType.NUMBER, "2", 0),
        Token(TokenType.OPERATOR, "+", 2),
        Token(TokenType.NUMBER, "3.5", 4),
        Token(TokenType.EOF, "", 7),
    ]


def test_empty_input_is_only_eof():
    assert tokenize("") == [Token(TokenType.EOF, "", 0)]
    assert tokenize("   ") == [Token(TokenType.EOF, "", 3)]


def test_functions_constants_and_parentheses():
    tokens = tokenize("sin(PI)*E")
    assert kinds(tokens) == [TokenType.FUNCTION, TokenType.LPAREN, TokenType.CONSTANT, TokenType.RPAREN,
                             TokenType.OPERATOR, TokenType.CONSTANT, TokenType.EOF]
    assert tokens[0].value == "sin"
    assert tokens[2] == Token(TokenType.CONSTANT, "PI", 4)
    assert tokens[-1].position == len("sin(PI)*E")


@pytest.mark.parametrize("name", ["sin", "cos", "tan", "sqrt", "log", "ln", "asin", "acos", "atan", "sinh",
                                  "cosh", "tanh", "exp", "abs", "cbrt", "fact", "floor", "ceil", "round"])
def test_every_function_name_is_known(name):
    assert tokenize(name)[0] == Token(TokenType.FUNCTION, name, 0)


def test_all_operators():
    tokens = tokenize("+-*/^")
    assert [token.value for token in tokens[:-1]] == ["+", "-", "*", "/", "^"]
    assert all(token.type == TokenType.OPERATOR for token in tokens[:-1])


def test_function_name_is_split_from_digits():
    tokens = tokenize("2sin")
    assert kinds(tokens) == [TokenType.NUMBER, TokenType.FUNCTION, TokenType.EOF]


def test_invalid_character():
    with pytest.raises(E.InvalidCharacterError) as info:
        tokenize("2 $ 3")
    assert info.value.character == "$"
    assert info.value.position == 2
    assert "at position 2" in str(info.value)


def test_unknown_function_name():
    with pytest.raises(E.InvalidCharacterError) as info:
        tokenize("1 + foo(2)")
    assert info.value.character == "foo"
    assert info.value.position == 4


def test_unknown_constant_and_mixed_case():
    with pytest.raises(E.InvalidCharacterError) as info:
        tokenize("PIE")
    assert info.value.character == "PIE"

    # 'Sin' is the constant run 'S', which is unknown
    with pytest.raises(E.InvalidCharacterError):
        tokenize("Sin(1)")


def test_lone_dot_is_invalid():
    with pytest.raises(E.InvalidCharacterError):
        tokenize(".5")


def test_number_with_two_dots_is_a_syntax_error():
    with pytest.raises(E.SyntaxError) as info:
        tokenize("1 + 1.2.3")
    assert info.value.position == 4
    assert info.value.code == "3008"


def test_trailing_dot_is_accepted():
    assert tokenize("5.")[0] == Token(TokenType.NUMBER, "5.", 0)


def test_non_ascii_digits_are_rejected():
    with pytest.raises(E.InvalidCharacterError):
        tokenize("٣")  # ARABIC-INDIC DIGIT THREE
