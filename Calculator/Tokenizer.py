# Tokenizer.py
"""""
Converts a raw expression string into a flat list of tokens.

One left-to-right pass, no backtracking. The returned list always ends with a
single EOF token whose position equals the length of the input.
"""""

from enum import Enum
from typing import NamedTuple

from . import error as E


class TokenType(Enum):
    NUMBER = "NUMBER"
    OPERATOR = "OPERATOR"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    FUNCTION = "FUNCTION"
    CONSTANT = "CONSTANT"
    EOF = "EOF"


class Token(NamedTuple):
    type: TokenType
    value: str
    position: int


DIGITS = "0123456789"
Operations = ["+", "-", "*", "/", "^"]
Constants = ["PI", "E"]
Functions = ["sin", "cos", "tan", "sqrt", "log", "ln", "asin", "acos", "atan", "sinh", "cosh",
             "tanh", "exp", "abs", "cbrt", "fact", "floor", "ceil", "round"]


def isInt(zeichen):
    """Return True for an ASCII digit (str.isdigit also accepts other scripts)."""
    return zeichen != "" and zeichen in DIGITS


def isUpper(zeichen):
    return "A" <= zeichen <= "Z"


def isLower(zeichen):
    return "a" <= zeichen <= "z"


def read_run(problem, start, predicate):
    """Return the end index of the run of characters matching predicate."""
    b = start
    while b < len(problem) and predicate(problem[b]):
        b += 1
    return b


def tokenize(problem):
    """Convert an expression string into a list of Tokens.

    Raises:
        InvalidCharacterError: unknown character, function name or constant.
        SyntaxError: a numeral with more than one '.'.
    """
    tokens = []
    b = 0

    while b < len(problem):
        current_char = problem[b]

        # --- Whitespace (ignored) ---
        if current_char.isspace():
            b += 1

        # --- Numbers: a digit followed by digits and decimal separators ---
        elif isInt(current_char):
            end = read_run(problem, b, lambda c: isInt(c) or c == ".")
            str_number = problem[b:end]
            if str_number.count(".") > 1:
                raise E.SyntaxError("More than one '.' in one number", position=b, code="3008")
            tokens.append(Token(TokenType.NUMBER, str_number, b))
            b = end

        # --- Operators ---
        elif current_char in Operations:
            tokens.append(Token(TokenType.OPERATOR, current_char, b))
            b += 1

        # --- Parentheses ---
        elif current_char == "(":
            tokens.append(Token(TokenType.LPAREN, current_char, b))
            b += 1
        elif current_char == ")":
            tokens.append(Token(TokenType.RPAREN, current_char, b))
            b += 1

        # --- Constants: PI, E ---
        elif isUpper(current_char):
            end = read_run(problem, b, isUpper)
            name = problem[b:end]
            if name not in Constants:
                raise E.InvalidCharacterError(name, b, message=f"Unknown constant '{name}' at position {b}",
                                              code="3102")
            tokens.append(Token(TokenType.CONSTANT, name, b))
            b = end

        # --- Function names ---
        elif isLower(current_char):
            end = read_run(problem, b, isLower)
            name = problem[b:end]
            if name not in Functions:
                raise E.InvalidCharacterError(name, b, message=f"Unknown function '{name}' at position {b}",
                                              code="3101")
            tokens.append(Token(TokenType.FUNCTION, name, b))
            b = end

        else:
            raise E.InvalidCharacterError(current_char, b)

    tokens.append(Token(TokenType.EOF, "", len(problem)))
    return tokens
