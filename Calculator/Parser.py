# Parser.py
"""""
Recursive-descent parser: builds an Abstract Syntax Tree from a token list.

Grammar (highest binding last)
------------------------------
    expression := term (('+' | '-') term)*        left-associative
    term       := factor (('*' | '/') factor)*     left-associative
    factor     := base ('^' factor)?               right-associative
    base       := NUMBER | CONSTANT | '-' base | '(' expression ')' | FUNCTION '(' expression ')'
"""""

import math

from . import error as E
from .Tokenizer import TokenType

MAX_DEPTH = 100

Constant_Values = {
    "PI": math.pi,
    "E": math.e,
}


# -----------------------------
# AST node types
# -----------------------------

class Number:
    """AST node for a numeric literal."""
    __slots__ = ("value",)

    def __init__(self, value):
        self.value = float(value)

    def __eq__(self, other):
        return isinstance(other, Number) and self.value == other.value

    def __repr__(self):
        return f"Number({self.value!r})"


class BinOp:
    """AST node for a binary operation: left <operator> right."""
    __slots__ = ("left", "operator", "right")

    def __init__(self, left, operator, right):
        self.left = left
        self.operator = operator
        self.right = right

    def __eq__(self, other):
        return (isinstance(other, BinOp) and self.operator == other.operator
                and self.left == other.left and self.right == other.right)

    def __repr__(self):
        return f"BinOp({self.operator!r}, left={self.left}, right={self.right})"


class FunctionCall:
    """AST node for a single-argument function call."""
    __slots__ = ("name", "argument")

    def __init__(self, name, argument):
        self.name = name
        self.argument = argument

    def __eq__(self, other):
        return isinstance(other, FunctionCall) and self.name == other.name and self.argument == other.argument

    def __repr__(self):
        return f"FunctionCall({self.name!r}, argument={self.argument})"


# -----------------------------
# Parser (recursive descent)
# -----------------------------

class Parser:
    def __init__(self, tokens, max_depth=MAX_DEPTH):
        self.tokens = tokens
        self.current = 0
        self.depth = 0
        self.max_depth = max_depth

    def parse(self):
        """Parse the whole token list; anything left before EOF is an error."""
        baum = self.parse_expression()
        token = self.current_token()
        if token.type != TokenType.EOF:
            raise E.SyntaxError("Unexpected token after expression", position=token.position, code="3012")
        return baum

    def current_token(self):
        return self.tokens[self.current]

    def advance(self):
        token = self.current_token()
        if token.type != TokenType.EOF:
            self.current += 1
        return token

    def is_operator(self, *operators):
        token = self.current_token()
        return token.type == TokenType.OPERATOR and token.value in operators

    def descend(self):
        self.depth += 1
        if self.depth > self.max_depth:
            raise E.NestingDepthError(self.max_depth)

    def ascend(self):
        self.depth -= 1

    def parse_expression(self):
        """Addition and subtraction."""
        aktueller_baum = self.parse_term()
        while self.is_operator("+", "-"):
            operator = self.advance().value
            rechte_seite = self.parse_term()
            aktueller_baum = BinOp(aktueller_baum, operator, rechte_seite)
        return aktueller_baum

    def parse_term(self):
        """Multiplication and division."""
        aktueller_baum = self.parse_factor()
        while self.is_operator("*", "/"):
            operator = self.advance().value
            rechtes_teil = self.parse_factor()
            aktueller_baum = BinOp(aktueller_baum, operator, rechtes_teil)
        return aktueller_baum

    def parse_factor(self):
        """Exponentiation; the right side recurses into factor, so 2^3^2 == 2^(3^2)."""
        basis = self.parse_base()
        if self.is_operator("^"):
            operator = self.advance().value
            self.descend()
            exponent = self.parse_factor()
            self.ascend()
            return BinOp(basis, operator, exponent)
        return basis

    def parse_base(self):
        """Numbers, constants, unary minus, sub-expressions in '()' and functions."""
        token = self.current_token()

        if token.type == TokenType.NUMBER:
            self.advance()
            return Number(token.value)

        if token.type == TokenType.CONSTANT:
            self.advance()
            if token.value not in Constant_Values:
                raise E.MathError(f"Unknown constant: {token.value}", code="3219")
            return Number(Constant_Values[token.value])

        # Unary minus becomes 0 - operand
        if token.type == TokenType.OPERATOR and token.value == "-":
            self.advance()
            self.descend()
            operand = self.parse_base()
            self.ascend()
            return BinOp(Number(0), "-", operand)

        if token.type == TokenType.LPAREN:
            self.advance()
            self.descend()
            baum_in_der_klammer = self.parse_expression()
            self.ascend()
            self.expect_closing("Expected closing parenthesis")
            return baum_in_der_klammer

        if token.type == TokenType.FUNCTION:
            return self.parse_function()

        if token.type == TokenType.EOF:
            raise E.SyntaxError("Unexpected end of expression", position=token.position)
        raise E.SyntaxError(f"Unexpected token: {token.value}", position=token.position)

    def parse_function(self):
        """FUNCTION '(' expression ')'."""
        funktions_token = self.advance()
        if self.current_token().type != TokenType.LPAREN:
            raise E.SyntaxError(f"Expected '(' after function name '{funktions_token.value}'",
                                position=self.current_token().position, code="3010")
        self.advance()

        self.descend()
        argument_baum = self.parse_expression()
        self.ascend()

        self.expect_closing("Expected ')' after function argument")
        return FunctionCall(funktions_token.value, argument_baum)

    def expect_closing(self, message):
        token = self.current_token()
        if token.type != TokenType.RPAREN:
            raise E.SyntaxError(message, position=token.position, code="3009")
        self.advance()


def parse(tokens, max_depth=MAX_DEPTH):
    """Build the AST for a token list produced by Tokenizer.tokenize."""
    return Parser(tokens, max_depth=max_depth).parse()
