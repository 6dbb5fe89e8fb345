# Evaluator.py
"""Post-order evaluation of the AST built by Parser."""

from . import error as E
from . import ScientificEngine
from .Parser import BinOp, FunctionCall, Number
from .ScientificEngine import AngleMode


def apply_operator(operator, left_value, right_value):
    if operator == '+':
        return left_value + right_value
    elif operator == '-':
        return left_value - right_value
    elif operator == '*':
        return left_value * right_value
    elif operator == '/':
        if right_value == 0:
            raise E.MathError("Division by zero", code="3003")
        return left_value / right_value
    elif operator == '^':
        return ScientificEngine.power(left_value, right_value)
    raise E.MathError(f"Unknown operator: {operator}", code="3004")


def evaluate(node, mode=AngleMode.RAD):
    """Evaluate node (children first) and return a float."""
    if isinstance(node, Number):
        return node.value

    if isinstance(node, BinOp):
        left_value = evaluate(node.left, mode)
        right_value = evaluate(node.right, mode)
        return apply_operator(node.operator, left_value, right_value)

    if isinstance(node, FunctionCall):
        argument_wert = evaluate(node.argument, mode)
        return ScientificEngine.unknown_function(node.name, argument_wert, mode)

    raise E.MathError(f"Unknown node: {node!r}", code="9999")
