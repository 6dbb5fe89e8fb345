from .error import CalculatorError, InvalidCharacterError, MathError, NestingDepthError, SyntaxError
from .MathEngine import EvaluationResult, calculate, evaluate
from .ScientificEngine import AngleMode
