# MathEngine.py
"""""
Core calculation engine for the Scientific Calculator.

Pipeline
--------
1) Tokenizer: converts a raw input string into a flat list of tokens.
2) Parser (AST): builds an Abstract Syntax Tree (recursive-descent, precedence aware).
3) Evaluator: walks the tree and applies the scientific functions in the given angle mode.
4) Formatter: renders results using Decimal/Fraction and user preferences.

`evaluate` is the pure engine entry point: no settings, no history, no logging.
`calculate` is what the UI calls: it reads the settings, formats the result and
records it in the history.
"""""

import fractions
import logging
import math
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP, localcontext

from . import config_manager as config_manager
from . import error as E
from . import Evaluator
from . import Parser
from . import Tokenizer
from .History import HistoryStore
from .ScientificEngine import AngleMode, format_number

logger = logging.getLogger(__name__)

MAX_DENOMINATOR = 100000


# -----------------------------
# Engine facade
# -----------------------------

def tokenize(problem):
    return Tokenizer.tokenize(problem)


def parse(tokens, max_depth=Parser.MAX_DEPTH):
    return Parser.parse(tokens, max_depth=max_depth)


def evaluate(problem, mode=AngleMode.RAD, max_depth=Parser.MAX_DEPTH):
    """Evaluate an expression string and return a float.

    Raises InvalidCharacterError, SyntaxError, MathError or NestingDepthError.
    """
    mode = AngleMode.coerce(mode)
    try:
        baum = parse(tokenize(problem), max_depth=max_depth)
        return Evaluator.evaluate(baum, mode)
    except RecursionError:
        # Flat chains like 1+1+...+1 build a deep left-leaning tree without nesting
        raise E.NestingDepthError(max_depth, code="3014", message="Expression too long to evaluate") from None


class EvaluationResult:
    """A successful evaluation as returned to callers and stored in the history."""

    def __init__(self, result, expression, mode, timestamp=None, display=None, rounded=False):
        self.result = result
        self.expression = expression
        self.mode = mode
        self.timestamp = timestamp or datetime.now(timezone.utc)
        self.display = display if display is not None else format_number(result)
        self.rounded = rounded

    def to_dict(self):
        return {
            "result": self.result,
            "expression": self.expression,
            "mode": self.mode.value,
            "timestamp": self.timestamp.isoformat(),
        }

    def __repr__(self):
        return f"EvaluationResult({self.expression!r} = {self.display}, mode={self.mode.value})"


# -----------------------------
# Result formatting
# -----------------------------

def cleanup(ergebnis, target_decimals, target_fractions=False):
    """Format a numeric result as Fraction or Decimal text.

    Returns:
        (rendered_value, rounding_flag)
    where rounding_flag indicates whether the rendered value is not exact.
    """
    if not math.isfinite(ergebnis):
        return format_number(ergebnis), False

    if ergebnis.is_integer():
        # Integer result: no rounding, no fraction
        return format_number(ergebnis), False

    if target_fractions:
        bruch_ergebnis = fractions.Fraction(ergebnis)
        gekuerzter_bruch = bruch_ergebnis.limit_denominator(MAX_DENOMINATOR)
        rounding = gekuerzter_bruch != bruch_ergebnis
        zaehler = gekuerzter_bruch.numerator
        nenner = gekuerzter_bruch.denominator

        if nenner == 1:
            return str(zaehler), rounding
        if abs(zaehler) > nenner:
            # Mixed fraction form (e.g., 3/2 -> "1 1/2", -3/2 -> "-1 1/2")
            ganzzahl, rest_zaehler = divmod(abs(zaehler), nenner)
            vorzeichen = "-" if zaehler < 0 else ""
            return f"{vorzeichen}{ganzzahl} {rest_zaehler}/{nenner}", rounding
        return str(gekuerzter_bruch), rounding

    target_decimals = max(int(target_decimals), 0)
    exakt = Decimal(repr(ergebnis))
    with localcontext() as ctx:
        # Non-integral doubles have at most 16 integer digits
        ctx.prec = 20 + target_decimals
        gerundetes_ergebnis = exakt.quantize(Decimal(1).scaleb(-target_decimals), rounding=ROUND_HALF_UP)
    rounding = gerundetes_ergebnis != exakt

    ausgabe_string = format(gerundetes_ergebnis.normalize(), "f")
    if ausgabe_string in ("-0", "0"):
        ausgabe_string = "0"
    return ausgabe_string, rounding


# -----------------------------
# Public entry point
# -----------------------------

def default_history():
    return HistoryStore(config_manager.resolve_path(config_manager.load_setting_value("history_file")))


def calculate(problem, mode=None, user_id=None, history=None):
    """Main API: evaluate -> format -> record. Returns an EvaluationResult."""
    settings = config_manager.load_setting_value("all")
    if mode is None:
        mode = AngleMode.DEG if settings["degrees"] else AngleMode.RAD
    mode = AngleMode.coerce(mode)

    try:
        ergebnis = evaluate(problem, mode, max_depth=settings["max_nesting_depth"])
        ausgabe_string, rounding = cleanup(ergebnis, settings["decimal_places"], settings["fractions"])

    # Re-raise our domain errors after attaching the source equation
    except E.CalculatorError as e:
        e.equation = problem
        logger.warning("Evaluation of %r failed: %s", problem, e.message)
        raise e
    # Convert unexpected Python exceptions to our unified error type
    except Exception as e:
        logger.exception("Unexpected error while evaluating %r", problem)
        raise E.CalculatorError(message=str(e).strip(), code="9999", equation=problem) from e

    evaluation = EvaluationResult(ergebnis, problem, mode, display=ausgabe_string, rounded=rounding)
    logger.debug("%s", evaluation)

    if user_id is not None and settings["save_history"]:
        if history is None:
            history = default_history()
        history.record(user_id, evaluation)

    return evaluation


def test_main():
    """Simple REPL-like runner for manual testing of the engine."""
    print("Enter the problem: ")
    problem = input()
    try:
        evaluation = calculate(problem)
    except E.CalculatorError as e:
        print(f"Error {e.code}: {e.message}")
        return
    approx_sign = "≈" if evaluation.rounded else "="
    print(f"{approx_sign} {evaluation.display}")


if __name__ == "__main__":
    test_main()
