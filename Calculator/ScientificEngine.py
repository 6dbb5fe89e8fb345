# ScientificEngine
"""""
Single-argument scientific functions with their domain and overflow policies.

Trigonometric functions take their argument in degrees when the angle mode is
DEG; inverse trigonometric functions return degrees in DEG mode. Everything
else ignores the mode. Domain violations raise MathError; other failures of the
underlying math routine follow IEEE-754 (overflow -> +-inf, otherwise nan).
"""""

import math
from decimal import Decimal
from enum import Enum

from . import error as E

MAX_FACTORIAL = 170  # 171! exceeds the largest double


class AngleMode(Enum):
    DEG = "DEG"
    RAD = "RAD"

    @classmethod
    def coerce(cls, mode):
        """Accept an AngleMode or the (case-insensitive) strings 'DEG' / 'RAD'."""
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str):
            try:
                return cls(mode.strip().upper())
            except ValueError:
                pass
        raise ValueError(f"Unknown angle mode: {mode!r}")


def format_number(value):
    """Render a float as 5, 5.5, -1, NaN or -Infinity."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def to_input_text(value):
    """Render a finite float as plain digits the tokenizer accepts (no exponent)."""
    if not math.isfinite(value):
        raise ValueError(f"{value!r} has no plain decimal form")
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def ieee(function, value, overflow=math.inf):
    try:
        return float(function(value))
    except OverflowError:
        return overflow
    except ValueError:
        return math.nan


def to_radians(value, mode):
    return math.radians(value) if mode == AngleMode.DEG else value


def from_radians(value, mode):
    return math.degrees(value) if mode == AngleMode.DEG else value


# -----------------------------
# Trigonometry
# -----------------------------

def isSCT(name, value, mode):  # Sin / Cos / Tan
    clean_number = to_radians(value, mode)
    if name == "sin":
        return ieee(math.sin, clean_number)
    elif name == "cos":
        return ieee(math.cos, clean_number)
    return ieee(math.tan, clean_number)


def isArc(name, value, mode):  # asin / acos / atan
    if name in ("asin", "acos") and (value < -1 or value > 1):
        code = "2004" if name == "asin" else "2005"
        raise E.MathError(f"{name} domain error: {format_number(value)} not in [-1, 1]", code=code)

    if name == "asin":
        ergebnis = math.asin(value)
    elif name == "acos":
        ergebnis = math.acos(value)
    else:
        ergebnis = math.atan(value)
    return from_radians(ergebnis, mode)


def isHyperbolic(name, value):
    if name == "sinh":
        return ieee(math.sinh, value, overflow=math.copysign(math.inf, value))
    elif name == "cosh":
        return ieee(math.cosh, value)
    return math.tanh(value)


# -----------------------------
# Roots, logarithms, powers
# -----------------------------

def isRoot(value):
    if value < 0:
        raise E.MathError("Cannot take square root of negative number", code="2001")
    return math.sqrt(value)


def isLog(name, value):
    if value <= 0:
        if name == "log":
            raise E.MathError("Logarithm argument must be positive", code="2002")
        raise E.MathError("Natural logarithm argument must be positive", code="2003")
    if name == "log":
        return math.log10(value)
    return math.log(value)


def isE(value):
    return ieee(math.exp, value)


def power(basis, exponent):
    """pow() with IEEE-754 results instead of Python's exceptions.

    math.pow raises for overflow, for 0 to a negative power and for a negative
    base with a fractional exponent; those become +-inf, +-inf and nan.
    """
    try:
        return math.pow(basis, exponent)
    except OverflowError:
        if basis < 0 and is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if basis == 0:
            if is_odd_integer(exponent):
                return math.copysign(math.inf, basis)
            return math.inf
        return math.nan


def is_odd_integer(value):
    return math.isfinite(value) and value.is_integer() and value % 2 == 1


# -----------------------------
# Factorial and rounding
# -----------------------------

def isCbrt(value):
    wurzel = math.cbrt(value)
    if math.isfinite(wurzel):
        # Snap exact cubes, some libm builds return 3.0000000000000004 for 27
        ganzzahl = round(wurzel)
        if ganzzahl ** 3 == value:
            return float(ganzzahl)
    return wurzel


def isFact(value):
    if not value.is_integer():
        raise E.MathError(f"fact requires integer input, got {format_number(value)}", code="2006")
    if value < 0:
        raise E.MathError(f"fact domain error: negative input {format_number(value)}", code="2007")
    if value > MAX_FACTORIAL:
        raise E.MathError(f"fact overflow: {format_number(value)}! exceeds max value", code="2008")

    ergebnis = 1.0
    for i in range(2, int(value) + 1):
        ergebnis *= i
    return ergebnis


def isRounding(name, value):
    if not math.isfinite(value):
        return value
    if name == "floor":
        return float(math.floor(value))
    elif name == "ceil":
        return float(math.ceil(value))

    # Half up towards +inf: round(2.5) == 3, round(-2.5) == -2
    abgerundet = math.floor(value)
    if value - abgerundet >= 0.5:
        abgerundet += 1
    return float(abgerundet)


def unknown_function(name, value, mode=AngleMode.RAD):
    """Apply the scientific function `name` to value in the given angle mode."""
    if name in ("sin", "cos", "tan"):
        return isSCT(name, value, mode)
    elif name in ("asin", "acos", "atan"):
        return isArc(name, value, mode)
    elif name in ("sinh", "cosh", "tanh"):
        return isHyperbolic(name, value)
    elif name == "sqrt":
        return isRoot(value)
    elif name in ("log", "ln"):
        return isLog(name, value)
    elif name == "exp":
        return isE(value)
    elif name == "abs":
        return abs(value)
    elif name == "cbrt":
        return isCbrt(value)
    elif name == "fact":
        return isFact(value)
    elif name in ("floor", "ceil", "round"):
        return isRounding(name, value)

    raise E.MathError(f"Unknown function: {name}", code="2009")
