import math

import pytest

from Calculator import error as E
from Calculator import ScientificEngine
from Calculator.Evaluator import apply_operator, evaluate
from Calculator.Parser import BinOp, FunctionCall, Number
from Calculator.ScientificEngine import AngleMode, format_number, power, to_input_text, unknown_function


class TestAngleMode:
    def test_coerce_strings(self):
        assert AngleMode.coerce("deg") is AngleMode.DEG
        assert AngleMode.coerce(" RAD ") is AngleMode.RAD
        assert AngleMode.coerce(AngleMode.DEG) is AngleMode.DEG

    def test_coerce_rejects_unknown(self):
        with pytest.raises(ValueError):
            AngleMode.coerce("GRAD")
        with pytest.raises(ValueError):
            AngleMode.coerce(None)


class TestTrigonometry:
    def test_degrees_are_converted_for_sin_cos_tan(self):
        assert unknown_function("sin", 90.0, AngleMode.DEG) == pytest.approx(1.0)
        assert unknown_function("cos", 180.0, AngleMode.DEG) == pytest.approx(-1.0)
        assert unknown_function("tan", 45.0, AngleMode.DEG) == pytest.approx(1.0)

    def test_radians_are_untouched(self):
        assert unknown_function("sin", math.pi / 2, AngleMode.RAD) == pytest.approx(1.0)

    def test_inverse_functions_return_degrees_in_deg_mode(self):
        assert unknown_function("asin", 1.0, AngleMode.DEG) == pytest.approx(90.0)
        assert unknown_function("acos", 0.5, AngleMode.DEG) == pytest.approx(60.0)
        assert unknown_function("atan", 1.0, AngleMode.DEG) == pytest.approx(45.0)
        assert unknown_function("acos", 0.5, AngleMode.RAD) == pytest.approx(1.0472, abs=1e-4)

    @pytest.mark.parametrize("name", ["asin", "acos"])
    @pytest.mark.parametrize("value", [2.0, -2.0, 1.1])
    def test_inverse_domain(self, name, value):
        with pytest.raises(E.MathError, match=f"{name} domain error"):
            unknown_function(name, value, AngleMode.RAD)

    def test_sin_of_infinity_is_nan(self):
        assert math.isnan(unknown_function("sin", math.inf))


class TestDomains:
    def test_sqrt(self):
        assert unknown_function("sqrt", 16.0) == 4.0
        with pytest.raises(E.MathError, match="square root"):
            unknown_function("sqrt", -1.0)

    def test_logarithms(self):
        assert unknown_function("log", 1000.0) == pytest.approx(3.0)
        assert unknown_function("ln", math.e) == pytest.approx(1.0)
        with pytest.raises(E.MathError, match="Logarithm argument must be positive"):
            unknown_function("log", 0.0)
        with pytest.raises(E.MathError, match="Natural logarithm argument must be positive"):
            unknown_function("ln", -3.0)

    def test_unknown_function(self):
        with pytest.raises(E.MathError, match="Unknown function: sec"):
            unknown_function("sec", 1.0)


class TestOverflow:
    def test_exp_and_hyperbolic_overflow_to_infinity(self):
        assert unknown_function("exp", 1000.0) == math.inf
        assert unknown_function("cosh", 1000.0) == math.inf
        assert unknown_function("sinh", -1000.0) == -math.inf
        assert unknown_function("tanh", 1000.0) == 1.0

    def test_power_follows_ieee(self):
        assert power(2.0, 10.0) == 1024.0
        assert power(10.0, 400.0) == math.inf
        assert power(-10.0, 401.0) == -math.inf
        assert power(-10.0, 400.0) == math.inf
        assert math.isnan(power(-8.0, 1 / 3))
        assert power(0.0, -1.0) == math.inf
        assert power(-0.0, -1.0) == -math.inf
        assert power(0.0, -2.0) == math.inf


class TestFactorial:
    def test_values(self):
        assert unknown_function("fact", 0.0) == 1.0
        assert unknown_function("fact", 5.0) == 120.0
        assert unknown_function("fact", 10.0) == 3628800.0

    def test_boundary(self):
        largest = unknown_function("fact", 170.0)
        assert math.isfinite(largest) and largest > 0
        with pytest.raises(E.MathError, match="fact overflow: 171! exceeds max value"):
            unknown_function("fact", 171.0)

    def test_negative_and_fractional(self):
        with pytest.raises(E.MathError, match="fact domain error: negative input -1"):
            unknown_function("fact", -1.0)
        with pytest.raises(E.MathError, match="fact requires integer input, got 5.5"):
            unknown_function("fact", 5.5)
        with pytest.raises(E.MathError, match="requires integer input"):
            unknown_function("fact", math.nan)


class TestRounding:
    @pytest.mark.parametrize("value, expected", [
        (2.5, 3.0), (-2.5, -2.0), (3.4, 3.0), (3.6, 4.0), (-0.5, 0.0), (0.49999999999999994, 0.0),
    ])
    def test_round_half_up(self, value, expected):
        assert unknown_function("round", value) == expected

    def test_floor_and_ceil(self):
        assert unknown_function("floor", -2.3) == -3.0
        assert unknown_function("ceil", -2.7) == -2.0
        assert isinstance(unknown_function("floor", 3.7), float)

    def test_non_finite_values_pass_through(self):
        assert unknown_function("floor", math.inf) == math.inf
        assert math.isnan(unknown_function("round", math.nan))


def test_other_functions():
    assert unknown_function("abs", -3.14) == pytest.approx(3.14)
    assert unknown_function("cbrt", 27.0) == 3.0
    assert unknown_function("cbrt", -27.0) == -3.0
    assert unknown_function("cbrt", 1e300) == pytest.approx(1e100)
    assert unknown_function("cbrt", 2.0) == pytest.approx(1.2599210498948732)
    assert unknown_function("cbrt", math.inf) == math.inf
    assert unknown_function("cbrt", -8.0) == pytest.approx(-2.0)
    assert unknown_function("exp", 0.0) == 1.0


@pytest.mark.parametrize("value, expected", [
    (1e20, "100000000000000000000"),
    (1e-05, "0.00001"),
    (-2.5e-07, "-0.00000025"),
    (0.1, "0.1"),
    (42.0, "42"),
])
def test_to_input_text_has_no_exponent(value, expected):
    assert to_input_text(value) == expected


def test_to_input_text_rejects_non_finite():
    with pytest.raises(ValueError):
        to_input_text(math.nan)
    with pytest.raises(ValueError):
        to_input_text(-math.inf)


def test_format_number():
    assert format_number(5.0) == "5"
    assert format_number(-1.0) == "-1"
    assert format_number(5.5) == "5.5"
    assert format_number(math.nan) == "NaN"
    assert format_number(-math.inf) == "-Infinity"


class TestEvaluator:
    def test_division_by_zero(self):
        with pytest.raises(E.MathError, match="Division by zero"):
            apply_operator("/", 0.0, 0.0)
        with pytest.raises(E.MathError, match="Division by zero"):
            apply_operator("/", 1.0, -0.0)

    def test_unknown_operator(self):
        with pytest.raises(E.MathError):
            apply_operator("%", 1.0, 2.0)

    def test_mode_reaches_nested_calls(self):
        node = FunctionCall("sin", BinOp(Number(45), "+", Number(45)))
        assert evaluate(node, AngleMode.DEG) == pytest.approx(1.0)
        assert evaluate(node, AngleMode.RAD) == pytest.approx(math.sin(90))

    def test_unknown_node(self):
        with pytest.raises(E.MathError):
            evaluate("1 + 1")

    def test_max_factorial_constant(self):
        assert ScientificEngine.MAX_FACTORIAL == 170
