"""Tests for nanoshapes.expressions."""

from decimal import Decimal
from fractions import Fraction

import mpmath
import pytest

from nanoshapes.expressions import (
    evaluate,
    evaluate_in,
    evaluate_vector,
    negate,
    parse,
)
from nanoshapes.model.errors import ExpressionError
from nanoshapes.model.vector import Vector3, context_for


def _close(a, b, digits):
    return abs(a - b) <= mpmath.mpf(10) ** (-digits)


class TestEvaluate:
    def test_integer(self):
        assert evaluate("3", 30) == 3

    def test_arithmetic(self):
        assert evaluate("(1 + 2) * 4 / 8 - 1", 30) == mpmath.mpf("0.5")

    def test_sqrt(self):
        ctx = context_for(60)
        value = evaluate("sqrt(2)", 60)
        assert _close(value * value, 2, 58)
        assert value.context is ctx

    def test_golden_ratio_matches_closed_form(self):
        a = evaluate("phi", 50)
        b = evaluate("(1 + sqrt(5))/2", 50)
        assert _close(a, b, 48)

    def test_pi(self):
        assert _close(evaluate("pi", 40), mpmath.pi, 14)

    def test_cbrt_of_negative_is_real(self):
        value = evaluate("cbrt(-27)", 30)
        assert _close(value, -3, 28)

    def test_power_with_integer_exponent(self):
        assert evaluate("2**10", 30) == 1024
        assert evaluate("2**-2", 30) == mpmath.mpf("0.25")

    def test_fractional_power(self):
        assert _close(evaluate("4**0.5", 30), 2, 28)

    def test_decimal_literal_taken_as_written(self):
        value = evaluate("0.1", 40)
        assert value == context_for(40).mpf("0.1")
        assert value != context_for(40).mpf(0.1)

    def test_unary_minus(self):
        assert evaluate("-(1 - 3)", 30) == 2

    def test_whitespace_is_ignored(self):
        assert evaluate("  1 + 1  ", 30) == 2

    def test_higher_precision_carries_more_digits(self):
        low = evaluate("sqrt(2)", 20)
        high = evaluate("sqrt(2)", 80)
        assert abs(high - low) < mpmath.mpf(10) ** -18
        assert high.context.dps == 80

    @pytest.mark.parametrize("value, expected", [
        (3, 3),
        (Fraction(1, 4), mpmath.mpf("0.25")),
        (Decimal("1.5"), mpmath.mpf("1.5")),
        (0.5, mpmath.mpf("0.5")),
    ])
    def test_numbers_pass_through(self, value, expected):
        assert evaluate(value, 30) == expected

    def test_mpf_is_converted_into_context(self):
        ctx = context_for(45)
        value = evaluate_in(mpmath.mpf(2), ctx)
        assert value == 2
        assert value.context is ctx


class TestEvaluateErrors:
    @pytest.mark.parametrize("text", [
        "",
        "1 +",
        "sqrt(2",
    ])
    def test_syntax_error(self, text):
        with pytest.raises(ExpressionError, match="invalid expression"):
            evaluate(text, 30)

    def test_unknown_name(self):
        with pytest.raises(ExpressionError, match="unknown name"):
            evaluate("tau", 30)

    def test_unknown_function(self):
        with pytest.raises(ExpressionError, match="sqrt"):
            evaluate("sin(1)", 30)

    def test_attribute_access_rejected(self):
        with pytest.raises(ExpressionError, match="only sqrt"):
            evaluate("__import__('os').getcwd()", 30)

    def test_string_literal_rejected(self):
        with pytest.raises(ExpressionError, match="unsupported literal"):
            evaluate("'a'", 30)

    def test_comparison_rejected(self):
        with pytest.raises(ExpressionError, match="unsupported syntax"):
            evaluate("1 < 2", 30)

    def test_modulo_rejected(self):
        with pytest.raises(ExpressionError, match="unsupported operator"):
            evaluate("5 % 2", 30)

    def test_negative_radicand(self):
        with pytest.raises(ExpressionError, match="negative radicand"):
            evaluate("sqrt(1 - 2)", 30)

    def test_division_by_zero(self):
        with pytest.raises(ExpressionError, match="division by zero"):
            evaluate("1/(2 - 2)", 30)

    def test_zero_to_negative_power(self):
        with pytest.raises(ExpressionError, match="zero to a negative power"):
            evaluate("0**-1", 30)

    def test_fractional_power_of_negative(self):
        with pytest.raises(ExpressionError, match="non-positive base"):
            evaluate("(-8)**0.5", 30)

    def test_unsupported_type(self):
        with pytest.raises(ExpressionError, match="expected an expression"):
            evaluate([1], 30)

    def test_non_finite_number(self):
        with pytest.raises(ExpressionError, match="not finite"):
            evaluate(float("inf"), 30)

    def test_expression_error_is_value_error(self):
        with pytest.raises(ValueError):
            evaluate("nope", 30)


class TestParse:
    def test_parse_is_cached(self):
        assert parse("sqrt(5)") is parse("sqrt(5)")


class TestEvaluateVector:
    def test_returns_vector(self):
        v = evaluate_vector(("1", "sqrt(4)", 3), 30)
        assert isinstance(v, Vector3)
        assert (v.x, v.y, v.z) == (1, 2, 3)

    def test_wrong_length(self):
        with pytest.raises(ExpressionError, match="exactly 3"):
            evaluate_vector(("1", "2"), 30)

    def test_string_rejected(self):
        with pytest.raises(ExpressionError, match="exactly 3"):
            evaluate_vector("123", 30)


class TestNegate:
    def test_zero_stays_zero(self):
        assert negate("0") == "0"
        assert negate("0.0") == "0"
        assert negate(0) == "0"

    def test_wraps_expression(self):
        assert negate("1 + sqrt(2)") == "-(1 + sqrt(2))"

    def test_double_negation_unwraps(self):
        assert negate(negate("1 + sqrt(2)")) == "1 + sqrt(2)"

    def test_unbalanced_prefix_is_not_unwrapped(self):
        # "-(a) + (b)" is not a single negated group.
        assert negate("-(1) + (2)") == "-(-(1) + (2))"

    def test_negated_value(self):
        assert evaluate(negate("sqrt(2)/4"), 30) == -evaluate("sqrt(2)/4", 30)
