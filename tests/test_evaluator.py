"""Unit tests for the evaluable-expression evaluator."""

import math
import unittest

from kalkulator_saku.config import MAX_INPUT_LENGTH
from kalkulator_saku.evaluator import evaluate, evaluate_safely, validate
from kalkulator_saku.types import EvalResult, ValidationError


class TestEvaluate(unittest.TestCase):
    """Test arithmetic on numeric literals."""

    def test_basic_arithmetic(self):
        """Test basic arithmetic."""
        self.assertEqual(evaluate("12.0+7.0"), 19.0)
        self.assertEqual(evaluate("12.0-7.0"), 5.0)
        self.assertEqual(evaluate("6.0*7.0"), 42.0)
        self.assertEqual(evaluate("7.0/2.0"), 3.5)

    def test_single_literal(self):
        """Test single literal."""
        self.assertEqual(evaluate("8.0"), 8.0)
        self.assertEqual(evaluate("-5.0"), -5.0)

    def test_negative_right_operand(self):
        """Test negative right operand."""
        self.assertEqual(evaluate("5.0--3.0"), 8.0)
        self.assertEqual(evaluate("5.0+-3.0"), 2.0)

    def test_precedence_in_folded_chain(self):
        """Test precedence in folded chain."""
        self.assertEqual(evaluate("5.0+3.0*2.0"), 11.0)

    def test_exponent_literals(self):
        """Test exponent literals."""
        self.assertEqual(evaluate("1e+21*2.0"), 2e21)

    def test_fractions(self):
        """Test fractions."""
        self.assertAlmostEqual(evaluate("0.1+0.2"), 0.3)

    def test_division_by_zero(self):
        """Test division by zero."""
        self.assertEqual(evaluate("1.0/0.0"), math.inf)
        self.assertTrue(math.isnan(evaluate("0.0/0.0")))

    def test_division_by_zero_keeps_sign(self):
        """Test division by zero keeps sign."""
        self.assertEqual(evaluate("-2.0/0.0"), -math.inf)
        self.assertEqual(evaluate("3.0-2.0/0.0"), -math.inf)
        self.assertEqual(evaluate("-2.0*3.0/0.0"), -math.inf)

    def test_special_literals(self):
        """Test special literals."""
        self.assertTrue(math.isnan(evaluate("nan+1.0")))
        self.assertEqual(evaluate("inf"), math.inf)


class TestValidate(unittest.TestCase):
    """Test rejection of anything but literal arithmetic."""

    def test_empty(self):
        """Test empty."""
        with self.assertRaises(ValidationError) as ctx:
            validate("")
        self.assertEqual(ctx.exception.code, "EMPTY_EXPRESSION")

    def test_dangling_operator(self):
        """Test dangling operator."""
        with self.assertRaises(ValidationError) as ctx:
            validate("2.0+")
        self.assertEqual(ctx.exception.code, "INVALID_EXPRESSION")

    def test_code_is_rejected(self):
        """Test code is rejected."""
        with self.assertRaises(ValidationError):
            validate("__import__('os')")
        with self.assertRaises(ValidationError):
            validate("x+1")

    def test_too_long(self):
        """Test too long."""
        with self.assertRaises(ValidationError) as ctx:
            validate("1" * (MAX_INPUT_LENGTH + 1))
        self.assertEqual(ctx.exception.code, "TOO_LONG")

    def test_strips_whitespace(self):
        """Test strips whitespace."""
        self.assertEqual(validate(" 1.0 + 2.0 "), "1.0 + 2.0")


class TestEvaluateSafely(unittest.TestCase):
    """Test the non-raising wrapper."""

    def test_success(self):
        """Test success."""
        result = evaluate_safely("12.0+7.0")
        self.assertIsInstance(result, EvalResult)
        self.assertTrue(result.ok)
        self.assertEqual(result.value, 19.0)
        self.assertEqual(result.to_dict(), {"ok": True, "value": 19.0})

    def test_failure_is_nan(self):
        """Test failure is nan."""
        result = evaluate_safely("2.0+")
        self.assertFalse(result.ok)
        self.assertTrue(math.isnan(result.value))
        self.assertEqual(result.error_code, "INVALID_EXPRESSION")
        self.assertIn("error", result.to_dict())


if __name__ == "__main__":
    unittest.main()
