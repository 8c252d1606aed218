"""Evaluation of evaluable expression strings such as "12.0+7.0".

The calculator core hands this module strings of numeric literals joined by
``+ - * /``. Input is validated against that grammar before it reaches
SymPy's parser, so nothing but arithmetic on literals is ever evaluated.
"""

from __future__ import annotations

import math
import re
from functools import lru_cache
from tokenize import TokenError

import sympy as sp
from sympy.parsing.sympy_parser import parse_expr, standard_transformations

from .config import CACHE_SIZE_EVAL, MAX_INPUT_LENGTH
from .logging_config import get_logger
from .types import CalculatorError, EvalResult, ParseError, ValidationError

logger = get_logger("evaluator")

_NUMBER = r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|nan|inf)"
_EXPRESSION_RE = re.compile(rf"{_NUMBER}(?:\s*[-+*/]\s*{_NUMBER})*")

# repr(float) spells these as plain names
_LITERALS = {"nan": sp.nan, "inf": sp.oo}


def validate(text: str) -> str:
    """Check that ``text`` is arithmetic on numeric literals.

    Returns:
        The stripped expression text

    Raises:
        ValidationError: If the text is empty, too long, or contains anything
            other than numeric literals and ``+ - * /``
    """
    text = text.strip() if text else ""
    if not text:
        raise ValidationError("Empty expression", "EMPTY_EXPRESSION")
    if len(text) > MAX_INPUT_LENGTH:
        raise ValidationError(
            f"Expression too long (>{MAX_INPUT_LENGTH} characters)", "TOO_LONG"
        )
    if not _EXPRESSION_RE.fullmatch(text):
        raise ValidationError(f"Not an arithmetic expression: {text!r}", "INVALID_EXPRESSION")
    return text


def _float_value(node: sp.Basic) -> float:
    """Value of an unevaluated tree with IEEE float semantics (x/0 is a signed infinity)."""
    if isinstance(node, sp.Add):
        return sum(_float_value(arg) for arg in node.args)
    if isinstance(node, sp.Mul):
        value = 1.0
        for arg in node.args:
            value *= _float_value(arg)
        return value
    if isinstance(node, sp.Pow) and node.exp == -1:
        base = _float_value(node.base)
        try:
            return 1.0 / base
        except (ZeroDivisionError, OverflowError):
            return math.copysign(math.inf, base)
    return float(node)


def _signed_infinity(text: str) -> float:
    """Redo a division by zero that SymPy reduced to unsigned infinity, keeping the sign."""
    try:
        tree = parse_expr(
            text,
            local_dict=dict(_LITERALS),
            transformations=standard_transformations,
            evaluate=False,
        )
        return _float_value(tree)
    except (SyntaxError, TypeError, ValueError, TokenError) as e:
        logger.debug(f"Falling back to unsigned infinity for {text!r}: {e}")
        return math.inf


def _to_float(expr: sp.Basic) -> float:
    if getattr(expr, "free_symbols", None):
        raise ParseError(f"Expression is not numeric: {expr}", "NON_NUMERIC")
    try:
        return float(expr)
    except (TypeError, ValueError) as e:
        raise ParseError(f"Expression is not numeric: {e}", "NON_NUMERIC") from e


@lru_cache(maxsize=CACHE_SIZE_EVAL)
def _evaluate_cached(text: str) -> float:
    try:
        expr = parse_expr(
            text,
            local_dict=dict(_LITERALS),
            transformations=standard_transformations,
        )
    except ZeroDivisionError:
        return _signed_infinity(text)
    except (SyntaxError, TypeError, ValueError, TokenError) as e:
        raise ParseError(f"Failed to parse expression: {e}", "PARSE_ERROR") from e
    if expr.has(sp.zoo):
        return _signed_infinity(text)
    return _to_float(expr)


def evaluate(text: str) -> float:
    """Evaluate ``text`` and return its numeric value.

    Division by zero yields a signed ``inf`` and indeterminate forms yield ``nan``;
    neither is an error.

    Raises:
        ValidationError: If the text fails ``validate``
        ParseError: If SymPy cannot turn it into a number
    """
    return _evaluate_cached(validate(text))


def evaluate_safely(text: str) -> EvalResult:
    """Evaluate ``text`` without raising.

    Failures are logged and returned as ``EvalResult(ok=False, value=nan)``.
    """
    try:
        value = evaluate(text)
    except CalculatorError as e:
        logger.debug(f"Evaluation failed: {e.code} - {e.message}")
        return EvalResult.failure(e)
    except Exception as e:
        logger.exception("Unexpected evaluation error")
        return EvalResult.failure(CalculatorError(f"Evaluation failed: {e}", "EVAL_ERROR"))
    return EvalResult(ok=True, value=value)


def clear_cache() -> None:
    """Clear the evaluation cache."""
    _evaluate_cached.cache_clear()
