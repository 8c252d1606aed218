"""Locale symbols, evaluation results, calculator snapshots and the coded errors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from .config import LOCALE_SYMBOLS


@dataclass(frozen=True)
class LocaleSymbols:
    """Locale symbol set consumed by the number formatter and the expression."""

    zero_digit: str = "0"
    decimal_sep: str = "."
    group_sep: str = ","
    minus_sign: str = "-"
    percent: str = "%"
    nan: str = "NaN"
    infinity: str = "∞"

    @classmethod
    def for_locale(cls, name: str) -> LocaleSymbols:
        """Build the symbol set for a locale name such as "en_US" or "de_DE".

        Raises:
            ValidationError: If the locale has no symbol table
        """
        table = LOCALE_SYMBOLS.get(name.replace("-", "_"))
        if table is None:
            raise ValidationError(f"Unknown locale: {name}", "UNKNOWN_LOCALE")
        return cls(**table)


@dataclass
class EvalResult:
    """Result of evaluating an evaluable expression string.

    ``value`` is NaN whenever ``ok`` is False.
    """

    ok: bool
    value: float = math.nan
    error: str | None = None
    error_code: str | None = None

    @classmethod
    def failure(cls, error: CalculatorError) -> EvalResult:
        return cls(ok=False, error=error.message, error_code=error.code)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-safe dictionary; NaN and infinities become strings."""
        if not self.ok:
            return {"ok": False, "error": self.error, "error_code": self.error_code}
        value: float | str = self.value
        if not math.isfinite(value):
            value = repr(value)
        return {"ok": True, "value": value}

    def __repr__(self) -> str:
        if not self.ok:
            return f"EvalResult(ok=False, error_code={self.error_code!r}, error={self.error!r})"
        return f"EvalResult(ok=True, value={self.value!r})"


@dataclass
class CalcSnapshot:
    """Read-only view of everything a calculator face shows."""

    input_string: str
    input_value: float
    expression: str
    display_string: str
    display_value: float
    state: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "input_string": self.input_string,
            "input_value": self.input_value,
            "expression": self.expression,
            "display_string": self.display_string,
            "display_value": self.display_value,
            "state": self.state,
        }


class CalculatorError(Exception):
    """Base for errors raised by the calculator core. ``code`` is a stable identifier."""

    default_code = "CALCULATOR_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ValidationError(CalculatorError):
    """Rejected input: an unknown operator, digit or locale, or an expression outside literal arithmetic."""

    default_code = "VALIDATION_ERROR"


class ParseError(CalculatorError):
    """Text that does not denote a number."""

    default_code = "PARSE_ERROR"
