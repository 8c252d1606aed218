"""Locale-aware number formatting and parsing.

NumberFormat renders a float with grouping separators and at most
``maximum_fraction_digits`` fraction digits, and parses such strings back.
All glyphs come from the LocaleSymbols it is constructed with.
"""

from __future__ import annotations

import math
import re

from .config import DEFAULT_LOCALE, MAXIMUM_FRACTION_DIGITS
from .types import LocaleSymbols, ParseError

_NUMBER_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")


class NumberFormat:
    """Formatter/parser bound to one locale symbol set."""

    def __init__(
        self,
        symbols: LocaleSymbols | None = None,
        maximum_fraction_digits: int = MAXIMUM_FRACTION_DIGITS,
    ):
        self.symbols = symbols or LocaleSymbols.for_locale(DEFAULT_LOCALE)
        self.maximum_fraction_digits = maximum_fraction_digits

        zero = ord(self.symbols.zero_digit)
        self._to_local = {ord(str(i)): chr(zero + i) for i in range(10)}
        self._to_local[ord(",")] = self.symbols.group_sep
        self._to_local[ord(".")] = self.symbols.decimal_sep
        self._to_ascii = {zero + i: str(i) for i in range(10)}

    def format(self, value: float) -> str:
        """Render ``value`` using the locale symbols.

        Args:
            value: Number to render (ints are accepted, e.g. a single digit)

        Returns:
            Formatted string, the NaN token, or a (signed) Infinity token
        """
        value = float(value)
        if math.isnan(value):
            return self.symbols.nan
        if math.isinf(value):
            sign = self.symbols.minus_sign if value < 0 else ""
            return sign + self.symbols.infinity

        body = f"{abs(value):,.{self.maximum_fraction_digits}f}"
        if "." in body:
            body = body.rstrip("0").rstrip(".")
        # A value that rounds to zero is shown unsigned
        negative = value < 0 and any(ch in "123456789" for ch in body)
        body = body.translate(self._to_local)
        return self.symbols.minus_sign + body if negative else body

    def parse(self, text: str) -> float:
        """Parse a string produced by ``format`` or typed on the keypad.

        A trailing decimal separator is allowed ("12." parses as 12.0).

        Raises:
            ParseError: If the text is not a number in this locale
        """
        symbols = self.symbols
        if text == symbols.nan:
            return math.nan

        body = text
        negative = False
        if symbols.minus_sign and body.startswith(symbols.minus_sign):
            negative = True
            body = body[len(symbols.minus_sign):]
        elif body.startswith("-"):
            negative = True
            body = body[1:]

        if body == symbols.infinity:
            value = math.inf
        else:
            if symbols.group_sep:
                body = body.replace(symbols.group_sep, "")
            normalized = body.replace(symbols.decimal_sep, ".").translate(self._to_ascii)
            if not _NUMBER_RE.fullmatch(normalized):
                raise ParseError(f"Cannot parse number: {text!r}", "INVALID_NUMBER")
            value = float(normalized)
        return -value if negative else value

    def count_digits(self, text: str) -> int:
        """Count characters of ``text`` other than grouping and decimal separators."""
        if self.symbols.group_sep:
            text = text.replace(self.symbols.group_sep, "")
        return len(text.replace(self.symbols.decimal_sep, ""))
