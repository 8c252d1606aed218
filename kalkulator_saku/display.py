"""Display buffers: a formatted numeral and the number behind it."""

from __future__ import annotations

import math
from typing import Protocol

from .config import MAXIMUM_DIGITS
from .formatter import NumberFormat
from .logging_config import get_logger
from .types import ParseError, ValidationError

logger = get_logger("display")


class Operand(Protocol):
    """Anything exposing a formatted string and its numeric value."""

    text: str
    value: float


class MutableOperand(Operand, Protocol):
    """An operand that can also receive a computed value."""

    def set_value(self, value: float) -> None: ...


class DisplayValue:
    """One user-visible numeral.

    ``text`` is what the user sees; ``value`` is ``number_format.parse(text)``.
    ``digit_limit`` caps the characters of ``text`` other than grouping and
    decimal separators.
    """

    def __init__(self, number_format: NumberFormat, digit_limit: int = MAXIMUM_DIGITS):
        self.number_format = number_format
        self.digit_limit = digit_limit
        self.text = ""
        self.value = 0.0
        self.clear()

    def __repr__(self) -> str:
        return f"DisplayValue(text={self.text!r}, value={self.value!r})"

    @property
    def symbols(self):
        return self.number_format.symbols

    def add_digit(self, digit: int) -> None:
        """Append a digit, replacing a lone zero."""
        if not isinstance(digit, int) or not 0 <= digit <= 9:
            raise ValidationError(f"Not a digit: {digit!r}", "INVALID_DIGIT")
        if self.number_format.count_digits(self.text) >= self.digit_limit:
            return
        if self.text == self.symbols.zero_digit:
            self.text = self.number_format.format(digit)
        else:
            self.text += self.number_format.format(digit)
        self._reformat()

    def add_point(self) -> None:
        """Append a decimal separator unless one is already present."""
        if self.symbols.decimal_sep in self.text:
            return
        # Not reformatted, the trailing separator must stay visible
        self.text += self.symbols.decimal_sep

    def clear(self) -> None:
        self.text = self.symbols.zero_digit
        self.value = 0.0

    def remove_digit(self) -> None:
        """Drop the last character; a lone digit (signed or not) becomes zero."""
        minus = self.symbols.minus_sign
        if len(self.text) == 1 or (
            self.text.startswith(minus) and len(self.text) == len(minus) + 1
        ):
            self.clear()
        else:
            self.text = self.text[:-1]
            self._reformat()

    def set_value(self, value: float) -> None:
        self.value = float(value)
        self.text = self.number_format.format(self.value)

    def toggle_sign(self) -> None:
        """Flip the sign.

        Driven by the sign of ``value``, not of ``text``: a zero never gains a
        minus sign.
        """
        minus = self.symbols.minus_sign
        if self.value <= 0:
            self.text = self.text.replace(minus, "", 1)
        else:
            self.text = minus + self.text
        self._reformat()

    def valid_value(self) -> bool:
        """False when the buffer shows the NaN or an Infinity token."""
        symbols = self.symbols
        return self.text not in (
            symbols.nan,
            symbols.infinity,
            symbols.minus_sign + symbols.infinity,
        )

    def _reformat(self) -> None:
        try:
            self.value = self.number_format.parse(self.text)
        except ParseError as e:
            logger.warning(f"Display text could not be parsed: {e.message}")
            self.value = math.nan
            self.text = self.symbols.nan
            return
        if self.symbols.decimal_sep not in self.text:
            self.text = self.number_format.format(self.value)
