"""The running "left operator right" expression of a calculation.

Each operand is kept twice: as shown on the display ("1,234") and in the
evaluable form handed to the evaluator ("1234.0"). Evaluable forms use the
canonical tokens ``+ - * /``.
"""

from __future__ import annotations

import math

from .config import ADDITIVE_OPERATORS, OPERATOR_ALIASES, OPERATOR_TOKENS, OPERATORS
from .display import MutableOperand, Operand
from .evaluator import evaluate_safely
from .logging_config import get_logger
from .state import CalcState
from .types import LocaleSymbols, ValidationError

logger = get_logger("expression")


def _internal(value: float) -> str:
    return repr(float(value))


def _evaluate(text: str) -> float:
    result = evaluate_safely(text)
    if not result.ok:
        logger.debug(f"Evaluation of {text!r} failed: {result.error}")
        return math.nan
    return result.value


class Expression:
    """Accumulates left operand, operator and right operand.

    Attributes:
        display_text: Human-readable form, e.g. "12 + 7"
        evaluable_text: Evaluable form, e.g. "12.0+7.0"
    """

    def __init__(self, symbols: LocaleSymbols | None = None):
        self.symbols = symbols or LocaleSymbols()
        self.display_text = ""
        self.evaluable_text = ""
        self._operator: str | None = None
        self._left: str | None = None
        self._left_internal: str | None = None
        self._right: str | None = None
        self._right_internal: str | None = None
        # Evaluable "A+" or "A-" still waiting for the product term that follows it
        self._left_prefix = ""

    def __repr__(self) -> str:
        return f"Expression({self.display_text!r}, evaluable={self.evaluable_text!r})"

    @property
    def operator(self) -> str | None:
        return self._operator

    @property
    def left(self) -> str | None:
        return self._left

    @property
    def left_internal(self) -> str | None:
        return self._left_internal

    @property
    def right(self) -> str | None:
        return self._right

    @property
    def right_internal(self) -> str | None:
        return self._right_internal

    @property
    def stage(self) -> CalcState:
        """Which operand slot the next entry fills."""
        if self._operator is None:
            return CalcState.ENTERING
        if self._right is None:
            return CalcState.OPERATOR_PENDING
        return CalcState.RIGHT_ENTERED

    def clear(self) -> None:
        self.display_text = ""
        self.evaluable_text = ""
        self._operator = None
        self._left = None
        self._left_internal = None
        self._right = None
        self._right_internal = None
        self._left_prefix = ""

    def need_clear_display(self) -> bool:
        """True when an operator is pending and no right operand was typed yet."""
        return self._operator is not None and self._right is None

    def operate(self) -> float:
        """Evaluate the evaluable form; failures give NaN."""
        return _evaluate(self.evaluable_text)

    def repeat(self, operand: MutableOperand) -> None:
        """Re-apply the last operator and right operand to ``operand``.

        The result is written back into ``operand``. Does nothing unless a
        right operand exists.
        """
        if self._right is None:
            return
        self._left = operand.text
        self._set_left_internal(_internal(operand.value))
        self._compose()
        operand.set_value(self.operate())

    def set_operator(self, op: str) -> None:
        """Set the pending operator, folding any complete "left op right" into left.

        Raises:
            ValidationError: If ``op`` is not one of + - × ÷
        """
        op = OPERATOR_ALIASES.get(op, op)
        if op not in OPERATORS:
            raise ValidationError(f"Unsupported operator: {op!r}", "INVALID_OPERATOR")
        if self._left is None:
            self._left = self.symbols.zero_digit
            self._set_left_internal(_internal(0))
        if self._right is not None:
            self._left = f"{self._left} {self._operator} {self._right}"
            self._fold(op)
            self._right = self._right_internal = None
        self._operator = op
        self.display_text = f"{self._left} {self._operator} "

    def set_percent(self, text: str, percent: float) -> float:
        """Store ``percent`` % as the current operand, shown as ``text``.

        With a pending + or - the percentage is taken of the left operand,
        otherwise of 1.

        Returns:
            The computed value
        """
        base = 1.0
        if self._operator in ADDITIVE_OPERATORS:
            base = _evaluate(self._left_internal)
        value = base * percent / 100
        if self._operator is None:
            self._left = self.display_text = text
            self._set_left_internal(_internal(value))
            self.evaluable_text = self._left_internal
        else:
            self._right = text
            self._right_internal = _internal(value)
            self._compose()
        return value

    def set_val(self, operand: Operand) -> None:
        """Take ``operand`` as the left operand, or as the right one if an operator is pending."""
        if self._operator is None:
            self._left = self.display_text = operand.text
            self._set_left_internal(_internal(operand.value))
            self.evaluable_text = self._left_internal
        else:
            self._right = operand.text
            self._right_internal = _internal(operand.value)
            self._compose()

    def _set_left_internal(self, text: str) -> None:
        self._left_internal = text
        self._left_prefix = ""

    def _fold(self, op: str) -> None:
        """Fold "left op right" into the evaluable left operand before ``op`` is appended.

        The evaluable left operand stays at most "A+B" (or "A-B"), with B the
        running product term, so precedence holds and the text stays short
        however long the chain grows.
        """
        token = self._token()
        if op in ADDITIVE_OPERATORS:
            self._set_left_internal(
                _internal(_evaluate(f"{self._left_internal}{token}{self._right_internal}"))
            )
        elif self._operator in ADDITIVE_OPERATORS:
            # Left is a plain sum; the right operand starts a product term
            self._left_prefix = f"{self._left_internal}{token}"
            self._left_internal = self._left_prefix + self._right_internal
        else:
            term = self._left_internal[len(self._left_prefix):]
            product = _evaluate(f"{term}{token}{self._right_internal}")
            self._left_internal = self._left_prefix + _internal(product)

    def _compose(self) -> None:
        self.display_text = f"{self._left} {self._operator} {self._right}"
        self.evaluable_text = f"{self._left_internal}{self._token()}{self._right_internal}"

    def _token(self) -> str:
        return OPERATOR_TOKENS[self._operator]
