"""Calculator state machine.

Sequences keypad actions against one Expression and two display buffers:
``input`` (what is being typed, or the last result) and ``result`` (the live
preview shown as "= ..." while typing).
"""

from __future__ import annotations

from .config import ADDITIVE_OPERATORS, MAXIMUM_DIGITS, MAXIMUM_FRACTION_DIGITS
from .display import DisplayValue
from .expression import Expression
from .formatter import NumberFormat
from .logging_config import get_logger, log_transition
from .state import CalcState, Event, transition
from .types import CalcSnapshot, LocaleSymbols

logger = get_logger("calculator")


class Calculator:
    """Four-function pocket calculator with percent, sign toggle and repeat-equals.

    Example:
        >>> calc = Calculator()
        >>> calc.add_digit(5)
        >>> calc.set_operator("+")
        >>> calc.add_digit(3)
        >>> calc.operate()
        >>> calc.input_string
        '8'
        >>> calc.operate()
        >>> calc.input_string
        '11'
    """

    def __init__(
        self,
        maximum_digits: int = MAXIMUM_DIGITS,
        number_format: NumberFormat | None = None,
    ):
        self.number_format = number_format or NumberFormat()
        self.maximum_digits = maximum_digits
        self._expression = Expression(self.number_format.symbols)
        self._input = DisplayValue(self.number_format, maximum_digits)
        self._display = DisplayValue(self.number_format, maximum_digits)
        self._state = CalcState.ENTERING
        self._expression.set_val(self._input)

    @classmethod
    def for_locale(
        cls,
        locale: str,
        maximum_digits: int = MAXIMUM_DIGITS,
        maximum_fraction_digits: int = MAXIMUM_FRACTION_DIGITS,
    ) -> Calculator:
        """Create a calculator formatting numbers for ``locale`` (e.g. "de_DE")."""
        number_format = NumberFormat(
            LocaleSymbols.for_locale(locale), maximum_fraction_digits
        )
        return cls(maximum_digits, number_format)

    @property
    def input_string(self) -> str:
        return self._input.text

    @property
    def input_value(self) -> float:
        return self._input.value

    @property
    def expression(self) -> str:
        """Expression text; empty while it is only a lone zero."""
        if self._trivial_expression():
            return ""
        return self._expression.display_text

    @property
    def display_string(self) -> str:
        """Return "= <result>" while a nonzero result exists for a non-trivial expression."""
        if self._trivial_expression():
            return ""
        return "" if self._display.value == 0 else f"= {self._display.text}"

    @property
    def display_value(self) -> float:
        return self._display.value

    @property
    def state(self) -> CalcState:
        return self._state

    @property
    def operated(self) -> bool:
        """True after "=" until the next digit, point or operator."""
        return self._state is CalcState.COMMITTED

    def snapshot(self) -> CalcSnapshot:
        return CalcSnapshot(
            input_string=self.input_string,
            input_value=self.input_value,
            expression=self.expression,
            display_string=self.display_string,
            display_value=self.display_value,
            state=self._state.value,
        )

    def set_value(self, value: float) -> None:
        """Put ``value`` into the input buffer as if it had been typed."""
        self._input.set_value(value)
        self._expression.set_val(self._input)
        self._advance(Event.CLEAR_ENTRY)

    def add_digit(self, digit: int) -> None:
        if self._blocked("add_digit"):
            return
        if self._expression.need_clear_display():
            self._input.clear()
        if self.operated:
            self.all_clear()
        self._input.add_digit(digit)
        self._expression.set_val(self._input)

        self._display.set_value(self._expression.operate())
        self._advance(Event.DIGIT)

    def add_point(self) -> None:
        if self._blocked("add_point"):
            return
        if self._expression.need_clear_display():
            self._input.clear()
        if self.operated:
            self.all_clear()
        self._input.add_point()
        self._expression.set_val(self._input)
        self._advance(Event.DIGIT)

    def all_clear(self) -> None:
        """Clear all entries."""
        self._expression.clear()
        self._input.clear()
        self._display.clear()
        self._expression.set_val(self._input)
        self._advance(Event.ALL_CLEAR)

    def clear(self) -> None:
        """Clear the current entry, keeping the left operand and operator."""
        self._input.clear()
        self._display.clear()
        self._expression.set_val(self._input)
        self._advance(Event.CLEAR_ENTRY)

    def operate(self, commit: bool = False) -> None:
        """Press "=".

        A second press re-applies the last operator and operand to the result.
        With ``commit`` the calculation ends: the expression restarts from the
        result and the preview is cleared.
        """
        if self._blocked("operate"):
            return
        if self.operated:
            self._expression.repeat(self._input)
        else:
            self._input.set_value(self._expression.operate())
            if commit:
                self._expression.clear()
                self._expression.set_val(self._input)
                self._display.clear()
        self._advance(Event.COMMIT if commit else Event.OPERATE)

    def remove_digit(self) -> None:
        if self._check():
            return
        self._input.remove_digit()
        self._expression.set_val(self._input)
        self._advance(Event.EDIT)

    def set_operator(self, op: str) -> None:
        """Set the operation. ``op`` must be one of +, -, × or ÷.

        Additive operators show the running subtotal immediately.
        """
        if self._check():
            return
        self._expression.set_operator(op)
        if self._expression.operator in ADDITIVE_OPERATORS:
            self._input.set_value(self._expression.operate())
        self._advance(Event.OPERATOR)

    def set_percent(self) -> None:
        if self._check():
            return
        text = self._input.text + self.number_format.symbols.percent
        value = self._expression.set_percent(text, self._input.value)
        self._input.set_value(value)
        self._advance(Event.EDIT)

    def toggle_sign(self) -> None:
        if self._check():
            return
        self._input.toggle_sign()
        self._expression.set_val(self._input)
        self._advance(Event.EDIT)

    def _trivial_expression(self) -> bool:
        text = self._expression.display_text
        return not text or text == self.number_format.symbols.zero_digit

    def _advance(self, event: Event) -> None:
        before, self._state = self._state, transition(self._state, event)
        log_transition(logger, event.value, before, self._state)

    def _blocked(self, action: str) -> bool:
        if self._input.valid_value():
            return False
        logger.debug(f"Ignoring {action}: input holds {self._input.text!r}")
        return True

    def _check(self) -> bool:
        """Return True if the caller must abort.

        After "=" the expression restarts around the current input so the
        edit applies to the previous result.
        """
        if self._blocked("edit"):
            return True
        if self.operated:
            self._expression.clear()
            self._expression.set_val(self._input)
            self._state = self._expression.stage
        return False
