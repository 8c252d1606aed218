"""Centralized configuration for Kalkulator Saku.

This module defines:
- Display limits (digit count, fraction digits)
- Evaluator limits and cache sizes
- Operator glyphs and their evaluable tokens
- Locale symbol tables used by the number formatter

Configuration can be overridden via environment variables
(prefixed with KALKULATOR_SAKU_).
"""

import os

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("kalkulator-saku")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Display limits
MAXIMUM_DIGITS = int(os.getenv("KALKULATOR_SAKU_MAXIMUM_DIGITS", "15"))
MAXIMUM_FRACTION_DIGITS = int(
    os.getenv("KALKULATOR_SAKU_MAXIMUM_FRACTION_DIGITS", "6")
)
DEFAULT_LOCALE = os.getenv("KALKULATOR_SAKU_LOCALE", "en_US")

# Evaluator limits
MAX_INPUT_LENGTH = int(
    os.getenv("KALKULATOR_SAKU_MAX_INPUT_LENGTH", "1000")
)  # characters
CACHE_SIZE_EVAL = int(os.getenv("KALKULATOR_SAKU_CACHE_SIZE_EVAL", "512"))

LOG_LEVEL = os.getenv("KALKULATOR_SAKU_LOG_LEVEL", "WARNING")

# Operators as shown on the keypad
ADD = "+"
SUBTRACT = "-"
MULTIPLY = "×"
DIVIDE = "÷"

OPERATORS = (ADD, SUBTRACT, MULTIPLY, DIVIDE)
ADDITIVE_OPERATORS = (ADD, SUBTRACT)

OPERATOR_TOKENS = {
    ADD: "+",
    SUBTRACT: "-",
    MULTIPLY: "*",
    DIVIDE: "/",
}

OPERATOR_ALIASES = {
    "*": MULTIPLY,
    "/": DIVIDE,
    "x": MULTIPLY,
}

# Locale symbol tables: zero digit, decimal separator, grouping separator,
# minus sign, percent, NaN and Infinity tokens
LOCALE_SYMBOLS = {
    "en_US": {
        "zero_digit": "0",
        "decimal_sep": ".",
        "group_sep": ",",
        "minus_sign": "-",
        "percent": "%",
        "nan": "NaN",
        "infinity": "∞",
    },
    "de_DE": {
        "zero_digit": "0",
        "decimal_sep": ",",
        "group_sep": ".",
        "minus_sign": "-",
        "percent": "%",
        "nan": "NaN",
        "infinity": "∞",
    },
    "fr_FR": {
        "zero_digit": "0",
        "decimal_sep": ",",
        "group_sep": " ",
        "minus_sign": "-",
        "percent": " %",
        "nan": "NaN",
        "infinity": "∞",
    },
    "ar_EG": {
        "zero_digit": "٠",
        "decimal_sep": "٫",
        "group_sep": "٬",
        "minus_sign": "؜-",
        "percent": "٪؜",
        "nan": "ليس رقمًا",
        "infinity": "∞",
    },
}
