"""Unit tests for the locale number formatter."""

import math
import unittest

from kalkulator_saku.formatter import NumberFormat
from kalkulator_saku.types import LocaleSymbols, ParseError, ValidationError


class TestFormat(unittest.TestCase):
    """Test rendering numbers."""

    def setUp(self):
        self.fmt = NumberFormat(LocaleSymbols.for_locale("en_US"), 6)

    def test_integers(self):
        """Test integers."""
        self.assertEqual(self.fmt.format(8), "8")
        self.assertEqual(self.fmt.format(0.0), "0")
        self.assertEqual(self.fmt.format(1234567.0), "1,234,567")

    def test_fraction_digits(self):
        """Test fraction digits."""
        self.assertEqual(self.fmt.format(0.5), "0.5")
        self.assertEqual(self.fmt.format(1 / 3), "0.333333")
        self.assertEqual(self.fmt.format(2 / 3), "0.666667")
        self.assertEqual(self.fmt.format(1234.5678912), "1,234.567891")

    def test_negative(self):
        """Test negative."""
        self.assertEqual(self.fmt.format(-2.5), "-2.5")
        self.assertEqual(self.fmt.format(-1000), "-1,000")

    def test_no_negative_zero(self):
        """Test no negative zero."""
        self.assertEqual(self.fmt.format(-0.0), "0")
        self.assertEqual(self.fmt.format(-0.0000001), "0")

    def test_special_values(self):
        """Test special values."""
        self.assertEqual(self.fmt.format(math.nan), "NaN")
        self.assertEqual(self.fmt.format(math.inf), "∞")
        self.assertEqual(self.fmt.format(-math.inf), "-∞")

    def test_fewer_fraction_digits(self):
        """Test fewer fraction digits."""
        fmt = NumberFormat(LocaleSymbols(), 2)
        self.assertEqual(fmt.format(1 / 3), "0.33")


class TestParse(unittest.TestCase):
    """Test parsing formatted strings."""

    def setUp(self):
        self.fmt = NumberFormat(LocaleSymbols.for_locale("en_US"), 6)

    def test_grouped(self):
        """Test grouped."""
        self.assertEqual(self.fmt.parse("1,234"), 1234.0)
        self.assertEqual(self.fmt.parse("1,2345"), 12345.0)

    def test_trailing_decimal_separator(self):
        """Test trailing decimal separator."""
        self.assertEqual(self.fmt.parse("12."), 12.0)
        self.assertEqual(self.fmt.parse("0."), 0.0)

    def test_signed(self):
        """Test signed."""
        self.assertEqual(self.fmt.parse("-2.5"), -2.5)

    def test_special_tokens(self):
        """Test special tokens."""
        self.assertTrue(math.isnan(self.fmt.parse("NaN")))
        self.assertEqual(self.fmt.parse("∞"), math.inf)
        self.assertEqual(self.fmt.parse("-∞"), -math.inf)

    def test_invalid(self):
        """Test invalid."""
        with self.assertRaises(ParseError) as ctx:
            self.fmt.parse("12a")
        self.assertEqual(ctx.exception.code, "INVALID_NUMBER")
        with self.assertRaises(ParseError):
            self.fmt.parse("-")
        with self.assertRaises(ParseError):
            self.fmt.parse("1.2.3")

    def test_count_digits(self):
        """Test count digits."""
        self.assertEqual(self.fmt.count_digits("1,234.5"), 5)
        self.assertEqual(self.fmt.count_digits("-12"), 3)


class TestLocales(unittest.TestCase):
    """Test non-English symbol sets."""

    def test_german_separators(self):
        """Test german separators."""
        fmt = NumberFormat(LocaleSymbols.for_locale("de_DE"))
        self.assertEqual(fmt.format(1234.5), "1.234,5")
        self.assertEqual(fmt.parse("1.234,5"), 1234.5)

    def test_hyphenated_locale_name(self):
        """Test hyphenated locale name."""
        self.assertEqual(LocaleSymbols.for_locale("de-DE").decimal_sep, ",")

    def test_arabic_digits(self):
        """Test arabic digits."""
        symbols = LocaleSymbols.for_locale("ar_EG")
        fmt = NumberFormat(symbols)
        self.assertEqual(fmt.format(12), "١٢")
        self.assertEqual(fmt.parse("١٢"), 12.0)
        self.assertEqual(fmt.format(-3), symbols.minus_sign + "٣")
        self.assertEqual(fmt.parse(symbols.minus_sign + "٣"), -3.0)
        self.assertEqual(fmt.format(1.5), "١٫٥")

    def test_unknown_locale(self):
        """Test unknown locale."""
        with self.assertRaises(ValidationError) as ctx:
            LocaleSymbols.for_locale("xx_XX")
        self.assertEqual(ctx.exception.code, "UNKNOWN_LOCALE")


if __name__ == "__main__":
    unittest.main()
