from __future__ import annotations

import logging
import re
from decimal import ROUND_HALF_EVEN, Context, localcontext

from babel import Locale
from babel.numbers import NumberPattern, format_currency, get_currency_precision, parse_pattern

from suite_currency.errors import CurrencyFormattingError, CurrencyResolutionError
from suite_currency.platform.locale.currency_locale import CurrencyLocale, as_currency_locale
from suite_currency.platform.locale.formatting_style import FormattingStyle
from suite_currency.utils.numeric_tools import DecimalLike, as_decimal

logger = logging.getLogger(__name__)

CURRENCY_SIGN = "¤"
NO_BREAK_SPACE = "\u00a0"

# Private-use character that holds the place of an explicit symbol while a pattern is applied
SYMBOL_PLACEHOLDER = "\ue000"

# Lowest precision of the private decimal context used while rendering
MIN_RENDER_PRECISION = 28
_RENDER_PRECISION_HEADROOM = 6

_LONE_CURRENCY_SIGN_RE = re.compile(f"(?<!{CURRENCY_SIGN}){CURRENCY_SIGN}(?!{CURRENCY_SIGN})")
_DIGIT_PATTERN_CHARS = frozenset("#0123456789@")


class NumberFormatter:
    """Renders decimal amounts for one style, locale and currency.

    A formatter is immutable. Every call to `string_from` parses the locale's pattern
    afresh, so one formatter may be used from many threads, and locale data shared
    through Babel is never modified.

    Args:
        style: How to render the amount.
        locale: Locale whose conventions apply.
        currency_code: Currency to render. Defaults to the currency of $locale.
        currency_symbol: Symbol that replaces the locale's own symbol for $currency_code.
            None means the locale's symbol (or the code, if the locale has none).
        maximum_fraction_digits: Fraction digits to round to. Defaults to the currency's
            minor unit for currency styles and to the pattern's maximum otherwise.
    """

    __slots__ = ("_style", "_locale", "_currency_code", "_currency_symbol", "_maximum_fraction_digits")

    def __init__(
        self,
        style: FormattingStyle,
        locale: CurrencyLocale | Locale | str,
        currency_code: str | None = None,
        currency_symbol: str | None = None,
        maximum_fraction_digits: int | None = None,
    ) -> None:
        # Raise: style must be a FormattingStyle
        if not isinstance(style, FormattingStyle):
            raise TypeError(f"$style must be a FormattingStyle, but provided value is: {style!r}")

        # Raise: maximum_fraction_digits must be a non-negative integer when provided
        if maximum_fraction_digits is not None:
            if isinstance(maximum_fraction_digits, bool) or not isinstance(maximum_fraction_digits, int) or maximum_fraction_digits < 0:
                raise ValueError(f"$maximum_fraction_digits must be a non-negative integer, but provided value is: {maximum_fraction_digits!r}")

        self._style = style
        self._locale = as_currency_locale(locale)
        self._currency_code = currency_code.upper() if currency_code else self._locale.currency_code
        self._currency_symbol = currency_symbol

        # Raise: currency styles cannot render without a currency
        if style.is_currency and self._currency_code is None:
            raise CurrencyResolutionError(
                reason=f"style {style.name} needs a currency code, but the locale has none",
                locale_identifier=self._locale.identifier,
            )

        if maximum_fraction_digits is None:
            maximum_fraction_digits = self._default_maximum_fraction_digits()
        self._maximum_fraction_digits = maximum_fraction_digits

    # region Properties

    @property
    def style(self) -> FormattingStyle:
        return self._style

    @property
    def locale(self) -> CurrencyLocale:
        return self._locale

    @property
    def currency_code(self) -> str | None:
        return self._currency_code

    @property
    def currency_symbol(self) -> str | None:
        """The explicit symbol, or None when the locale's symbol is used."""
        return self._currency_symbol

    @property
    def maximum_fraction_digits(self) -> int:
        return self._maximum_fraction_digits

    @property
    def minimum_fraction_digits(self) -> int:
        """Currency styles always show all fraction digits; other styles follow the pattern."""
        if self._style.is_currency:
            return self._maximum_fraction_digits
        pattern_minimum = parse_pattern(self._base_pattern()).frac_prec[0]
        return min(pattern_minimum, self._maximum_fraction_digits)

    # endregion

    # region Patterns

    def _default_maximum_fraction_digits(self) -> int:
        if self._style.is_currency:
            return get_currency_precision(self._currency_code)
        return parse_pattern(self._base_pattern()).frac_prec[1]

    def _base_pattern(self) -> str:
        """Return the locale's pattern string for the current style."""
        locale = self._locale.locale

        if self._style in (FormattingStyle.DECIMAL, FormattingStyle.CURRENCY_PLURAL):
            return locale.decimal_formats[None].pattern
        if self._style is FormattingStyle.PERCENT:
            return locale.percent_formats[None].pattern
        if self._style is FormattingStyle.SCIENTIFIC:
            return locale.scientific_formats[None].pattern

        standard = locale.currency_formats["standard"]
        if self._style is FormattingStyle.CURRENCY_ACCOUNTING:
            return locale.currency_formats.get("accounting", standard).pattern
        return standard.pattern

    def _create_pattern(self) -> NumberPattern:
        pattern = self._base_pattern()

        if self._style is FormattingStyle.CURRENCY_ISO_CODE:
            pattern = _with_iso_code_sign(pattern)
        elif self._style.is_currency and self._currency_symbol is not None:
            # The symbol is display text, never pattern syntax; it is put in after rendering
            pattern = _LONE_CURRENCY_SIGN_RE.sub(SYMBOL_PLACEHOLDER, pattern)

        # Parse from the string so that the pattern objects cached in locale data stay untouched
        number_pattern = parse_pattern(pattern)
        number_pattern.frac_prec = (self.minimum_fraction_digits, self._maximum_fraction_digits)
        return number_pattern

    # endregion

    # region Main

    def string_from(self, amount: DecimalLike) -> str:
        """Render $amount.

        The amount is rounded half-to-even to `maximum_fraction_digits` inside a private
        decimal context, so the caller's context is neither used nor changed.

        Args:
            amount: Decimal-like amount to render.

        Returns:
            The rendered string.

        Raises:
            TypeError: If $amount is not decimal-like.
            CurrencyFormattingError: If $amount is not finite or cannot be rendered.
        """
        value = as_decimal(amount)

        # Raise: NaN and infinities have no monetary rendering
        if not value.is_finite():
            raise CurrencyFormattingError(amount, self._currency_code, self._locale.identifier, reason="amount is not finite")

        integer_digits = max(value.adjusted() + 1, 1)
        significant_digits = max(integer_digits, len(value.as_tuple().digits))
        precision = max(MIN_RENDER_PRECISION, significant_digits + self._maximum_fraction_digits + _RENDER_PRECISION_HEADROOM)
        context = Context(prec=precision, rounding=ROUND_HALF_EVEN)

        try:
            with localcontext(context):
                pattern = self._create_pattern()
                if self._style is FormattingStyle.CURRENCY_PLURAL:
                    return format_currency(
                        value,
                        self._currency_code,
                        format=pattern,
                        locale=self._locale.locale,
                        currency_digits=False,
                        format_type="name",
                    )
                rendered = pattern.apply(value, self._locale.locale, currency=self._currency_code, currency_digits=False)
        except (ArithmeticError, LookupError, ValueError) as e:
            logger.error(f"Formatter failed for $amount ({amount}), $currency_code ('{self._currency_code}'), $locale ('{self._locale.identifier}'): {e}")
            raise CurrencyFormattingError(amount, self._currency_code, self._locale.identifier, reason=str(e)) from e

        if self._currency_symbol is not None:
            rendered = rendered.replace(SYMBOL_PLACEHOLDER, self._currency_symbol)
        return rendered

    # endregion

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._style.name}, '{self._locale.identifier}', {self._currency_code!r}, {self._currency_symbol!r}, {self._maximum_fraction_digits})"


def _with_iso_code_sign(pattern: str) -> str:
    """Replace each lone currency sign with the ISO code sign, spaced from adjacent digits."""

    def replace(match: re.Match) -> str:
        start, end = match.span()
        before = pattern[start - 1] if start > 0 else ""
        after = pattern[end] if end < len(pattern) else ""

        text = CURRENCY_SIGN * 2
        if after in _DIGIT_PATTERN_CHARS:
            text = text + NO_BREAK_SPACE
        if before in _DIGIT_PATTERN_CHARS:
            text = NO_BREAK_SPACE + text
        return text

    return _LONE_CURRENCY_SIGN_RE.sub(replace, pattern)
