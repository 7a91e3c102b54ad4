from __future__ import annotations

from typing import Callable, TypeAlias

from babel import Locale

from suite_currency.platform.locale.currency_locale import CurrencyLocale, as_currency_locale, canonical_locale_identifier, pin_currency_code, resolve_locale
from suite_currency.platform.locale.formatting_style import FormattingStyle
from suite_currency.platform.locale.number_formatter import NumberFormatter
from suite_currency.utils.numeric_tools import DecimalLike

FormattingFunction: TypeAlias = Callable[[DecimalLike], str]


def make_formatting_function(
    code: str,
    scale: int,
    symbol: str | None,
    style: FormattingStyle,
    locale: CurrencyLocale | Locale | str,
) -> FormattingFunction:
    """Build a function that renders amounts of one currency in one locale.

    $code is pinned onto the locale (`<locale>@currency=<code>`), so the symbol and
    display rules follow $code instead of the locale's own currency. Each call of the
    returned function constructs its own `NumberFormatter`; no formatter is shared
    between calls or threads.

    Args:
        code: Currency code.
        scale: Fractional digits amounts are rounded (half-to-even) to.
        symbol: Symbol to show. None means the locale's symbol for $code.
        style: Formatting style.
        locale: Locale whose conventions apply.

    Returns:
        FormattingFunction: Maps a decimal-like amount to its display string.

    Raises:
        UnknownLocaleIdentifierError: If the pinned locale cannot be resolved.
    """
    # Raise: scale must be a non-negative integer
    if isinstance(scale, bool) or not isinstance(scale, int) or scale < 0:
        raise ValueError(f"$scale must be a non-negative integer, but provided value is: {scale!r}")

    base_locale = as_currency_locale(locale)
    canonical = canonical_locale_identifier(pin_currency_code(base_locale.identifier, code))
    currency_locale = resolve_locale(canonical)
    currency_symbol = symbol if symbol is not None else currency_locale.currency_symbol

    def format_amount(amount: DecimalLike) -> str:
        formatter = NumberFormatter(
            style=style,
            locale=currency_locale,
            currency_code=code,
            currency_symbol=currency_symbol,
            maximum_fraction_digits=scale,
        )
        return formatter.string_from(amount)

    return format_amount
