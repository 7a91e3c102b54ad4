"""Locale services backed by Babel and CLDR data.

Canonical locale identifiers, resolved locale objects, the device's current locale,
and number formatters.
"""

from suite_currency.platform.locale.currency_locale import (
    CurrencyLocale,
    as_currency_locale,
    canonical_locale_identifier,
    pin_currency_code,
    resolve_locale,
)
from suite_currency.platform.locale.device_locale import current_locale, current_locale_identifier
from suite_currency.platform.locale.formatting_style import FormattingStyle
from suite_currency.platform.locale.number_formatter import NumberFormatter

__all__ = [
    "CurrencyLocale",
    "FormattingStyle",
    "NumberFormatter",
    "as_currency_locale",
    "canonical_locale_identifier",
    "current_locale",
    "current_locale_identifier",
    "pin_currency_code",
    "resolve_locale",
]
