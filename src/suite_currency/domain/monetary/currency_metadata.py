"""Resolution of a currency's (code, scale, symbol) triple."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from babel import Locale
from babel.numbers import is_currency

from suite_currency.errors import CurrencyResolutionError
from suite_currency.platform.locale.currency_locale import CurrencyLocale, as_currency_locale, canonical_locale_identifier, pin_currency_code, resolve_locale
from suite_currency.platform.locale.formatting_style import FormattingStyle
from suite_currency.platform.locale.number_formatter import NumberFormatter

logger = logging.getLogger(__name__)


def _infer_scale(currency_locale: CurrencyLocale, code: str) -> int:
    formatter = NumberFormatter(FormattingStyle.CURRENCY, currency_locale, currency_code=code)
    return formatter.maximum_fraction_digits


@dataclass(frozen=True)
class CurrencyMetadata:
    """Immutable (code, scale, symbol) triple of one currency.

    Attributes:
        code: Currency code, e.g. "USD".
        scale: Fractional digits of the currency's minor unit.
        symbol: Display symbol, or None when no symbol exists.
    """

    code: str
    scale: int
    symbol: str | None = None

    def __post_init__(self) -> None:
        # Raise: code must be a non-empty string
        if not isinstance(self.code, str) or not self.code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{self.code}'")

        # Raise: scale must be a non-negative integer
        if isinstance(self.scale, bool) or not isinstance(self.scale, int) or self.scale < 0:
            raise ValueError(f"$scale must be a non-negative integer, but provided value is: {self.scale!r}")

        # Raise: symbol must be a string when provided
        if self.symbol is not None and not isinstance(self.symbol, str):
            raise TypeError(f"$symbol must be a string or None, but provided value is: {self.symbol!r}")

    @classmethod
    def from_code(cls, code: str) -> CurrencyMetadata:
        """Resolve metadata for the currency with $code.

        The locale `root@currency=<code>` supplies the symbol, and the currency's minor
        unit becomes the scale. A missing symbol is not an error.

        Args:
            code: ISO 4217 currency code, case-insensitive.

        Returns:
            CurrencyMetadata: The resolved triple.

        Raises:
            CurrencyResolutionError: If no locale data knows $code.
        """
        # Raise: code must be a non-empty string
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        code = code.strip().upper()
        identifier = canonical_locale_identifier(pin_currency_code("", code))

        if not is_currency(code):
            logger.error(f"Currency $code ('{code}') is unknown to the locale data")
            raise CurrencyResolutionError(reason="unknown currency code", code=code, locale_identifier=identifier)

        currency_locale = resolve_locale(identifier)
        metadata = cls(code=code, scale=_infer_scale(currency_locale, code), symbol=currency_locale.currency_symbol)
        logger.debug(f"Resolved {metadata!r} from $code ('{code}')")
        return metadata

    @classmethod
    def from_locale(cls, locale: CurrencyLocale | Locale | str) -> CurrencyMetadata:
        """Resolve metadata for the currency of $locale.

        A `currency` keyword on $locale wins over the locale's native currency.

        Args:
            locale: Resolved locale or locale identifier.

        Returns:
            CurrencyMetadata: The resolved triple.

        Raises:
            CurrencyResolutionError: If $locale has no currency.
        """
        currency_locale = as_currency_locale(locale)
        code = currency_locale.currency_code

        if code is None:
            logger.error(f"Locale '{currency_locale.identifier}' has no currency")
            raise CurrencyResolutionError(reason="locale has no currency", locale_identifier=currency_locale.identifier)

        metadata = cls(code=code, scale=_infer_scale(currency_locale, code), symbol=currency_locale.currency_symbol)
        logger.debug(f"Resolved {metadata!r} from locale '{currency_locale.identifier}'")
        return metadata

    def __str__(self) -> str:
        return self.code
