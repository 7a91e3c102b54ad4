"""Currency types, their metadata and the rounding policy for monetary arithmetic."""

from suite_currency.domain.monetary.currency_metadata import CurrencyMetadata
from suite_currency.domain.monetary.currency_type import CryptoCurrencyType, CurrencyType, CustomCurrencyType, ISOCurrencyType
from suite_currency.domain.monetary.formatter_factory import FormattingFunction, make_formatting_function
from suite_currency.domain.monetary.iso_currency import ISOCurrency
from suite_currency.domain.monetary.local_currency import LocalCurrency
from suite_currency.domain.monetary.rounding_policy import RoundingPolicy, build_rounding_policy

__all__ = [
    "CurrencyType",
    "CustomCurrencyType",
    "CryptoCurrencyType",
    "ISOCurrencyType",
    "ISOCurrency",
    "LocalCurrency",
    "CurrencyMetadata",
    "RoundingPolicy",
    "build_rounding_policy",
    "FormattingFunction",
    "make_formatting_function",
]
