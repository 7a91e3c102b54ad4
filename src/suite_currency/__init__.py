__version__ = "0.0.1"

from suite_currency.domain.monetary.currency_type import CryptoCurrencyType, CurrencyType, CustomCurrencyType, ISOCurrencyType
from suite_currency.domain.monetary.iso_currency import ISOCurrency
from suite_currency.domain.monetary.local_currency import LocalCurrency
from suite_currency.platform.locale.formatting_style import FormattingStyle

__all__ = [
    "CurrencyType",
    "CustomCurrencyType",
    "CryptoCurrencyType",
    "ISOCurrencyType",
    "ISOCurrency",
    "LocalCurrency",
    "FormattingStyle",
]
