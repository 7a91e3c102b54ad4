from decimal import Decimal

import pytest
from babel import Locale

from suite_currency.config import DEVICE_LOCALE_ENV_VAR
from suite_currency.domain.monetary.currency_metadata import CurrencyMetadata
from suite_currency.domain.monetary.currency_registry import BTC, ETH, EUR, JPY, USD, USDT
from suite_currency.domain.monetary.currency_type import CryptoCurrencyType, CurrencyType, CustomCurrencyType, ISOCurrencyType
from suite_currency.domain.monetary.iso_currency import ISOCurrency
from suite_currency.errors import UnknownLocaleIdentifierError
from suite_currency.platform.locale.formatting_style import FormattingStyle
from suite_currency.utils.shared_instance import has_shared_instance


class GoldGram(CustomCurrencyType):
    """Application-defined unit without a symbol."""

    code = "XAUG"
    scale = 3
    symbol = None


class Unfinished(CurrencyType):
    code = "UNF"
    scale = 2
    symbol = None


# region Hierarchy


def test_hierarchy_is_nominal():
    assert issubclass(BTC, CryptoCurrencyType)
    assert issubclass(BTC, CustomCurrencyType)
    assert issubclass(GoldGram, CustomCurrencyType)
    assert not issubclass(GoldGram, CryptoCurrencyType)
    assert issubclass(USD, ISOCurrencyType)
    assert not issubclass(USD, CustomCurrencyType)


def test_base_interface_has_no_locale_identifier_entry_point():
    with pytest.raises(NotImplementedError):
        Unfinished.formatted_for_locale_id(FormattingStyle.CURRENCY, "en_US")


def test_base_interface_formats_for_resolved_locale():
    format_amount = Unfinished.formatted_for_locale(FormattingStyle.CURRENCY_ISO_CODE, Locale("en", "US"))
    assert format_amount(1) == "UNF\u00a01.00"


# endregion

# region Defaults


def test_default_formatting_style_is_currency():
    assert BTC.default_formatting_style is FormattingStyle.CURRENCY
    assert USD.default_formatting_style is FormattingStyle.CURRENCY


def test_decimal_number_behaviors_follow_scale():
    assert BTC.decimal_number_behaviors().scale == 8
    assert ETH.decimal_number_behaviors().quantum == Decimal("1E-18")
    assert JPY.decimal_number_behaviors().scale == 0


# endregion

# region Custom and crypto currencies


def test_crypto_currency_formats_for_locale_identifier():
    assert BTC.formatted_for_locale_id(FormattingStyle.CURRENCY, "en_US")(Decimal("1.23456789")) == "₿1.23456789"
    assert ETH.formatted_for_locale_id(FormattingStyle.CURRENCY, "en-us")(Decimal("1.5")) == "Ξ1.500000000000000000"


def test_custom_currency_without_symbol_shows_its_code():
    assert USDT.formatted_for_locale_id(FormattingStyle.CURRENCY, "en_US")(Decimal("1.5")) == "USDT1.500000"
    assert GoldGram.formatted_for_locale_id(FormattingStyle.DECIMAL, "en_US")(Decimal("1234.56789")) == "1,234.568"


def test_custom_currency_honors_requested_locale():
    assert BTC.formatted_for_locale_id(FormattingStyle.CURRENCY, "de_DE")(Decimal("1234.5")) == "1.234,50000000\u00a0₿"


def test_custom_currency_rejects_unknown_locale():
    with pytest.raises(UnknownLocaleIdentifierError):
        BTC.formatted_for_locale_id(FormattingStyle.CURRENCY, "xx_XX")


def test_formatted_dispatches_on_locale_kind(monkeypatch):
    monkeypatch.setenv(DEVICE_LOCALE_ENV_VAR, "en_US")

    assert BTC.formatted()(Decimal("1")) == "₿1.00000000"
    assert BTC.formatted(locale="de_DE")(Decimal("1")) == "1,00000000\u00a0₿"
    assert BTC.formatted(FormattingStyle.CURRENCY_ISO_CODE, Locale("en", "US"))(Decimal("1")) == "BTC\u00a01.00000000"


# endregion

# region ISO currencies


def test_iso_metadata_is_resolved_lazily_and_once():
    class NOK(ISOCurrency):
        iso_code = "NOK"

    assert not has_shared_instance(NOK)

    assert NOK.code == "NOK"
    assert NOK.scale == 2
    assert has_shared_instance(NOK)
    assert NOK.shared_instance() is NOK.shared_instance()
    assert NOK.shared_instance().metadata == CurrencyMetadata.from_code("NOK")


def test_iso_class_attributes_forward_to_shared_instance():
    instance = JPY.shared_instance()

    assert JPY.code == instance.currency_code == "JPY"
    assert JPY.scale == instance.currency_scale == 0
    assert JPY.symbol == instance.currency_symbol
    assert instance.code == "JPY"


def test_iso_currency_without_code_cannot_create_instance():
    class Nameless(ISOCurrency):
        pass

    with pytest.raises(NotImplementedError):
        Nameless.shared_instance()


def test_iso_currency_requires_metadata():
    with pytest.raises(TypeError):
        USD("USD")


def test_iso_locale_identifier_follows_device_locale(monkeypatch):
    monkeypatch.setenv(DEVICE_LOCALE_ENV_VAR, "de_DE")

    # Only the code is pinned; the requested identifier is ignored while the device locale is known
    format_amount = EUR.formatted_for_locale_id(FormattingStyle.CURRENCY, "en_US")
    assert format_amount(Decimal("1234.5")) == "1.234,50\u00a0€"

    assert EUR.formatted(locale="en_US")(Decimal("1234.5")) == "1.234,50\u00a0€"


def test_iso_locale_identifier_is_fallback_without_device_locale():
    format_amount = EUR.formatted_for_locale_id(FormattingStyle.CURRENCY, "en_US")
    assert format_amount(Decimal("1234.5")) == "€1,234.50"


def test_iso_resolved_locale_is_honored(monkeypatch):
    monkeypatch.setenv(DEVICE_LOCALE_ENV_VAR, "de_DE")

    assert EUR.formatted(locale=Locale("en", "US"))(Decimal("1234.5")) == "€1,234.50"
    assert EUR.formatted_for_requested_locale_id(FormattingStyle.CURRENCY, "en_US")(Decimal("1234.5")) == "€1,234.50"


def test_iso_currency_uses_resolved_symbol(monkeypatch):
    monkeypatch.setenv(DEVICE_LOCALE_ENV_VAR, "en_US")

    assert USD.symbol == "US$"
    assert USD.formatted()(Decimal("2.345")) == "US$2.34"
    assert USD.formatted(FormattingStyle.CURRENCY_ISO_CODE)(Decimal("2.345")) == "USD\u00a02.34"


def test_iso_currency_formatting_is_deterministic(monkeypatch):
    monkeypatch.setenv(DEVICE_LOCALE_ENV_VAR, "en_US")

    first = JPY.formatted()(Decimal("1234.5"))
    second = JPY.formatted()(Decimal("1234.5"))
    assert first == second == "JP¥1,234"


# endregion
