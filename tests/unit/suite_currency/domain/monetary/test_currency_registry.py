import pytest

from suite_currency.domain.monetary.currency_registry import BHD, BTC, CHF, ETH, EUR, GBP, JPY, USD, USDT, code_of, from_code, register, registered_codes, unregister
from suite_currency.domain.monetary.currency_type import CustomCurrencyType
from suite_currency.domain.monetary.iso_currency import ISOCurrency
from suite_currency.utils.shared_instance import has_shared_instance


class Points(CustomCurrencyType):
    code = "PTS"
    scale = 0
    symbol = "P"


def test_predefined_currencies_are_registered():
    assert registered_codes() == sorted(["BHD", "BTC", "CHF", "ETH", "EUR", "GBP", "JPY", "USD", "USDT"])

    for currency_type in (USD, EUR, GBP, JPY, CHF, BHD, BTC, ETH, USDT):
        assert from_code(code_of(currency_type)) is currency_type


def test_from_code_is_case_insensitive():
    assert from_code(" usd ") is USD
    assert from_code("btc") is BTC


def test_from_code_rejects_unknown_and_invalid_codes():
    with pytest.raises(ValueError):
        from_code("ZZZ")

    with pytest.raises(TypeError):
        from_code(None)


def test_register_and_unregister_custom_currency():
    register(Points)
    try:
        assert from_code("PTS") is Points
        assert code_of(Points) == "PTS"

        # Registering the same type again is a no-op
        register(Points)
    finally:
        unregister("PTS")

    with pytest.raises(ValueError):
        code_of(Points)
    with pytest.raises(ValueError):
        unregister("PTS")


def test_register_does_not_resolve_iso_metadata():
    class NOK(ISOCurrency):
        iso_code = "NOK"

    register(NOK)
    try:
        assert from_code("NOK") is NOK
        assert not has_shared_instance(NOK)
    finally:
        unregister("NOK")


def test_register_rejects_taken_code_unless_overwritten():
    class OtherDollar(ISOCurrency):
        iso_code = "USD"

    with pytest.raises(ValueError):
        register(OtherDollar)
    assert from_code("USD") is USD

    register(OtherDollar, overwrite=True)
    try:
        assert from_code("USD") is OtherDollar
    finally:
        register(USD, overwrite=True)

    assert from_code("USD") is USD


def test_register_rejects_non_currency_types():
    with pytest.raises(TypeError):
        register(str)

    with pytest.raises(TypeError):
        register(USD.__name__)
