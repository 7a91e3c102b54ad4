import pytest
from babel import Locale

from suite_currency.config import DEVICE_LOCALE_ENV_VAR, FALLBACK_LOCALE_ENV_VAR
from suite_currency.errors import UnknownLocaleIdentifierError
from suite_currency.platform.locale.device_locale import current_locale, current_locale_identifier


def test_configured_device_locale_wins(monkeypatch):
    monkeypatch.setenv("LC_ALL", "fr_FR.UTF-8")
    monkeypatch.setenv(DEVICE_LOCALE_ENV_VAR, "de_DE")

    assert current_locale_identifier(default="en_GB") == "de_DE"


def test_posix_environment_is_used_without_configuration(monkeypatch):
    monkeypatch.setenv("LC_MONETARY", "fr_FR.UTF-8")

    assert current_locale_identifier(default="en_GB") == "fr_FR"


def test_default_is_used_without_configuration_and_environment():
    assert current_locale_identifier(default="en_GB") == "en_GB"


def test_fallback_is_used_last(monkeypatch):
    assert current_locale_identifier() == "en_US_POSIX"

    monkeypatch.setenv(FALLBACK_LOCALE_ENV_VAR, "de_CH")
    assert current_locale_identifier() == "de_CH"


def test_device_locale_is_read_live(monkeypatch):
    monkeypatch.setenv(DEVICE_LOCALE_ENV_VAR, "de_DE")
    assert current_locale().identifier == "de_DE"

    monkeypatch.setenv(DEVICE_LOCALE_ENV_VAR, "ja_JP")
    assert current_locale().identifier == "ja_JP"
    assert current_locale().currency_code == "JPY"


def test_unknown_device_locale_is_a_configuration_error(monkeypatch):
    monkeypatch.setenv(DEVICE_LOCALE_ENV_VAR, "xx_XX")

    with pytest.raises(UnknownLocaleIdentifierError):
        current_locale()


def test_posix_currency_modifier_is_understood(monkeypatch):
    monkeypatch.setenv("LC_MONETARY", "de_DE.UTF-8@euro")

    currency_locale = current_locale()
    assert currency_locale.locale == Locale("de", "DE")
    assert currency_locale.currency_code == "EUR"
