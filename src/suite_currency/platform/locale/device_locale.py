"""Access to the locale of the running device."""

from __future__ import annotations

import logging

from babel import default_locale

from suite_currency.config import load_settings
from suite_currency.platform.locale.currency_locale import CurrencyLocale, resolve_locale

logger = logging.getLogger(__name__)

# POSIX categories consulted before Babel's general fallbacks (LANGUAGE, LC_ALL, LC_CTYPE, LANG)
LOCALE_CATEGORIES = ("LC_MONETARY", "LC_NUMERIC")


def current_locale_identifier(default: str | None = None) -> str:
    """Return the identifier of the device's current locale.

    The value is read live on every call. Resolution order:
    1. the configured device locale (`SUITE_CURRENCY_DEVICE_LOCALE`),
    2. the POSIX locale environment, as read by Babel,
    3. $default,
    4. the configured fallback locale (`SUITE_CURRENCY_FALLBACK_LOCALE`).

    Args:
        default: Identifier to use when neither the settings nor the environment name one.

    Returns:
        A locale identifier (not necessarily canonical).
    """
    settings = load_settings()

    if settings.device_locale:
        logger.debug(f"Device locale taken from settings: '{settings.device_locale}'")
        return settings.device_locale

    environment_locale = default_locale(LOCALE_CATEGORIES)
    if environment_locale:
        logger.debug(f"Device locale taken from environment: '{environment_locale}'")
        return environment_locale

    if default:
        logger.debug(f"Device locale taken from $default: '{default}'")
        return default

    logger.debug(f"Device locale taken from fallback: '{settings.fallback_locale}'")
    return settings.fallback_locale


def current_locale() -> CurrencyLocale:
    """Resolve the device's current locale.

    Raises:
        UnknownLocaleIdentifierError: If the configured or environment locale has no locale data.
    """
    return resolve_locale(current_locale_identifier())
