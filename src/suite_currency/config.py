"""Runtime settings read from the environment and an optional `.env` file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import cache

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

DEVICE_LOCALE_ENV_VAR = "SUITE_CURRENCY_DEVICE_LOCALE"
FALLBACK_LOCALE_ENV_VAR = "SUITE_CURRENCY_FALLBACK_LOCALE"

DEFAULT_FALLBACK_LOCALE = "en_US_POSIX"


@dataclass(frozen=True)
class CurrencySettings:
    """Settings that steer locale resolution.

    Attributes:
        device_locale: Locale identifier that overrides the POSIX locale environment
            when the device's current locale is requested. None means "not configured".
        fallback_locale: Locale identifier used when nothing else names a locale.
    """

    device_locale: str | None
    fallback_locale: str = DEFAULT_FALLBACK_LOCALE


def _read_env(name: str) -> str | None:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return None
    return value.strip()


@cache
def _load_dotenv_file() -> str:
    dotenv_path = find_dotenv(usecwd=True)
    load_dotenv(dotenv_path, override=False)
    logger.debug(f"Loaded .env file from $dotenv_path ('{dotenv_path}')")
    return dotenv_path


def clear_dotenv_cache() -> None:
    """Forget that the `.env` file was loaded, so the next `load_settings` loads it again. FOR TESTING ONLY."""
    _load_dotenv_file.cache_clear()


def load_settings() -> CurrencySettings:
    """Load settings from the environment.

    On the first call, a `.env` file found from the current working directory is loaded
    into the environment. Variables already present are never overridden by it.

    Returns:
        CurrencySettings: Settings read from the environment. Only the `.env` file load is
            cached; environment variables are read on every call.
    """
    _load_dotenv_file()

    settings = CurrencySettings(
        device_locale=_read_env(DEVICE_LOCALE_ENV_VAR),
        fallback_locale=_read_env(FALLBACK_LOCALE_ENV_VAR) or DEFAULT_FALLBACK_LOCALE,
    )
    logger.debug(f"Loaded settings with $device_locale ('{settings.device_locale}') and $fallback_locale ('{settings.fallback_locale}')")
    return settings
