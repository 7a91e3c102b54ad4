import pytest

from suite_currency.config import DEVICE_LOCALE_ENV_VAR, FALLBACK_LOCALE_ENV_VAR, clear_dotenv_cache
from suite_currency.utils.shared_instance import clear_shared_instances

# Variables Babel reads to find the POSIX locale
POSIX_LOCALE_ENV_VARS = ("LANGUAGE", "LC_ALL", "LC_CTYPE", "LANG", "LC_MONETARY", "LC_NUMERIC")


@pytest.fixture(autouse=True)
def isolated_locale_environment(monkeypatch):
    """Start every test without configured or environment locales, a loaded .env file or shared instances."""
    for name in (DEVICE_LOCALE_ENV_VAR, FALLBACK_LOCALE_ENV_VAR, *POSIX_LOCALE_ENV_VARS):
        # Set before deleting, so values a test loads from a .env file are removed afterwards
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)

    clear_dotenv_cache()
    clear_shared_instances()
    yield
    clear_dotenv_cache()
    clear_shared_instances()
