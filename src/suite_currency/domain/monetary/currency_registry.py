"""Predefined currency types and the registry that finds them by code."""

from __future__ import annotations

import logging
from threading import Lock

from bidict import bidict

from suite_currency.domain.monetary.currency_type import CryptoCurrencyType, CurrencyType
from suite_currency.domain.monetary.iso_currency import ISOCurrency

logger = logging.getLogger(__name__)

# region ISO currencies


class USD(ISOCurrency):
    iso_code = "USD"


class EUR(ISOCurrency):
    iso_code = "EUR"


class GBP(ISOCurrency):
    iso_code = "GBP"


class JPY(ISOCurrency):
    iso_code = "JPY"


class CHF(ISOCurrency):
    iso_code = "CHF"


class BHD(ISOCurrency):
    iso_code = "BHD"


# endregion

# region Crypto currencies


class BTC(CryptoCurrencyType):
    """Bitcoin, in satoshis."""

    code = "BTC"
    scale = 8
    symbol = "₿"


class ETH(CryptoCurrencyType):
    """Ether, in wei."""

    code = "ETH"
    scale = 18
    symbol = "Ξ"


class USDT(CryptoCurrencyType):
    code = "USDT"
    scale = 6
    symbol = None


# endregion

# region Registry

_registry_lock = Lock()
_currency_types_by_code_bidict: bidict[str, type[CurrencyType]] = bidict()


def _registration_code(currency_type: type[CurrencyType]) -> str:
    # ISO types are keyed by `iso_code`, so registering does not resolve their metadata
    if issubclass(currency_type, ISOCurrency) and getattr(currency_type, "iso_code", None):
        return currency_type.iso_code.upper()
    return currency_type.code.upper()


def register(currency_type: type[CurrencyType], overwrite: bool = False) -> None:
    """Register $currency_type under its code.

    Args:
        currency_type: Currency class to register.
        overwrite: Replace a type already registered under the same code.

    Raises:
        TypeError: If $currency_type is not a CurrencyType subclass.
        ValueError: If the code is taken and $overwrite is False, or if $currency_type is
            already registered under another code.
    """
    # Raise: currency_type must be a CurrencyType subclass
    if not isinstance(currency_type, type) or not issubclass(currency_type, CurrencyType):
        raise TypeError(f"$currency_type must be a CurrencyType subclass, but provided value is: {currency_type!r}")

    code = _registration_code(currency_type)

    with _registry_lock:
        existing = _currency_types_by_code_bidict.get(code)
        if existing is currency_type:
            return

        # Raise: code already taken by another type
        if existing is not None and not overwrite:
            raise ValueError(f"Currency with code '{code}' is already registered as {existing.__name__}. Use overwrite=True to replace it.")

        # Raise: one type can be registered under one code only
        if currency_type in _currency_types_by_code_bidict.inverse:
            other_code = _currency_types_by_code_bidict.inverse[currency_type]
            raise ValueError(f"{currency_type.__name__} is already registered under code '{other_code}'")

        _currency_types_by_code_bidict.forceput(code, currency_type)

    logger.debug(f"Registered currency type {currency_type.__name__} under code '{code}'")


def unregister(code: str) -> None:
    """Remove the currency type registered under $code.

    Raises:
        ValueError: If no type is registered under $code.
    """
    code = code.strip().upper()
    with _registry_lock:
        # Raise: unknown code
        if code not in _currency_types_by_code_bidict:
            raise ValueError(f"Cannot unregister currency because code '{code}' is not registered")

        currency_type = _currency_types_by_code_bidict.pop(code)

    logger.debug(f"Unregistered currency type {currency_type.__name__} from code '{code}'")


def from_code(code: str) -> type[CurrencyType]:
    """Return the currency type registered under $code.

    Raises:
        TypeError: If $code is not a string.
        ValueError: If no type is registered under $code.
    """
    # Raise: code must be a string
    if not isinstance(code, str):
        raise TypeError(f"$code must be a string, but provided value is: {code!r}")

    code = code.strip().upper()
    with _registry_lock:
        currency_type = _currency_types_by_code_bidict.get(code)
        available = sorted(_currency_types_by_code_bidict) if currency_type is None else None

    # Raise: unknown code
    if currency_type is None:
        raise ValueError(f"Currency with code '{code}' not found in registry. Available currencies: {available}")

    return currency_type


def code_of(currency_type: type[CurrencyType]) -> str:
    """Return the code $currency_type is registered under.

    Raises:
        ValueError: If $currency_type is not registered.
    """
    with _registry_lock:
        code = _currency_types_by_code_bidict.inverse.get(currency_type)

    # Raise: unregistered type
    if code is None:
        raise ValueError(f"Currency type {currency_type!r} is not registered")

    return code


def registered_codes() -> list[str]:
    """Return all registered codes, sorted."""
    with _registry_lock:
        return sorted(_currency_types_by_code_bidict)


# endregion

# Register all predefined currencies
register(USD, overwrite=True)
register(EUR, overwrite=True)
register(GBP, overwrite=True)
register(JPY, overwrite=True)
register(CHF, overwrite=True)
register(BHD, overwrite=True)
register(BTC, overwrite=True)
register(ETH, overwrite=True)
register(USDT, overwrite=True)
