"""Exceptions raised for currency configuration defects.

A configuration defect means the currency data or the locale data cannot produce a
correct result. Callers are not expected to recover from these: showing a wrong
monetary value is worse than stopping.
"""

from __future__ import annotations


class CurrencyConfigurationError(Exception):
    """Base class for fatal currency configuration defects."""


class UnknownLocaleIdentifierError(CurrencyConfigurationError):
    """Raised when a locale identifier cannot be parsed or has no locale data."""

    def __init__(self, identifier: str, reason: str | None = None):
        self.identifier = identifier
        self.reason = reason

        message = f"Locale identifier '{identifier}' cannot be resolved"
        if reason:
            message += f" - {reason}"

        super().__init__(message)


class CurrencyResolutionError(CurrencyConfigurationError):
    """Raised when currency metadata cannot be resolved from a code or a locale."""

    def __init__(self, reason: str, code: str | None = None, locale_identifier: str | None = None):
        self.code = code
        self.locale_identifier = locale_identifier
        self.reason = reason

        super().__init__(f"Cannot resolve currency metadata for $code ('{code}') and $locale_identifier ('{locale_identifier}'): {reason}")


class CurrencyFormattingError(CurrencyConfigurationError):
    """Raised when a formatter fails to render an amount."""

    def __init__(self, amount: object, code: str | None, locale_identifier: str, reason: str | None = None):
        self.amount = amount
        self.code = code
        self.locale_identifier = locale_identifier
        self.reason = reason

        message = f"Cannot format $amount ({amount}) for $code ('{code}') in $locale_identifier ('{locale_identifier}')"
        if reason:
            message += f" - {reason}"

        super().__init__(message)
