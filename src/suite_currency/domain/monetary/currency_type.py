"""Interfaces every currency type implements.

A currency *type* is a class: its code, scale and symbol are class attributes and its
formatting functions are classmethods. The interfaces below carry default behavior
and no state; concrete currencies subclass them explicitly.

    CurrencyType
    +-- CustomCurrencyType
    |   +-- CryptoCurrencyType
    +-- ISOCurrencyType
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from babel import Locale

from suite_currency.domain.monetary.formatter_factory import FormattingFunction, make_formatting_function
from suite_currency.domain.monetary.rounding_policy import RoundingPolicy, build_rounding_policy
from suite_currency.platform.locale.currency_locale import CurrencyLocale, as_currency_locale, canonical_locale_identifier, pin_currency_code, resolve_locale
from suite_currency.platform.locale.device_locale import current_locale_identifier
from suite_currency.platform.locale.formatting_style import FormattingStyle
from suite_currency.utils.shared_instance import get_shared_instance


# region Interface


class CurrencyType(ABC):
    """Capabilities of any currency type.

    Required class attributes:
        code: Currency code, e.g. "USD".
        scale: Fractional digits an amount of this currency carries.
        symbol: Display symbol, or None to use the locale's symbol.
    """

    code: ClassVar[str]
    scale: ClassVar[int]
    symbol: ClassVar[str | None]

    default_formatting_style: ClassVar[FormattingStyle] = FormattingStyle.CURRENCY

    @classmethod
    def decimal_number_behaviors(cls) -> RoundingPolicy:
        """Rounding policy for arithmetic on amounts of this currency.

        Round-half-to-even at `scale`, signalling inexact, overflowing, underflowing
        and divide-by-zero results.
        """
        return build_rounding_policy(cls.scale)

    @classmethod
    def formatted_for_locale_id(cls, style: FormattingStyle, locale_id: str) -> FormattingFunction:
        """Return a function that formats amounts for the locale named by $locale_id.

        Refinements decide how $locale_id becomes a locale.
        """
        raise NotImplementedError(f"{cls.__name__} must implement `formatted_for_locale_id`; subclass CustomCurrencyType or ISOCurrencyType")

    @classmethod
    def formatted_for_locale(cls, style: FormattingStyle, locale: CurrencyLocale | Locale) -> FormattingFunction:
        """Return a function that formats amounts of this currency in $locale.

        The currency code is pinned onto $locale, and amounts are rounded half-to-even
        to `scale` digits.
        """
        return make_formatting_function(
            code=cls.code,
            scale=cls.scale,
            symbol=cls.symbol,
            style=style,
            locale=as_currency_locale(locale),
        )

    @classmethod
    def formatted(cls, style: FormattingStyle | None = None, locale: CurrencyLocale | Locale | str | None = None) -> FormattingFunction:
        """Return a function that formats amounts of this currency.

        Args:
            style: Formatting style. Defaults to `default_formatting_style`.
            locale: A locale identifier (handled by `formatted_for_locale_id`), a resolved
                locale (handled by `formatted_for_locale`), or None for the device's
                current locale identifier.

        Returns:
            FormattingFunction: Maps a decimal-like amount to its display string.
        """
        if style is None:
            style = cls.default_formatting_style
        if locale is None:
            locale = current_locale_identifier()

        if isinstance(locale, str):
            return cls.formatted_for_locale_id(style, locale)
        return cls.formatted_for_locale(style, locale)


# endregion

# region Custom and crypto currencies


class CustomCurrencyType(CurrencyType):
    """Currencies defined by the application, with explicit code, scale and symbol."""

    @classmethod
    def formatted_for_locale_id(cls, style: FormattingStyle, locale_id: str) -> FormattingFunction:
        """Format for the locale named by $locale_id.

        Raises:
            UnknownLocaleIdentifierError: If $locale_id cannot be resolved.
        """
        locale = resolve_locale(canonical_locale_identifier(locale_id))
        return cls.formatted_for_locale(style, locale)


class CryptoCurrencyType(CustomCurrencyType):
    """Crypto currencies (Bitcoin etc.).

    Behaves exactly like `CustomCurrencyType`. It exists so that code can accept
    "any crypto currency" without accepting every custom currency.
    """


# endregion

# region ISO currencies


class SharedInstanceAttribute:
    """Class attribute read from the shared instance of the owning currency type.

    Accessed on the class, it forwards to `owner.shared_instance()`; accessed on an
    instance, it reads that instance.
    """

    def __init__(self, instance_attribute: str) -> None:
        self._instance_attribute = instance_attribute

    def __get__(self, instance: object | None, owner: type) -> object:
        target = owner.shared_instance() if instance is None else instance
        return getattr(target, self._instance_attribute)


class ISOCurrencyType(CurrencyType):
    """Currencies from the ISO 4217 registry.

    Metadata is resolved once, when the shared instance is first accessed, and reused
    for the rest of the process. Conforming types implement `create_shared_instance`
    and give their instances `currency_code`, `currency_scale` and `currency_symbol`.
    """

    code = SharedInstanceAttribute("currency_code")  # type: ignore[assignment]
    scale = SharedInstanceAttribute("currency_scale")  # type: ignore[assignment]
    symbol = SharedInstanceAttribute("currency_symbol")  # type: ignore[assignment]

    @property
    @abstractmethod
    def currency_code(self) -> str:
        ...

    @property
    @abstractmethod
    def currency_scale(self) -> int:
        ...

    @property
    @abstractmethod
    def currency_symbol(self) -> str | None:
        ...

    @classmethod
    def create_shared_instance(cls) -> ISOCurrencyType:
        """Create the instance shared by all users of this type. Called at most once."""
        raise NotImplementedError(f"{cls.__name__} must implement `create_shared_instance`")

    @classmethod
    def shared_instance(cls) -> ISOCurrencyType:
        """Return the one instance of this type, creating it on first access.

        Thread Safety:
            Concurrent first access creates exactly one instance.
        """
        return get_shared_instance(cls, cls.create_shared_instance)

    @classmethod
    def formatted_for_locale_id(cls, style: FormattingStyle, locale_id: str) -> FormattingFunction:
        """Format with the conventions of the device's current locale.

        Only the currency code is pinned. $locale_id is used solely as the fallback when
        the device's locale cannot be determined; use `formatted_for_requested_locale_id`
        to format for $locale_id itself.
        """
        identifier = pin_currency_code(current_locale_identifier(default=locale_id), cls.code)
        locale = resolve_locale(canonical_locale_identifier(identifier))
        return cls.formatted_for_locale(style, locale)

    @classmethod
    def formatted_for_requested_locale_id(cls, style: FormattingStyle, locale_id: str) -> FormattingFunction:
        """Format with the conventions of the locale named by $locale_id, pinning the currency code.

        Raises:
            UnknownLocaleIdentifierError: If $locale_id cannot be resolved.
        """
        identifier = pin_currency_code(locale_id, cls.code)
        locale = resolve_locale(canonical_locale_identifier(identifier))
        return cls.formatted_for_locale(style, locale)


# endregion
