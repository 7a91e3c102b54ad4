"""Canonical locale identifiers and resolved locale objects.

A canonical locale identifier has the form `<base>` or `<base>@<key>=<value>;...`, for
example `de_DE@currency=USD`. The `currency` keyword pins the currency whose symbol and
display rules a formatter should use, independent of the locale's native currency.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from babel import Locale, UnknownLocaleError
from babel.core import get_locale_identifier, parse_locale
from babel.numbers import get_territory_currencies

from suite_currency.errors import UnknownLocaleIdentifierError

logger = logging.getLogger(__name__)

ROOT_LOCALE_IDENTIFIER = "root"
POSIX_LOCALE_IDENTIFIER = "en_US_POSIX"

CURRENCY_KEYWORD = "currency"
KEYWORD_MARKER = "@"
KEYWORD_SEPARATOR = ";"

# POSIX locale modifiers (`de_DE.UTF-8@euro`) that name a currency
CURRENCY_MODIFIERS = {"euro": "EUR"}


# region Identifiers


def _split_identifier(identifier: str) -> tuple[str, dict[str, str]]:
    """Split $identifier into its base part and normalized keywords."""
    base, _, keyword_part = identifier.strip().partition(KEYWORD_MARKER)

    keywords: dict[str, str] = {}
    modifiers: list[str] = []
    for item in keyword_part.split(KEYWORD_SEPARATOR):
        item = item.strip()
        if not item:
            continue

        key, separator, value = item.partition("=")
        if not separator:
            modifiers.append(key.strip().lower())
            continue

        key = key.strip().lower()
        value = value.strip()

        # Raise: every keyword needs both a key and a value
        if not key or not value:
            raise UnknownLocaleIdentifierError(identifier, reason=f"invalid keyword '{item}'")

        keywords[key] = value.upper() if key == CURRENCY_KEYWORD else value

    # An explicit currency keyword wins over a currency modifier
    for modifier in modifiers:
        if modifier in CURRENCY_MODIFIERS:
            keywords.setdefault(CURRENCY_KEYWORD, CURRENCY_MODIFIERS[modifier])
        else:
            logger.debug(f"Dropped locale modifier '{modifier}' of $identifier ('{identifier}')")

    return base.strip(), keywords


def _join_identifier(base: str, keywords: dict[str, str]) -> str:
    if not keywords:
        return base
    keyword_part = KEYWORD_SEPARATOR.join(f"{key}={value}" for key, value in sorted(keywords.items()))
    return f"{base}{KEYWORD_MARKER}{keyword_part}"


def _canonical_base(base: str, identifier: str) -> str:
    base = base.replace("-", "_")

    if not base or base.lower() == ROOT_LOCALE_IDENTIFIER:
        return ROOT_LOCALE_IDENTIFIER

    if base.split(".")[0] in ("C", "POSIX"):
        return POSIX_LOCALE_IDENTIFIER

    try:
        parts = parse_locale(base)
    except ValueError as e:
        raise UnknownLocaleIdentifierError(identifier, reason=str(e)) from e

    return get_locale_identifier(parts)


def canonical_locale_identifier(identifier: str) -> str:
    """Normalize $identifier into a canonical locale identifier.

    Rules:
    - The base part uses `_` separators, loses any encoding suffix and gets the usual
      casing (`de_DE`, `zh_Hant_TW`). `C` and `POSIX` become `en_US_POSIX`; an empty
      base or `root` becomes `root`.
    - Keyword keys are lower-cased, the `currency` value is upper-cased, and keywords
      are sorted by key.
    - POSIX modifiers (items without `=`) are not keywords: `euro` becomes
      `currency=EUR` unless a currency is given, and other modifiers are dropped.

    The result is purely syntactic: whether locale data exists is checked by
    `resolve_locale`.

    Args:
        identifier: Locale identifier, e.g. `"en-us"`, `"de_DE.UTF-8"` or `"@currency=usd"`.

    Returns:
        The canonical identifier, e.g. `"en_US"`, `"de_DE"` or `"root@currency=USD"`.

    Raises:
        TypeError: If $identifier is not a string.
        UnknownLocaleIdentifierError: If $identifier is not a valid locale identifier.
    """
    # Raise: identifier must be a string
    if not isinstance(identifier, str):
        raise TypeError(f"$identifier must be a string, but provided value is: {identifier!r}")

    base, keywords = _split_identifier(identifier)
    return _join_identifier(_canonical_base(base, identifier), keywords)


def pin_currency_code(identifier: str, code: str) -> str:
    """Attach `currency=<code>` to $identifier.

    When $identifier already carries a `currency` keyword, $code replaces it. Other
    keywords are kept. The result is not canonicalized.

    Args:
        identifier: Locale identifier to pin the currency onto.
        code: Currency code to pin.

    Returns:
        Identifier of the form `<identifier>@currency=<code>`.

    Raises:
        ValueError: If $code is empty.
    """
    # Raise: code must be a non-empty string
    if not isinstance(code, str) or not code.strip():
        raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

    base, keywords = _split_identifier(identifier)
    keywords[CURRENCY_KEYWORD] = code.strip().upper()
    return _join_identifier(base, keywords)


# endregion

# region Resolved locale


@dataclass(frozen=True)
class CurrencyLocale:
    """Locale data plus the keywords of the identifier it was resolved from.

    Attributes:
        locale: Babel `Locale` holding CLDR data for the base identifier.
        keywords: Sorted `(key, value)` pairs, e.g. `(("currency", "USD"),)`.
    """

    locale: Locale
    keywords: tuple[tuple[str, str], ...] = ()

    @property
    def identifier(self) -> str:
        """Canonical identifier including keywords."""
        return _join_identifier(str(self.locale), dict(self.keywords))

    @property
    def currency_override(self) -> str | None:
        """Currency code pinned with the `currency` keyword, if any."""
        return dict(self.keywords).get(CURRENCY_KEYWORD)

    @property
    def currency_code(self) -> str | None:
        """Currency code of this locale.

        The pinned code wins; otherwise the current tender currency of the locale's
        territory. None when the locale has no territory (e.g. `en` or `root`).
        """
        if self.currency_override is not None:
            return self.currency_override

        territory = self.locale.territory
        if not territory:
            return None

        currencies = get_territory_currencies(territory)
        return currencies[0] if currencies else None

    @property
    def currency_symbol(self) -> str | None:
        """Symbol of `currency_code` in this locale, or None if there is none."""
        code = self.currency_code
        if code is None:
            return None
        return self.symbol_for(code)

    def symbol_for(self, code: str) -> str | None:
        """Return the symbol this locale uses for $code, or None if it has none."""
        return self.locale.currency_symbols.get(code)

    def __str__(self) -> str:
        return self.identifier


def resolve_locale(identifier: str) -> CurrencyLocale:
    """Canonicalize $identifier and load its locale data.

    Args:
        identifier: Locale identifier, canonical or not.

    Returns:
        CurrencyLocale: Locale data plus the identifier's keywords.

    Raises:
        UnknownLocaleIdentifierError: If $identifier is invalid or no locale data exists for it.
    """
    canonical = canonical_locale_identifier(identifier)
    base, keywords = _split_identifier(canonical)

    try:
        locale = Locale.parse(base)
    except (UnknownLocaleError, ValueError) as e:
        logger.error(f"No locale data for $identifier ('{identifier}'): {e}")
        raise UnknownLocaleIdentifierError(identifier, reason=str(e)) from e

    return CurrencyLocale(locale=locale, keywords=tuple(sorted(keywords.items())))


def as_currency_locale(value: CurrencyLocale | Locale | str) -> CurrencyLocale:
    """Coerce $value into a `CurrencyLocale`.

    Args:
        value: A `CurrencyLocale`, a Babel `Locale` or a locale identifier.

    Returns:
        CurrencyLocale: $value itself, or a resolved equivalent.

    Raises:
        TypeError: If $value has an unsupported type.
    """
    if isinstance(value, CurrencyLocale):
        return value
    if isinstance(value, Locale):
        return CurrencyLocale(locale=value)
    if isinstance(value, str):
        return resolve_locale(value)

    raise TypeError(f"$value must be CurrencyLocale, babel.Locale or str, but provided value is: {value!r}")


# endregion
