from enum import Enum


class FormattingStyle(Enum):
    """Number formatting styles supported by `NumberFormatter`."""

    DECIMAL = "DECIMAL"
    CURRENCY = "CURRENCY"
    CURRENCY_ACCOUNTING = "CURRENCY_ACCOUNTING"
    CURRENCY_ISO_CODE = "CURRENCY_ISO_CODE"
    CURRENCY_PLURAL = "CURRENCY_PLURAL"
    PERCENT = "PERCENT"
    SCIENTIFIC = "SCIENTIFIC"

    @property
    def is_currency(self) -> bool:
        """Check if this style renders a currency.

        Returns:
            bool: True for all currency styles.
        """
        return self in (
            FormattingStyle.CURRENCY,
            FormattingStyle.CURRENCY_ACCOUNTING,
            FormattingStyle.CURRENCY_ISO_CODE,
            FormattingStyle.CURRENCY_PLURAL,
        )
