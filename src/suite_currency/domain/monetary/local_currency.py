from __future__ import annotations

import logging

from suite_currency.domain.monetary.currency_metadata import CurrencyMetadata
from suite_currency.domain.monetary.iso_currency import ISOCurrency
from suite_currency.platform.locale.device_locale import current_locale

logger = logging.getLogger(__name__)


class LocalCurrency(ISOCurrency):
    """The currency of the device's locale at first access.

    The locale is read once, when the shared instance is created. Later changes of the
    device locale do not change `code`, `scale` or `symbol` for the rest of the process.
    """

    __slots__ = ()

    @classmethod
    def create_shared_instance(cls) -> LocalCurrency:
        locale = current_locale()
        instance = cls(CurrencyMetadata.from_locale(locale))
        logger.info(f"Local currency fixed to {instance.metadata!r} from locale '{locale.identifier}'")
        return instance
