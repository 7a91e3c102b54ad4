from __future__ import annotations

from typing import ClassVar

from suite_currency.domain.monetary.currency_metadata import CurrencyMetadata
from suite_currency.domain.monetary.currency_type import ISOCurrencyType


class ISOCurrency(ISOCurrencyType):
    """Base for ISO currency types backed by resolved `CurrencyMetadata`.

    Subclasses name their currency with `iso_code`; the metadata is resolved from that
    code the first time the shared instance is needed.

    Example:
        class NOK(ISOCurrency):
            iso_code = "NOK"

        NOK.scale  # 2, resolved on first access
    """

    __slots__ = ("_metadata",)

    iso_code: ClassVar[str]

    def __init__(self, metadata: CurrencyMetadata):
        # Raise: metadata must be CurrencyMetadata
        if not isinstance(metadata, CurrencyMetadata):
            raise TypeError(f"$metadata must be a CurrencyMetadata instance, but provided value is: {metadata!r}")

        self._metadata = metadata

    @property
    def metadata(self) -> CurrencyMetadata:
        return self._metadata

    @property
    def currency_code(self) -> str:
        return self._metadata.code

    @property
    def currency_scale(self) -> int:
        return self._metadata.scale

    @property
    def currency_symbol(self) -> str | None:
        return self._metadata.symbol

    @classmethod
    def create_shared_instance(cls) -> ISOCurrency:
        # Raise: concrete ISO currencies must name their code
        iso_code = getattr(cls, "iso_code", None)
        if not iso_code:
            raise NotImplementedError(f"{cls.__name__} must define `iso_code` or override `create_shared_instance`")

        return cls(CurrencyMetadata.from_code(iso_code))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._metadata!r})"
