"""Abstract exchange-rate source interface — port for rate provider adapters."""

from abc import ABC, abstractmethod

from asset_tracking.domain.entities import RateTable


class RateSource(ABC):
    """Port — defines what the converter needs from any rate provider."""

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Unique name identifying this provider (e.g. 'ecb')."""
        ...

    @abstractmethod
    async def fetch(self) -> RateTable:
        """Fetch the current rate table relative to EUR.

        Returns:
            A RateTable with EUR at 1 and every quoted currency.

        Raises:
            RateSourceError: On network errors, timeouts or unusable documents.
        """
        ...
