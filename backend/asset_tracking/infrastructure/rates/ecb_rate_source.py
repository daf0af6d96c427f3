"""European Central Bank rate source — implements the RateSource interface.

Downloads the ECB daily reference rates (an XML document with EUR as the
base currency) using httpx and parses the ``Cube`` elements with lxml.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation

import httpx
from lxml import etree

from asset_tracking.application.interfaces import RateSource
from asset_tracking.domain.entities import RateTable
from asset_tracking.domain.exceptions import RateSourceError

logger = logging.getLogger(__name__)

ECB_DAILY_URL = "https://www.ecb.europa.eu/stats/eurofxref/eurofxref-daily.xml"
DEFAULT_TIMEOUT_SECONDS = 10.0

NAMESPACES = {
    "gesmes": "http://www.gesmes.org/xml/ns",
    "eurofxref": "http://www.ecb.int/vocabulary/2002-08-01/eurofxref",
}


class ECBRateSource(RateSource):
    """Infrastructure adapter — fetches EUR-based reference rates from the ECB.

    Every failure (network, timeout, HTTP status, unparsable or unexpected
    document) is raised as RateSourceError; the converter decides how to
    fall back.
    """

    def __init__(
        self,
        url: str = ECB_DAILY_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: httpx.AsyncClient | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self._url = url
        self._timeout = timeout
        self._http_client = http_client
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    @property
    def source_name(self) -> str:
        return "ecb"

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def fetch(self) -> RateTable:
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.get(self._url, timeout=self._timeout)
        except httpx.TimeoutException as exc:
            raise RateSourceError(self.source_name, f"Request timed out: {exc}") from exc
        except httpx.HTTPError as exc:
            raise RateSourceError(self.source_name, f"Request failed: {exc}") from exc
        finally:
            if should_close:
                await client.aclose()

        if response.status_code != 200:
            raise RateSourceError(
                self.source_name,
                f"Unexpected status {response.status_code} from {self._url}",
            )

        rates = self.parse_rates(response.content)
        logger.debug("Parsed %d ECB rates", len(rates))
        return RateTable(rates=rates, fetched_at=self._clock(), source=self.source_name)

    def parse_rates(self, content: bytes) -> dict[str, Decimal]:
        """Extract ``currency -> rate`` pairs from an ECB eurofxref document.

        Entries with a missing or non-numeric rate are skipped. A document
        without any rate in the eurofxref namespace is rejected.
        """
        parser = etree.XMLParser(resolve_entities=False, no_network=True)
        try:
            root = etree.fromstring(content, parser=parser)
        except etree.XMLSyntaxError as exc:
            raise RateSourceError(self.source_name, f"Malformed XML: {exc}") from exc

        if root is None:
            raise RateSourceError(self.source_name, "Empty XML document")

        cubes = root.xpath("//eurofxref:Cube[@currency]", namespaces=NAMESPACES)
        rates: dict[str, Decimal] = {}
        for cube in cubes:
            currency = (cube.get("currency") or "").strip().upper()
            raw_rate = (cube.get("rate") or "").strip()
            if not currency or not raw_rate:
                continue
            try:
                rate = Decimal(raw_rate)
            except InvalidOperation:
                logger.debug("Skipping unparsable rate %r for %s", raw_rate, currency)
                continue
            if not rate.is_finite() or rate <= 0:
                continue
            rates[currency] = rate

        if not rates:
            raise RateSourceError(
                self.source_name,
                "No eurofxref rates found in document",
            )
        return rates
