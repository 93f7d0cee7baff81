"""Financial Modeling Prep adapter for per-ticker market snapshots."""

from typing import Any
from urllib.parse import quote

import httpx

from market_relay.data.base import UpstreamAdapter


class MarketSummaryAdapter(UpstreamAdapter):
    """Fetches the ``/api/v3/quote/{ticker}`` snapshot from Financial Modeling Prep.

    The API key travels in the ``apikey`` query parameter. The provider
    answers with a list, of which only the first element is used downstream.
    """

    name = "fmp"
    BASE_URL = "https://financialmodelingprep.com/api/v3"

    def __init__(
        self,
        api_key: str | None,
        *,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(timeout=timeout, http_client=http_client)
        self.api_key = api_key

    @property
    def is_configured(self) -> bool:
        """Check if API key is configured."""
        return bool(self.api_key)

    async def fetch(self, ticker: str) -> Any:
        """Fetch the raw quote list for a ticker.

        The ticker is passed through unchanged; the provider is
        case-insensitive.

        Args:
            ticker: Ticker symbol as received from the caller.

        Returns:
            Decoded JSON body, normally a list of quote objects.

        Raises:
            UpstreamError: If the outbound call fails.
        """
        return await self._request(
            "GET",
            f"{self.BASE_URL}/quote/{quote(ticker, safe='')}",
            params={"apikey": self.api_key or ""},
        )
