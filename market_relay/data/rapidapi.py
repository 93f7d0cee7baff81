"""Yahoo Finance adapters served through RapidAPI.

This module provides:
- ChartAdapter: intraday chart for one ticker
- NewsAdapter: news stories for one or more symbols

Both authenticate with the ``x-rapidapi-host`` / ``x-rapidapi-key`` header pair.
"""

from typing import Any

import httpx

from market_relay.config import DEFAULT_RAPIDAPI_HOST
from market_relay.data.base import UpstreamAdapter

REGION = "US"
CHART_RANGE = "1d"
CHART_INTERVAL = "5m"
NEWS_SNIPPET_COUNT = 100


class RapidAPIAdapter(UpstreamAdapter):
    """Base for adapters that talk to the RapidAPI Yahoo Finance host."""

    name = "rapidapi"

    def __init__(
        self,
        api_key: str | None,
        host: str = DEFAULT_RAPIDAPI_HOST,
        *,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(timeout=timeout, http_client=http_client)
        self.api_key = api_key
        self.host = host

    @property
    def is_configured(self) -> bool:
        """Check if API key is configured."""
        return bool(self.api_key)

    @property
    def headers(self) -> dict[str, str]:
        return {
            "x-rapidapi-host": self.host,
            "x-rapidapi-key": self.api_key or "",
        }

    def _url(self, path: str) -> str:
        return f"https://{self.host}{path}"


class ChartAdapter(RapidAPIAdapter):
    """Fetches a one-day, five-minute intraday chart."""

    name = "chart"

    async def fetch(self, ticker: str) -> Any:
        """Fetch the raw chart payload.

        Args:
            ticker: Ticker symbol, already uppercased by the caller.

        Returns:
            Decoded JSON body, normally a mapping.

        Raises:
            UpstreamError: If the outbound call fails.
        """
        return await self._request(
            "GET",
            self._url("/api/stock/get-chart"),
            params={
                "region": REGION,
                "range": CHART_RANGE,
                "symbol": ticker,
                "interval": CHART_INTERVAL,
            },
            headers=self.headers,
        )


class NewsAdapter(RapidAPIAdapter):
    """Fetches news stories for a symbol list."""

    name = "news"

    async def fetch(self, symbols: str) -> Any:
        """Fetch the raw news payload.

        Args:
            symbols: One or more symbols in the provider's list format
                (e.g. ``"AAPL,MSFT"``), forwarded as-is.

        Returns:
            Decoded JSON body, normally a mapping.

        Raises:
            UpstreamError: If the outbound call fails.
        """
        return await self._request(
            "GET",
            self._url("/api/news/list-by-symbol"),
            params={
                "s": symbols,
                "region": REGION,
                "snippetCount": NEWS_SNIPPET_COUNT,
            },
            headers=self.headers,
        )
