"""Container holding one instance of each upstream adapter."""

import asyncio
from dataclasses import dataclass

import structlog

from market_relay.config import Settings
from market_relay.data.base import UpstreamAdapter
from market_relay.data.cohere import ChatAdapter
from market_relay.data.fmp import MarketSummaryAdapter
from market_relay.data.rapidapi import ChartAdapter, NewsAdapter

logger = structlog.get_logger(__name__)


@dataclass
class RelayAdapters:
    """The adapters the API routes dispatch to."""

    market_summary: MarketSummaryAdapter
    chart: ChartAdapter
    news: NewsAdapter
    chat: ChatAdapter

    @classmethod
    def from_settings(cls, settings: Settings) -> "RelayAdapters":
        """Build every adapter from the application settings.

        Missing credentials are not rejected here; the upstream will refuse
        the call and the route reports a generic failure.
        """
        adapters = cls(
            market_summary=MarketSummaryAdapter(settings.FMP_API_KEY, timeout=settings.HTTP_TIMEOUT),
            chart=ChartAdapter(
                settings.RAPIDAPI_KEY, settings.RAPIDAPI_HOST, timeout=settings.HTTP_TIMEOUT
            ),
            news=NewsAdapter(
                settings.RAPIDAPI_KEY, settings.RAPIDAPI_HOST, timeout=settings.HTTP_TIMEOUT
            ),
            chat=ChatAdapter(settings.COHERE_API_KEY, timeout=settings.HTTP_TIMEOUT),
        )
        for name, adapter in adapters.items():
            if not adapter.is_configured:
                logger.warning("adapter_not_configured", adapter=name)
        return adapters

    def items(self) -> list[tuple[str, UpstreamAdapter]]:
        return [
            ("market_summary", self.market_summary),
            ("chart", self.chart),
            ("news", self.news),
            ("chat", self.chat),
        ]

    async def close(self) -> None:
        """Close every adapter's HTTP client."""
        await asyncio.gather(*(adapter.close() for _, adapter in self.items()))
