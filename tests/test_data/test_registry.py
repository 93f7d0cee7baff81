"""Tests for RelayAdapters."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from market_relay.config import Settings
from market_relay.data.cohere import ChatAdapter
from market_relay.data.fmp import MarketSummaryAdapter
from market_relay.data.rapidapi import ChartAdapter, NewsAdapter
from market_relay.data.registry import RelayAdapters


class TestRelayAdapters:
    """Tests for RelayAdapters."""

    def test_from_settings(self) -> None:
        """Test credentials, host and timeout are passed to each adapter."""
        settings = Settings(
            RAPIDAPI_KEY="rapid",
            RAPIDAPI_HOST="rapid.example.com",
            FMP_API_KEY="fmp",
            COHERE_API_KEY="cohere",
            HTTP_TIMEOUT=12.5,
        )

        adapters = RelayAdapters.from_settings(settings)

        assert isinstance(adapters.market_summary, MarketSummaryAdapter)
        assert adapters.market_summary.api_key == "fmp"
        assert isinstance(adapters.chart, ChartAdapter)
        assert adapters.chart.api_key == "rapid"
        assert adapters.chart.host == "rapid.example.com"
        assert isinstance(adapters.news, NewsAdapter)
        assert adapters.news.host == "rapid.example.com"
        assert isinstance(adapters.chat, ChatAdapter)
        assert adapters.chat.api_key == "cohere"
        assert adapters.chat._timeout == 12.5

    def test_missing_credentials_allowed(self) -> None:
        """Test adapters are built even without credentials."""
        adapters = RelayAdapters.from_settings(Settings())

        assert [adapter.is_configured for _, adapter in adapters.items()] == [False] * 4

    @pytest.mark.asyncio
    async def test_close(self) -> None:
        """Test close() closes every adapter."""
        stubs = [MagicMock(close=AsyncMock()) for _ in range(4)]
        adapters = RelayAdapters(*stubs)

        await adapters.close()

        for stub in stubs:
            stub.close.assert_awaited_once()
