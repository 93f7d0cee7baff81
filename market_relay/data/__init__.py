"""Data layer for upstream provider integration.

This module provides:
- MarketSummaryAdapter: Financial Modeling Prep quote snapshots
- ChartAdapter / NewsAdapter: Yahoo Finance via RapidAPI
- ChatAdapter: Cohere text generation
- QuoteReader: local quotes file
- RelayAdapters: container wiring the adapters from settings
- Data models: FmpQuote, FinancialSummary, CohereGenerateResponse, ChatReply
"""

from market_relay.data.base import UpstreamAdapter
from market_relay.data.cohere import ChatAdapter
from market_relay.data.fmp import MarketSummaryAdapter
from market_relay.data.models import (
    ChatReply,
    ChatRequest,
    CohereGenerateResponse,
    CohereGeneration,
    FinancialSummary,
    FmpQuote,
)
from market_relay.data.quotes import QuoteReader
from market_relay.data.rapidapi import ChartAdapter, NewsAdapter
from market_relay.data.registry import RelayAdapters

__all__ = [
    "ChartAdapter",
    "ChatAdapter",
    "ChatReply",
    "ChatRequest",
    "CohereGenerateResponse",
    "CohereGeneration",
    "FinancialSummary",
    "FmpQuote",
    "MarketSummaryAdapter",
    "NewsAdapter",
    "QuoteReader",
    "RelayAdapters",
    "UpstreamAdapter",
]
