"""Market Relay: aggregation proxy for market data, news and text generation APIs."""

__version__ = "1.0.0"
