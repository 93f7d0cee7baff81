"""Observability helpers for the relay.

This module provides:
- configure_logging: structlog setup for the server process
"""

from market_relay.observability.logging_config import configure_logging

__all__ = ["configure_logging"]
