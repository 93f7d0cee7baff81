"""FastAPI application for the Market Relay API.

This module contains:
- Relay endpoints and the app factory
- Response normalization and input validation
- Health check endpoints
"""

from market_relay.api.normalizer import ErrorResponse, Outcome, relay, to_response
from market_relay.api.routes import create_app, register_routes
from market_relay.api.validation import validate_chat_body, validate_identifier

__all__ = [
    "ErrorResponse",
    "Outcome",
    "create_app",
    "register_routes",
    "relay",
    "to_response",
    "validate_chat_body",
    "validate_identifier",
]
