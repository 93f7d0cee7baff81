"""Response normalization for relayed upstream payloads.

This module provides:
- Outcome: value-or-error result the routes dispatch on
- relay(): awaits one adapter call and shapes its payload
- normalize_*: per-route payload shaping (success / not found / upstream failure)
- to_response(): renders an Outcome as a JSONResponse

Upstream failure causes are logged here and never reach the caller; the
caller only sees the route's generic message.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import structlog
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from pydantic import ValidationError as SchemaError

from market_relay.data.models import (
    NO_EARNINGS_DATE,
    NO_GENERATION_TEXT,
    ChatReply,
    CohereGeneration,
    CohereGenerateResponse,
    FinancialSummary,
    FmpQuote,
)
from market_relay.errors import ErrorKind, NotFoundError, RelayError, UpstreamError

logger = structlog.get_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")

FINANCIAL_SUMMARY_FAILURE = "Failed to fetch financial summary. Please try again later."
CHART_FAILURE = "Failed to fetch chart data. Please try again later."
NEWS_FAILURE = "Failed to fetch stock news. Please try again later."
CHAT_FAILURE = "Failed to fetch response from Cohere API. Please try again later."

NEWS_NOT_FOUND = "No news available for the given symbols."


class ErrorResponse(BaseModel):
    """Error body returned for every non-200 response."""

    error: str = Field(..., description="Error message")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of handling one request: either a value or a RelayError."""

    value: T | None = None
    error: RelayError | None = None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: RelayError) -> "Outcome[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        """Error kind, or None on success."""
        return self.error.kind if self.error is not None else None

    @property
    def status_code(self) -> int:
        return 200 if self.error is None else self.error.status_code


def _unrecognized(message: str, reason: str, payload: Any) -> Outcome[Any]:
    return Outcome.failure(
        UpstreamError(message, details={"reason": reason, "payload_type": type(payload).__name__})
    )


def _format_value(value: Any) -> str:
    """Render a number for the summary's string fields."""
    if value is None:
        return "N/A"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _format_range(low: Any, high: Any) -> str:
    return f"{_format_value(low)} - {_format_value(high)}"


def build_financial_summary(quote: FmpQuote) -> FinancialSummary:
    """Rename and format an FMP quote into the served summary."""
    return FinancialSummary(
        price=quote.price,
        changes_percentage=f"{_format_value(quote.changes_percentage)}%",
        change=quote.change,
        day_range=_format_range(quote.day_low, quote.day_high),
        year_range=_format_range(quote.year_low, quote.year_high),
        market_cap=quote.market_cap,
        price_avg50=quote.price_avg_50,
        price_avg200=quote.price_avg_200,
        exchange=quote.exchange,
        volume=quote.volume,
        avg_volume=quote.avg_volume,
        open=quote.open,
        previous_close=quote.previous_close,
        eps=quote.eps,
        pe_ratio=quote.pe,
        earnings_date=quote.earnings_announcement or NO_EARNINGS_DATE,
        shares_outstanding=quote.shares_outstanding,
    )


def normalize_financial_summary(raw: Any, ticker: str) -> Outcome[FinancialSummary]:
    """Shape an FMP ``/quote`` body.

    Args:
        raw: Decoded upstream body, expected to be a list.
        ticker: Ticker as requested, used in the not-found message.

    Returns:
        Summary of the first element, NotFound for an empty list or empty
        first element, UpstreamFailure for any other shape.
    """
    if not isinstance(raw, list):
        return _unrecognized(FINANCIAL_SUMMARY_FAILURE, "expected a list", raw)

    first = raw[0] if raw else None
    if not first:
        return Outcome.failure(NotFoundError(f"No financial data found for ticker: {ticker}"))

    if not isinstance(first, dict):
        return _unrecognized(FINANCIAL_SUMMARY_FAILURE, "expected a quote object", first)

    # Fields are JSON pass-through, so any decoded object validates
    quote = FmpQuote.model_validate(first)

    return Outcome.success(build_financial_summary(quote))


def _normalize_mapping(raw: Any, not_found: str, failure: str) -> Outcome[dict[str, Any]]:
    """Pass a mapping through; empty or null bodies are treated as absent."""
    if raw is None or (isinstance(raw, dict | list) and len(raw) == 0):
        return Outcome.failure(NotFoundError(not_found))
    if not isinstance(raw, dict):
        return _unrecognized(failure, "expected an object", raw)
    return Outcome.success(raw)


def normalize_chart(raw: Any, ticker: str) -> Outcome[dict[str, Any]]:
    """Shape a chart body. ``ticker`` is the uppercased symbol."""
    return _normalize_mapping(raw, f"No chart data available for ticker: {ticker}", CHART_FAILURE)


def normalize_news(raw: Any) -> Outcome[dict[str, Any]]:
    """Shape a news body."""
    return _normalize_mapping(raw, NEWS_NOT_FOUND, NEWS_FAILURE)


def _first_generation_text(generation: Any) -> str:
    try:
        text = CohereGeneration.model_validate(generation).text
    except SchemaError:
        return NO_GENERATION_TEXT
    return text or NO_GENERATION_TEXT


def normalize_chat(raw: Any) -> Outcome[ChatReply]:
    """Shape a Cohere ``/v1/generate`` body.

    A missing or empty ``generations`` list is an upstream failure. A first
    generation that is not an object or has no text falls back to a
    placeholder reply; later generations are ignored.
    """
    if not isinstance(raw, dict):
        return _unrecognized(CHAT_FAILURE, "expected an object", raw)

    try:
        body = CohereGenerateResponse.model_validate(raw)
    except SchemaError as e:
        return Outcome.failure(
            UpstreamError(CHAT_FAILURE, details={"reason": "invalid generate body", "error": str(e)})
        )

    if not body.generations:
        return Outcome.failure(UpstreamError(CHAT_FAILURE, details={"reason": "no generations"}))

    return Outcome.success(ChatReply(response=_first_generation_text(body.generations[0])))


async def relay(
    call: Awaitable[Any],
    shape: Callable[[Any], Outcome[R]],
    *,
    failure_message: str,
    event: str,
    **context: Any,
) -> Outcome[R]:
    """Await one adapter call and shape its payload.

    Args:
        call: Pending adapter coroutine.
        shape: Route-specific normalizer for the raw payload.
        failure_message: Generic message returned when the call fails.
        event: Log event prefix (``<event>_failed``, ``<event>_not_found``).
        **context: Extra fields for the log entry (ticker, symbols, ...).

    Returns:
        Outcome ready to be rendered.
    """
    try:
        raw = await call
    except UpstreamError as e:
        logger.error(f"{event}_failed", error=e.message, status=e.status, details=e.details, **context)
        return Outcome.failure(UpstreamError(failure_message, status=e.status))

    outcome = shape(raw)
    if outcome.kind is ErrorKind.UPSTREAM and outcome.error is not None:
        logger.error(
            f"{event}_failed",
            error="unrecognized upstream payload",
            details=outcome.error.details,
            **context,
        )
    elif outcome.kind is ErrorKind.NOT_FOUND:
        logger.info(f"{event}_not_found", **context)
    return outcome


def to_response(outcome: Outcome[Any]) -> JSONResponse:
    """Render an Outcome as the HTTP response for its kind."""
    if outcome.error is not None:
        return JSONResponse(
            status_code=outcome.status_code,
            content=ErrorResponse(error=outcome.error.message).model_dump(),
        )

    value = outcome.value
    if isinstance(value, BaseModel):
        content = value.model_dump(mode="json", by_alias=True)
    else:
        content = jsonable_encoder(value)
    return JSONResponse(status_code=200, content=content)
