"""FastAPI routes for the Market Relay API.

This module provides:
- /quotes for the local quotes file
- /financial-summary/{ticker}, /chart/{ticker}, /news/{symbols} relaying market data
- /chat relaying prompts to the text generation provider
- Health check endpoints integration
- CORS configuration and the /public static mount
- Error handling
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import structlog
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException

from market_relay import __version__
from market_relay.api.normalizer import (
    CHART_FAILURE,
    CHAT_FAILURE,
    FINANCIAL_SUMMARY_FAILURE,
    NEWS_FAILURE,
    ErrorResponse,
    Outcome,
    normalize_chart,
    normalize_chat,
    normalize_financial_summary,
    normalize_news,
    relay,
    to_response,
)
from market_relay.api.validation import validate_chat_body, validate_identifier
from market_relay.config import Settings
from market_relay.data.models import ChatReply, ChatRequest, FinancialSummary
from market_relay.data.quotes import QuoteReader
from market_relay.data.registry import RelayAdapters
from market_relay.errors import DataUnavailable

logger = structlog.get_logger(__name__)


# ============================================================================
# Dependencies
# ============================================================================


def get_adapters(request: Request) -> RelayAdapters:
    """Adapters built for this application at startup."""
    return request.app.state.adapters


def get_quote_reader(request: Request) -> QuoteReader:
    """Quote reader built for this application at startup."""
    return request.app.state.quote_reader


# ============================================================================
# Application Setup
# ============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("application_starting", version=app.version)

    yield

    logger.info("application_shutting_down")
    await app.state.adapters.close()


OPENAPI_TAGS = [
    {"name": "Quotes", "description": "Static quotes served from a local file."},
    {
        "name": "Market Data",
        "description": "Financial summaries, intraday charts and news relayed from market data providers.",
    },
    {"name": "Chat", "description": "Prompts relayed to a text generation provider."},
    {"name": "Health", "description": "Liveness and readiness probes."},
]

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorResponse, "description": "Upstream returned no data"},
    500: {"model": ErrorResponse, "description": "Upstream call failed"},
}


def create_app(
    settings: Settings | None = None,
    adapters: RelayAdapters | None = None,
    quote_reader: QuoteReader | None = None,
    title: str = "Market Relay API",
    version: str = __version__,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings (read from the environment if omitted).
        adapters: Upstream adapters (built from settings if omitted).
        quote_reader: Quotes file reader (built from settings if omitted).
        title: API title.
        version: API version.

    Returns:
        Configured FastAPI application.
    """
    settings = settings or Settings.from_env()

    app = FastAPI(
        title=title,
        version=version,
        description="Aggregation proxy for market data, news and text generation providers.",
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.settings = settings
    app.state.adapters = adapters or RelayAdapters.from_settings(settings)
    app.state.quote_reader = quote_reader or QuoteReader(settings.QUOTES_FILE)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add exception handlers
    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request, exc: HTTPException  # noqa: ARG001
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
            ).model_dump(),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.error("unhandled_exception", path=request.url.path, error=str(exc), exc_info=exc)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Internal server error").model_dump(),
        )

    register_routes(app)

    public_dir = Path(settings.PUBLIC_DIR)
    if public_dir.is_dir():
        app.mount("/public", StaticFiles(directory=public_dir), name="public")
    else:
        logger.warning("public_dir_missing", path=str(public_dir))

    return app


def register_routes(app: FastAPI) -> None:
    """Register all routes on the application.

    Args:
        app: FastAPI application.
    """
    from market_relay.api.health import router as health_router

    app.include_router(health_router)

    @app.get(
        "/quotes",
        tags=["Quotes"],
        responses={500: ERROR_RESPONSES[500]},
        summary="Get quotes",
    )
    def get_quotes(reader: QuoteReader = Depends(get_quote_reader)) -> JSONResponse:
        """Return the local quotes file verbatim.

        The file is re-read on every request.
        """
        try:
            outcome: Outcome[Any] = Outcome.success(reader.get_quotes())
        except DataUnavailable as e:
            outcome = Outcome.failure(e)
        return to_response(outcome)

    @app.get(
        "/financial-summary/{ticker}",
        tags=["Market Data"],
        response_model=FinancialSummary,
        responses=ERROR_RESPONSES,
        summary="Get financial summary",
    )
    async def get_financial_summary(
        ticker: str,
        adapters: RelayAdapters = Depends(get_adapters),
    ) -> JSONResponse:
        """Fetch and reshape a ticker's market snapshot.

        The ticker is forwarded with its original casing.
        """
        checked = validate_identifier(ticker, "ticker")
        if not checked.ok:
            return to_response(checked)

        logger.info("fetching_financial_summary", ticker=ticker)
        outcome = await relay(
            adapters.market_summary.fetch(ticker),
            lambda raw: normalize_financial_summary(raw, ticker),
            failure_message=FINANCIAL_SUMMARY_FAILURE,
            event="financial_summary",
            ticker=ticker,
        )
        return to_response(outcome)

    @app.get(
        "/chart/{ticker}",
        tags=["Market Data"],
        responses=ERROR_RESPONSES,
        summary="Get intraday chart",
    )
    async def get_chart(
        ticker: str,
        adapters: RelayAdapters = Depends(get_adapters),
    ) -> JSONResponse:
        """Relay a one-day, five-minute chart for the uppercased ticker."""
        checked = validate_identifier(ticker, "ticker")
        if not checked.ok:
            return to_response(checked)

        symbol = ticker.upper()
        outcome = await relay(
            adapters.chart.fetch(symbol),
            lambda raw: normalize_chart(raw, symbol),
            failure_message=CHART_FAILURE,
            event="chart",
            ticker=symbol,
        )
        return to_response(outcome)

    @app.get(
        "/news/{symbols}",
        tags=["Market Data"],
        responses=ERROR_RESPONSES,
        summary="Get stock news",
    )
    async def get_news(
        symbols: str,
        adapters: RelayAdapters = Depends(get_adapters),
    ) -> JSONResponse:
        """Relay news stories for one or more symbols."""
        checked = validate_identifier(symbols, "symbols")
        if not checked.ok:
            return to_response(checked)

        outcome = await relay(
            adapters.news.fetch(symbols),
            normalize_news,
            failure_message=NEWS_FAILURE,
            event="news",
            symbols=symbols,
        )
        return to_response(outcome)

    @app.post(
        "/chat",
        tags=["Chat"],
        response_model=ChatReply,
        responses={
            400: {"model": ErrorResponse, "description": "Invalid prompt"},
            500: ERROR_RESPONSES[500],
        },
        openapi_extra={
            "requestBody": {
                "required": True,
                "content": {"application/json": {"schema": ChatRequest.model_json_schema()}},
            }
        },
        summary="Generate a chat reply",
    )
    async def chat(
        request: Request,
        adapters: RelayAdapters = Depends(get_adapters),
    ) -> JSONResponse:
        """Send the caller's prompt to the generation provider.

        The body is validated by hand so every malformed prompt gets the
        same 400 response.
        """
        try:
            body = await request.json()
        except ValueError:
            body = None

        checked = validate_chat_body(body)
        if checked.error is not None or checked.value is None:
            return to_response(checked)

        outcome = await relay(
            adapters.chat.generate(checked.value.prompt),
            normalize_chat,
            failure_message=CHAT_FAILURE,
            event="chat",
        )
        return to_response(outcome)
