"""Data models for upstream payloads and relay responses.

This module defines the Pydantic models used to parse upstream provider
responses and the stable output schemas served by the API.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, JsonValue, StrictStr, field_validator
from pydantic.alias_generators import to_camel

NO_EARNINGS_DATE = "N/A"
NO_GENERATION_TEXT = "No response generated."

# Relayed exactly as the provider sent it
Passthrough = JsonValue


class FmpQuote(BaseModel):
    """One element of a Financial Modeling Prep ``/quote`` response.

    All fields are optional; the provider omits or nulls them freely.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    symbol: Passthrough = None
    price: Passthrough = None
    changes_percentage: Passthrough = Field(default=None, alias="changesPercentage")
    change: Passthrough = None
    day_low: Passthrough = Field(default=None, alias="dayLow")
    day_high: Passthrough = Field(default=None, alias="dayHigh")
    year_low: Passthrough = Field(default=None, alias="yearLow")
    year_high: Passthrough = Field(default=None, alias="yearHigh")
    market_cap: Passthrough = Field(default=None, alias="marketCap")
    price_avg_50: Passthrough = Field(default=None, alias="priceAvg50")
    price_avg_200: Passthrough = Field(default=None, alias="priceAvg200")
    exchange: Passthrough = None
    volume: Passthrough = None
    avg_volume: Passthrough = Field(default=None, alias="avgVolume")
    open: Passthrough = None
    previous_close: Passthrough = Field(default=None, alias="previousClose")
    eps: Passthrough = None
    pe: Passthrough = None
    earnings_announcement: Passthrough = Field(default=None, alias="earningsAnnouncement")
    shares_outstanding: Passthrough = Field(default=None, alias="sharesOutstanding")


class FinancialSummary(BaseModel):
    """Financial summary served by ``/financial-summary/{ticker}``.

    Serialized with camelCase keys (``changesPercentage``, ``dayRange``, ...).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    price: Passthrough = None
    changes_percentage: str
    change: Passthrough = None
    day_range: str
    year_range: str
    market_cap: Passthrough = None
    price_avg50: Passthrough = None
    price_avg200: Passthrough = None
    exchange: Passthrough = None
    volume: Passthrough = None
    avg_volume: Passthrough = None
    open: Passthrough = None
    previous_close: Passthrough = None
    eps: Passthrough = None
    pe_ratio: Passthrough = None
    earnings_date: Passthrough = NO_EARNINGS_DATE
    shares_outstanding: Passthrough = None


class CohereGeneration(BaseModel):
    """A single generation returned by Cohere ``/v1/generate``."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    text: str | None = None


class CohereGenerateResponse(BaseModel):
    """Body of a Cohere ``/v1/generate`` response.

    ``generations`` is None when the provider left it out entirely. Only the
    first generation is read, so elements are left unvalidated here.
    """

    model_config = ConfigDict(extra="allow")

    id: Any = None
    prompt: Any = None
    generations: list[Any] | None = None


class ChatRequest(BaseModel):
    """Body of a ``/chat`` request."""

    model_config = {
        "json_schema_extra": {
            "examples": [{"prompt": "Summarize today's moves in AAPL"}],
        }
    }

    prompt: StrictStr = Field(..., description="Prompt forwarded verbatim to the generation provider")

    @field_validator("prompt")
    @classmethod
    def prompt_not_blank(cls, value: str) -> str:
        """Reject prompts that are empty once whitespace is trimmed."""
        if not value.strip():
            raise ValueError("prompt must not be blank")
        # Forwarded untrimmed
        return value


class ChatReply(BaseModel):
    """Body of a successful ``/chat`` response."""

    response: str = Field(..., description="Generated text")
