"""Tests for upstream and response data models."""

import pytest
from pydantic import ValidationError

from market_relay.data.models import (
    ChatRequest,
    CohereGenerateResponse,
    FinancialSummary,
    FmpQuote,
)


class TestFmpQuote:
    """Tests for FmpQuote."""

    def test_parses_camel_case(self) -> None:
        quote = FmpQuote.model_validate(
            {"price": 10, "changesPercentage": 1.5, "priceAvg50": 9.5, "earningsAnnouncement": "2024-01-01"}
        )
        assert quote.price == 10
        assert isinstance(quote.price, int)

    def test_values_not_coerced(self) -> None:
        quote = FmpQuote.model_validate({"price": "185.50", "marketCap": True})
        assert quote.price == "185.50"
        assert quote.market_cap is True
        assert quote.changes_percentage == 1.5
        assert quote.price_avg_50 == 9.5
        assert quote.earnings_announcement == "2024-01-01"

    def test_extra_fields_allowed(self) -> None:
        quote = FmpQuote.model_validate({"name": "Apple Inc.", "timestamp": 1})
        assert quote.price is None


class TestFinancialSummary:
    """Tests for FinancialSummary."""

    def test_alias_dump(self) -> None:
        summary = FinancialSummary(changes_percentage="1%", day_range="1 - 2", year_range="0 - 3")
        data = summary.model_dump(by_alias=True)
        assert data["changesPercentage"] == "1%"
        assert data["dayRange"] == "1 - 2"
        assert data["earningsDate"] == "N/A"
        assert data["priceAvg200"] is None


class TestCohereGenerateResponse:
    """Tests for CohereGenerateResponse."""

    def test_missing_generations(self) -> None:
        assert CohereGenerateResponse.model_validate({"id": "x"}).generations is None

    def test_generations(self) -> None:
        body = CohereGenerateResponse.model_validate({"generations": [{"id": "g", "text": "hi"}]})
        assert body.generations[0] == {"id": "g", "text": "hi"}

    def test_generation_elements_unvalidated(self) -> None:
        body = CohereGenerateResponse.model_validate({"generations": [{"text": "hi"}, None]})
        assert body.generations == [{"text": "hi"}, None]


class TestChatRequest:
    """Tests for ChatRequest."""

    def test_valid(self) -> None:
        assert ChatRequest(prompt="hello").prompt == "hello"

    @pytest.mark.parametrize("prompt", ["", "   ", 5, None])
    def test_invalid(self, prompt) -> None:
        with pytest.raises(ValidationError):
            ChatRequest.model_validate({"prompt": prompt})
