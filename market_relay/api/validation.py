"""Input validation performed before any upstream call."""

from typing import Any

from pydantic import ValidationError as SchemaError

from market_relay.api.normalizer import Outcome
from market_relay.data.models import ChatRequest
from market_relay.errors import ValidationError

INVALID_PROMPT = "Invalid prompt input."


def validate_chat_body(body: Any) -> Outcome[ChatRequest]:
    """Validate a decoded ``/chat`` body.

    The prompt must be a string that is not blank once trimmed. Anything
    else, including a body that is not a JSON object, is rejected.
    """
    if not isinstance(body, dict):
        return Outcome.failure(ValidationError(INVALID_PROMPT, details={"reason": "body is not an object"}))
    try:
        return Outcome.success(ChatRequest.model_validate(body))
    except SchemaError as e:
        return Outcome.failure(ValidationError(INVALID_PROMPT, details={"errors": e.errors()}))


def validate_identifier(value: str | None, field: str) -> Outcome[str]:
    """Check that a path identifier (ticker, symbol list) is present.

    No format or whitespace check is made; the value is returned untouched.
    """
    if not value:
        return Outcome.failure(ValidationError(f"Missing {field}."))
    return Outcome.success(value)
