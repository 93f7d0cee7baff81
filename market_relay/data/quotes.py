"""Reader for the local quotes JSON file."""

import json
from pathlib import Path
from typing import Any

import structlog

from market_relay.errors import DataUnavailable

logger = structlog.get_logger(__name__)

QUOTES_UNAVAILABLE_MESSAGE = "Failed to read quiz data"


class QuoteReader:
    """Loads the quotes file on every call.

    The file's structure is opaque: it is parsed and returned as-is, never
    cached and never mutated.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def get_quotes(self) -> Any:
        """Read and parse the quotes file.

        Returns:
            Parsed JSON content.

        Raises:
            DataUnavailable: If the file is missing, unreadable or not JSON.
        """
        try:
            with self.path.open(encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.error("quotes_read_failed", path=str(self.path), error=str(e))
            raise DataUnavailable(
                QUOTES_UNAVAILABLE_MESSAGE,
                details={"path": str(self.path), "error": str(e)},
            ) from e
