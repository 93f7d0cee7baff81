"""Error taxonomy for the relay.

Exception Hierarchy:
    RelayError (base)
    ├── ValidationError - Bad or missing caller input (400)
    ├── NotFoundError - Upstream answered but had no usable data (404)
    ├── UpstreamError - Outbound call failed or payload was malformed (500)
    └── DataUnavailable - Local resource unreadable (500)

Every error carries a client-facing ``message`` and server-side ``details``.
Only the message ever reaches a caller; details are for logs.
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Kind of failure a request can end in."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    UPSTREAM = "upstream"
    DATA_UNAVAILABLE = "data_unavailable"


STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UPSTREAM: 500,
    ErrorKind.DATA_UNAVAILABLE: 500,
}


class RelayError(Exception):
    """Base exception for all relay errors.

    Attributes:
        message: Client-facing error message.
        details: Additional error details, logged only.
    """

    kind: ErrorKind = ErrorKind.UPSTREAM

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    @property
    def status_code(self) -> int:
        """HTTP status this error maps to."""
        return STATUS_BY_KIND[self.kind]

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "kind": self.kind.value,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(RelayError):
    """Caller input is missing or malformed."""

    kind = ErrorKind.VALIDATION


class NotFoundError(RelayError):
    """Upstream call succeeded but returned no usable data."""

    kind = ErrorKind.NOT_FOUND


class UpstreamError(RelayError):
    """Outbound call failed or returned a structurally invalid payload.

    Attributes:
        status: Upstream HTTP status, 0 for transport failures, None if unknown.
    """

    kind = ErrorKind.UPSTREAM

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.status = status

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        base = super().to_dict()
        base["status"] = self.status
        return base


class DataUnavailable(RelayError):
    """Local data resource is missing, unreadable or unparsable."""

    kind = ErrorKind.DATA_UNAVAILABLE
