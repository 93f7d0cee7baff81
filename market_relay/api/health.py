"""Health check endpoints for the relay.

Liveness only confirms the process is serving. Readiness reports which
upstream adapters have credentials; it never calls the upstreams.
"""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from fastapi import APIRouter, Request

from market_relay.data.registry import RelayAdapters

router = APIRouter(tags=["Health"])


class ServiceStatus(str, Enum):
    """Overall service readiness."""

    READY = "ready"
    DEGRADED = "degraded"


def readiness_report(adapters: RelayAdapters, version: str) -> dict[str, Any]:
    """Summarize adapter configuration.

    Args:
        adapters: The application's adapters.
        version: Application version.

    Returns:
        Status ``ready`` when every adapter has credentials, else ``degraded``.
    """
    checks = {name: {"configured": adapter.is_configured} for name, adapter in adapters.items()}
    all_configured = all(check["configured"] for check in checks.values())
    return {
        "status": (ServiceStatus.READY if all_configured else ServiceStatus.DEGRADED).value,
        "timestamp": datetime.now(UTC).isoformat(),
        "version": version,
        "checks": checks,
    }


@router.get("/health")
async def health(request: Request) -> dict[str, Any]:
    """Basic liveness check."""
    return {
        "status": "ok",
        "timestamp": datetime.now(UTC).isoformat(),
        "version": request.app.version,
    }


@router.get("/health/ready")
async def readiness(request: Request) -> dict[str, Any]:
    """Report whether each upstream adapter is configured."""
    return readiness_report(request.app.state.adapters, request.app.version)
