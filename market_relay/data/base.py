"""Shared HTTP plumbing for upstream adapters.

Every adapter performs exactly one outbound call per inbound request through
UpstreamAdapter._request, which turns transport failures, non-2xx statuses and
non-JSON bodies into UpstreamError.
"""

from typing import Any

import httpx
import structlog

from market_relay.errors import UpstreamError

logger = structlog.get_logger(__name__)

# Upstream bodies are truncated before they reach the logs
_MAX_LOGGED_BODY = 500


class UpstreamAdapter:
    """Base class for adapters that call a single upstream provider.

    Subclasses set ``name`` and expose one public coroutine that builds the
    request and hands it to ``_request``.

    Example:
        async with ChartAdapter(api_key="...", host="...") as adapter:
            payload = await adapter.fetch("AAPL")
    """

    name: str = "upstream"

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            timeout: Timeout in seconds for each outbound call.
            http_client: Optional pre-built HTTP client (used by tests).
        """
        self._timeout = timeout
        self._client = http_client
        self._logger = logger.bind(component=f"{self.name}_adapter")

    @property
    def is_configured(self) -> bool:
        """Check if the adapter has the credentials it needs."""
        return True

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create httpx client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Make one request to the upstream and return its decoded JSON body.

        Args:
            method: HTTP method.
            url: Absolute URL.
            params: Optional query parameters.
            headers: Optional request headers.
            json: Optional JSON body.

        Returns:
            Decoded JSON body (may be None for a ``null`` body).

        Raises:
            UpstreamError: On transport failure, non-2xx status or a body
                that is not JSON.
        """
        client = await self._get_client()

        self._logger.debug("upstream_request", method=method, url=url)

        try:
            response = await client.request(method, url, params=params, headers=headers, json=json)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self._logger.error("upstream_transport_error", url=url, error=str(e))
            raise UpstreamError(
                f"{self.name} request failed",
                status=0,
                details={"error": str(e)},
            ) from e

        if not response.is_success:
            body = response.text[:_MAX_LOGGED_BODY]
            self._logger.error("upstream_bad_status", url=url, status=response.status_code, body=body)
            raise UpstreamError(
                f"{self.name} returned HTTP {response.status_code}",
                status=response.status_code,
                details={"body": body},
            )

        try:
            data = response.json()
        except ValueError as e:
            self._logger.error("upstream_invalid_json", url=url, status=response.status_code)
            raise UpstreamError(
                f"{self.name} returned a non-JSON body",
                status=response.status_code,
                details={"body": response.text[:_MAX_LOGGED_BODY]},
            ) from e

        self._logger.debug("upstream_response", url=url, status=response.status_code)
        return data

    async def __aenter__(self) -> "UpstreamAdapter":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
