"""Cohere text generation adapter."""

from typing import Any

import httpx

from market_relay.data.base import UpstreamAdapter

COHERE_MODEL = "command-xlarge"
COHERE_VERSION = "2022-12-06"
MAX_TOKENS = 250
TEMPERATURE = 0.7
TOP_K = 0
TOP_P = 0.75


class ChatAdapter(UpstreamAdapter):
    """Sends a prompt to Cohere ``/v1/generate``.

    Sampling parameters are fixed; only the prompt varies per request.
    """

    name = "cohere"
    GENERATE_URL = "https://api.cohere.ai/v1/generate"

    def __init__(
        self,
        api_key: str | None,
        *,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(timeout=timeout, http_client=http_client)
        self.api_key = api_key

    @property
    def is_configured(self) -> bool:
        """Check if API key is configured."""
        return bool(self.api_key)

    def build_payload(self, prompt: str) -> dict[str, Any]:
        """Build the generation request body for a prompt."""
        return {
            "model": COHERE_MODEL,
            "prompt": prompt,
            "max_tokens": MAX_TOKENS,
            "temperature": TEMPERATURE,
            "k": TOP_K,
            "p": TOP_P,
        }

    async def generate(self, prompt: str) -> Any:
        """Request a generation for the prompt.

        Args:
            prompt: Caller prompt, sent verbatim.

        Returns:
            Decoded JSON body, normally a mapping with a ``generations`` list.

        Raises:
            UpstreamError: If the outbound call fails.
        """
        return await self._request(
            "POST",
            self.GENERATE_URL,
            json=self.build_payload(prompt),
            headers={
                "Authorization": f"Bearer {self.api_key or ''}",
                "Content-Type": "application/json",
                "Cohere-Version": COHERE_VERSION,
            },
        )
