from typing import ClassVar

import httpx

from docintel.analysis.exceptions import AnalysisResponseError
from docintel.analysis.http_client_base import HttpAnalysisClient


class AnthropicClientAdapter(HttpAnalysisClient):
    """Analysis client for the Anthropic Messages REST API."""

    provider_name = "anthropic"
    API_URL: ClassVar[str] = "https://api.anthropic.com/v1/messages"
    API_VERSION: ClassVar[str] = "2023-06-01"

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: float,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(timeout_seconds=timeout_seconds, http_client=http_client)
        self._api_key = api_key

    async def complete(
        self,
        *,
        model: str,
        prompt: str,
        temperature: float,
        max_tokens: int,
    ) -> str:
        data = await self._post_json(
            self.API_URL,
            headers={
                "x-api-key": self._api_key,
                "anthropic-version": self.API_VERSION,
                "Content-Type": "application/json",
            },
            payload={
                "model": model,
                "max_tokens": max_tokens,
                "temperature": temperature,
                "messages": [{"role": "user", "content": prompt}],
            },
        )
        blocks = data.get("content")
        if not isinstance(blocks, list):
            raise AnalysisResponseError("anthropic returned no content")
        text = "".join(
            block.get("text", "")
            for block in blocks
            if isinstance(block, dict) and block.get("type", "text") == "text"
        )
        if not text.strip():
            raise AnalysisResponseError("anthropic returned empty response")
        return text
