from typing import ClassVar

import httpx

from docintel.analysis.exceptions import AnalysisResponseError
from docintel.analysis.http_client_base import HttpAnalysisClient


class GeminiClientAdapter(HttpAnalysisClient):
    """Analysis client for Google's Generative Language REST API."""

    provider_name = "gemini"
    BASE_URL: ClassVar[str] = "https://generativelanguage.googleapis.com/v1beta"

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
            f"{self.BASE_URL}/models/{model}:generateContent",
            headers={"x-goog-api-key": self._api_key, "Content-Type": "application/json"},
            payload={
                "contents": [{"role": "user", "parts": [{"text": prompt}]}],
                "generationConfig": {
                    "temperature": temperature,
                    "maxOutputTokens": max_tokens,
                },
            },
        )
        try:
            parts = data["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError) as exc:
            raise AnalysisResponseError("gemini returned no candidates") from exc
        text = "".join(part.get("text", "") for part in parts if isinstance(part, dict))
        if not text.strip():
            raise AnalysisResponseError("gemini returned empty response")
        return text
