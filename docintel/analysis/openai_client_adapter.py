import httpx
import openai

from docintel.analysis.client_base import BaseAnalysisClient
from docintel.analysis.exceptions import AnalysisNetworkError, AnalysisResponseError


class OpenAIClientAdapter(BaseAnalysisClient):
    """Analysis AI client adapter built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: float,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    async def complete(
        self,
        *,
        model: str,
        prompt: str,
        temperature: float,
        max_tokens: int,
    ) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AnalysisNetworkError(
                f"openai network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise AnalysisNetworkError(
                f"openai API error: {exc}"
            ) from exc

        if not response.choices:
            raise AnalysisResponseError("openai returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise AnalysisResponseError("openai returned empty response")
        return content

    async def aclose(self) -> None:
        await self._client.close()
