from typing import Any

import httpx

from docintel.analysis.client_base import BaseAnalysisClient
from docintel.analysis.exceptions import AnalysisNetworkError, AnalysisResponseError


class HttpAnalysisClient(BaseAnalysisClient):
    """Shared plumbing for providers called over raw REST with httpx."""

    provider_name = "http"

    def __init__(
        self,
        *,
        timeout_seconds: float,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._http = http_client or httpx.AsyncClient(timeout=timeout_seconds)

    async def _post_json(
        self,
        url: str,
        *,
        headers: dict[str, str],
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        try:
            response = await self._http.post(url, headers=headers, json=payload)
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AnalysisNetworkError(
                f"{self.provider_name} network error: {exc}"
            ) from exc
        except httpx.HTTPError as exc:
            raise AnalysisNetworkError(
                f"{self.provider_name} transport error: {exc}"
            ) from exc

        if response.status_code != 200:
            raise AnalysisNetworkError(
                f"{self.provider_name} API error: {response.status_code} {response.text[:200]}"
            )
        try:
            data = response.json()
        except ValueError as exc:
            raise AnalysisResponseError(
                f"{self.provider_name} returned a non-JSON envelope"
            ) from exc
        if not isinstance(data, dict):
            raise AnalysisResponseError(f"{self.provider_name} returned an unexpected envelope")
        return data

    async def aclose(self) -> None:
        await self._http.aclose()
