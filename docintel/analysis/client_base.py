from abc import ABC, abstractmethod


class BaseAnalysisClient(ABC):
    """Contract for provider-specific analysis AI clients."""

    @abstractmethod
    async def complete(
        self,
        *,
        model: str,
        prompt: str,
        temperature: float,
        max_tokens: int,
    ) -> str:
        """Return the provider's reply as plain text.

        Raises:
            AnalysisNetworkError: on transport failures or non-2xx replies.
            AnalysisResponseError: when the reply carries no text.
        """

    async def aclose(self) -> None:
        """Release pooled connections, if the client holds any."""
