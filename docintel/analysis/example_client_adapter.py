"""Example analysis client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseAnalysisClient and register the provider in AnalyzerFactory.
"""

import json
from typing import ClassVar

from docintel.analysis.client_base import BaseAnalysisClient


class ExampleClientAdapter(BaseAnalysisClient):
    """Example adapter that returns a fixed, well-formed analysis reply.

    No network calls. Useful for local development and demos; enable it by
    listing ``example`` in ``ANALYSIS_PROVIDER_ORDER``.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "summary": "Example analysis: no external provider was called.",
        "entities": {
            "departments": [],
            "dates": [],
            "amounts": [],
            "locations": [],
            "people": [],
            "regulations": [],
        },
        "classification": {
            "category": "General",
            "department": "Operations",
            "priority": "medium",
            "tags": ["example"],
        },
        "safety": {
            "hasSafetyIssues": False,
            "safetyScore": 50,
            "issues": [],
            "recommendations": [],
        },
        "confidence": 0.5,
    }

    async def complete(
        self,
        *,
        model: str,
        prompt: str,
        temperature: float,
        max_tokens: int,
    ) -> str:
        _ = model, prompt, temperature, max_tokens
        return json.dumps(self.DEFAULT_RESPONSE)
