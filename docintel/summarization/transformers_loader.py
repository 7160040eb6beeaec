from collections.abc import Callable
from typing import Any


def load_summarization_pipeline(model_name: str) -> Callable[..., Any]:
    """Load a Hugging Face summarization pipeline on CPU.

    Blocking: downloads weights on first use. Call it off the event loop.
    transformers is an optional extra, so it is imported here rather than at
    module level; a missing install surfaces as an initialization failure.
    """
    from transformers import pipeline

    return pipeline("summarization", model=model_name, device=-1)
