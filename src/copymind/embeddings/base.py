"""Embedding provider interface."""

from typing import Protocol

from .models import EmbeddingResult


class EmbeddingProvider(Protocol):
    """Anything that can embed a batch of texts.

    Implementations return one vector per input, in input order, or an
    ``EmbeddingFailure`` describing why they could not.
    """

    async def embed(self, model: str, inputs: list[str]) -> EmbeddingResult:
        ...
