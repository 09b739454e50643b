"""Embedding-based semantic similarity."""

import asyncio

from ..config import EmbeddingConfig
from ..embeddings import EmbeddingFailure, EmbeddingProvider, EmbeddingResult
from ..utils.logging import get_logger
from .algorithms import cosine_similarity

logger = get_logger("semantic")

# Score reported whenever embeddings are unavailable
FAIL_SOFT_SCORE = 0.0


class SemanticScorer:
    """Cosine similarity of provider embeddings, degrading to 0 on failure.

    A failed provider makes the pair look dissimilar, so an outage can let
    a close paraphrase through the gate. Every degraded call is logged.
    """

    def __init__(self, provider: EmbeddingProvider, config: EmbeddingConfig):
        self.provider = provider
        self.model = config.model_name
        self.timeout = config.timeout

    async def score(self, original: str, rewritten: str) -> float:
        """Semantic similarity of two texts.

        Args:
            original: Original text
            rewritten: Rewritten text

        Returns:
            Cosine similarity, or 0 when either text is empty or the
            provider fails
        """
        if not original or not rewritten:
            return FAIL_SOFT_SCORE

        result = await self._request_embeddings([original, rewritten])

        if isinstance(result, EmbeddingFailure):
            logger.warning(
                "Semantic similarity check failed, returning %s: %s",
                FAIL_SOFT_SCORE,
                result.reason,
            )
            return FAIL_SOFT_SCORE

        if len(result.vectors) != 2:
            logger.warning(
                "Semantic similarity check failed, returning %s: expected 2 vectors, got %d",
                FAIL_SOFT_SCORE,
                len(result.vectors),
            )
            return FAIL_SOFT_SCORE

        original_vec, rewritten_vec = result.vectors
        try:
            return cosine_similarity(original_vec, rewritten_vec)
        except ValueError as e:
            logger.warning(
                "Semantic similarity check failed, returning %s: %s",
                FAIL_SOFT_SCORE,
                e,
            )
            return FAIL_SOFT_SCORE

    async def _request_embeddings(self, inputs: list[str]) -> EmbeddingResult:
        """Call the provider once, converting raised errors and timeouts to failures."""
        try:
            return await asyncio.wait_for(
                self.provider.embed(self.model, inputs),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            return EmbeddingFailure(
                reason=f"Embedding request timed out after {self.timeout}s"
            )
        except Exception as e:
            return EmbeddingFailure(reason=f"{type(e).__name__}: {e}")
