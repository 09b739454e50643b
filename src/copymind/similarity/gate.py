"""Originality gate combining lexical and semantic similarity."""

import asyncio

from ..config import AppConfig, GateConfig, get_config
from ..embeddings import EmbeddingClient, EmbeddingProvider
from ..utils.logging import get_logger
from .algorithms import jaccard_similarity, ngram_overlap
from .models import SimilarityReport
from .semantic import SemanticScorer

logger = get_logger("gate")


class TextPairValidationError(ValueError):
    """Original or rewritten text is missing or empty."""


class OriginalityGate:
    """Decide whether a rewrite is different enough from its source.

    Three independent signals are computed:
    - Character n-gram overlap: verbatim phrasing
    - Jaccard similarity: shared vocabulary
    - Semantic similarity: equivalent meaning

    The gate is conjunctive on low similarity. Any single score at or
    above its threshold rejects the rewrite.
    """

    def __init__(self, semantic_scorer: SemanticScorer, config: GateConfig | None = None):
        """Initialize gate.

        Args:
            semantic_scorer: Scorer backed by an embedding provider
            config: Thresholds and n-gram size
        """
        self.semantic_scorer = semantic_scorer
        self.config = config or get_config().gate

    def decide(self, char_overlap: float, jaccard: float, semantic: float) -> bool:
        """Apply the thresholds to a set of scores."""
        return (
            char_overlap < self.config.char_overlap_threshold
            and jaccard < self.config.jaccard_threshold
            and semantic < self.config.semantic_threshold
        )

    async def evaluate(self, original: str | None, rewritten: str | None) -> SimilarityReport:
        """Score a text pair and decide whether the rewrite passes.

        Args:
            original: Original source text
            rewritten: Candidate rewrite

        Returns:
            SimilarityReport with the three scores and the decision

        Raises:
            TextPairValidationError: If either text is missing or empty
        """
        if not original or not rewritten:
            raise TextPairValidationError("Both original and rewritten texts are required.")

        # The embedding round-trip runs while the local scores are computed
        semantic_task = asyncio.create_task(
            self.semantic_scorer.score(original, rewritten)
        )
        char_overlap = ngram_overlap(original, rewritten, self.config.ngram_size)
        jaccard = jaccard_similarity(original, rewritten)
        semantic = await semantic_task

        passed = self.decide(char_overlap, jaccard, semantic)
        logger.info(
            "Originality check: char_overlap=%.3f jaccard=%.3f semantic=%.3f pass=%s",
            char_overlap,
            jaccard,
            semantic,
            passed,
        )

        return SimilarityReport(
            char_overlap=char_overlap,
            jaccard=jaccard,
            semantic=semantic,
            passed=passed,
        )


def create_gate(
    config: AppConfig | None = None,
    provider: EmbeddingProvider | None = None,
) -> OriginalityGate:
    """Factory function to create a gate from application config.

    Args:
        config: Application config (defaults to the global one)
        provider: Embedding provider (defaults to an EmbeddingClient)

    Returns:
        Configured OriginalityGate
    """
    config = config or get_config()
    provider = provider or EmbeddingClient(config.embedding)
    scorer = SemanticScorer(provider, config.embedding)
    return OriginalityGate(scorer, config.gate)
