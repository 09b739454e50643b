"""Data models for originality checks."""

from pydantic import BaseModel, ConfigDict, Field


class SimilarityReport(BaseModel):
    """Scores for one (original, rewritten) pair and the gate decision.

    Serialises with the wire names ``charOverlap``, ``jaccard``,
    ``semantic`` and ``pass``.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    char_overlap: float = Field(
        ge=0.0,
        le=1.0,
        alias="charOverlap",
        description="Share of the original's character n-grams found in the rewrite",
    )
    jaccard: float = Field(ge=0.0, le=1.0, description="Jaccard index of word tokens")
    semantic: float = Field(
        ge=-1.0,
        le=1.0,
        description="Cosine similarity of the text embeddings (0 if unavailable)",
    )
    passed: bool = Field(alias="pass", description="True when the rewrite is original enough")

    def summary(self) -> str:
        """Generate human-readable summary."""
        status = "PASSED" if self.passed else "FAILED"
        lines = [
            f"Originality check [{status}]",
            "---",
            f"Character overlap: {self.char_overlap * 100:.1f}%",
            f"Vocabulary Jaccard: {self.jaccard * 100:.1f}%",
            f"Semantic similarity: {self.semantic * 100:.1f}%",
        ]
        if not self.passed:
            lines += [
                "---",
                "Similarity is too high. Regenerate with a more aggressive "
                "rewrite mode or replace the examples.",
            ]
        return "\n".join(lines)
