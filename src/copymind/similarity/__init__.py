"""Similarity scoring and the originality gate."""

from .gate import OriginalityGate, TextPairValidationError, create_gate
from .models import SimilarityReport
from .semantic import SemanticScorer

__all__ = [
    "OriginalityGate",
    "SemanticScorer",
    "SimilarityReport",
    "TextPairValidationError",
    "create_gate",
]
