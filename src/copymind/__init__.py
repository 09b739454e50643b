"""CopyMind: originality checks for rewritten articles."""

from .similarity import OriginalityGate, SemanticScorer, SimilarityReport

__version__ = "0.1.0"

__all__ = ["OriginalityGate", "SemanticScorer", "SimilarityReport", "__version__"]
