"""Embedding providers used by the semantic scorer."""

from .base import EmbeddingProvider
from .client import EmbeddingClient
from .models import EmbeddingFailure, EmbeddingResult, EmbeddingSuccess

__all__ = [
    "EmbeddingClient",
    "EmbeddingFailure",
    "EmbeddingProvider",
    "EmbeddingResult",
    "EmbeddingSuccess",
]
