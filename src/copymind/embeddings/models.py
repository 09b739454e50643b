"""Outcome types returned by embedding providers."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class EmbeddingSuccess:
    """One vector per input, in input order."""

    vectors: list[list[float]]


@dataclass(frozen=True)
class EmbeddingFailure:
    """Provider could not produce embeddings."""

    reason: str


EmbeddingResult = Union[EmbeddingSuccess, EmbeddingFailure]
