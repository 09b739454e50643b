"""Lexical and vector similarity algorithms used by the originality gate.

References:
- Broder, A. Z. (1997). On the resemblance and containment of documents.
- Manning, Raghavan & Schütze (2008). Introduction to Information Retrieval, ch. 6.
"""

import math
import re
from typing import Sequence

_WORD_RE = re.compile(r"\w+", re.UNICODE)


def tokenize(text: str) -> list[str]:
    """Split text into lowercase word tokens.

    Whitespace and punctuation delimit words. Scripts written without
    spaces (Chinese, Japanese) yield one token per unbroken run.
    """
    return _WORD_RE.findall(text.lower())


def char_ngrams(text: str, n: int = 3) -> set[str]:
    """Extract the set of lowercase character n-grams.

    Args:
        text: Input text
        n: Window size in characters

    Returns:
        Set of distinct n-grams; empty when the text is shorter than n
    """
    if n < 1:
        raise ValueError(f"n-gram size must be positive, got {n}")

    lowered = text.lower()
    if len(lowered) < n:
        return set()
    return {lowered[i : i + n] for i in range(len(lowered) - n + 1)}


def ngram_overlap(original: str, rewritten: str, n: int = 3) -> float:
    """Fraction of the original's n-grams that reappear in the rewrite.

    This is a containment measure, not a symmetric similarity:
    ``ngram_overlap(a, b)`` is normalised by the n-grams of ``a`` only.

    Args:
        original: Original text
        rewritten: Rewritten text
        n: N-gram size

    Returns:
        Overlap ratio (0-1)
    """
    if not original or not rewritten:
        return 0.0

    original_ngrams = char_ngrams(original, n)
    if not original_ngrams:
        return 0.0

    rewritten_ngrams = char_ngrams(rewritten, n)
    common = rewritten_ngrams & original_ngrams

    return len(common) / len(original_ngrams)


def jaccard_similarity(original: str, rewritten: str) -> float:
    """Calculate Jaccard similarity coefficient of the word token sets.

    J(A,B) = |A ∩ B| / |A ∪ B|

    Args:
        original: Original text
        rewritten: Rewritten text

    Returns:
        Jaccard similarity (0-1); 0 when neither text has any tokens
    """
    tokens1 = set(tokenize(original))
    tokens2 = set(tokenize(rewritten))

    union = tokens1 | tokens2
    if not union:
        return 0.0

    return len(tokens1 & tokens2) / len(union)


def cosine_similarity(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """Cosine of the angle between two vectors.

    Args:
        vec1: First vector
        vec2: Second vector, same dimensionality as the first

    Returns:
        Cosine similarity clamped to [-1, 1]

    Raises:
        ValueError: If the dimensions differ, either vector has zero norm,
            or a component is NaN or infinite
    """
    if len(vec1) != len(vec2):
        raise ValueError(f"Dimension mismatch: {len(vec1)} != {len(vec2)}")

    dot_product = sum(a * b for a, b in zip(vec1, vec2))
    magnitude1 = math.sqrt(sum(a * a for a in vec1))
    magnitude2 = math.sqrt(sum(b * b for b in vec2))

    if magnitude1 == 0 or magnitude2 == 0:
        raise ValueError("Cosine similarity is undefined for a zero vector")

    similarity = dot_product / (magnitude1 * magnitude2)
    if not all(math.isfinite(x) for x in (dot_product, magnitude1, magnitude2, similarity)):
        raise ValueError("Cosine similarity is undefined for non-finite vector components")

    # Float rounding can push identical vectors slightly past 1
    return max(-1.0, min(1.0, similarity))
