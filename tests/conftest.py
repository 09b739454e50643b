"""
Shared pytest fixtures for CopyMind tests.

Provides fixtures for:
- Fake embedding providers (success, failure, raising, hanging)
- Gate configuration with default thresholds
- Gate factory wired to a fake provider
"""

import sys
from pathlib import Path
from typing import Callable, Optional

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from copymind.config import EmbeddingConfig, GateConfig
from copymind.embeddings import EmbeddingFailure, EmbeddingSuccess
from copymind.similarity import OriginalityGate, SemanticScorer

from fakes import FakeEmbeddingProvider


# =============================================================================
# Fake Embedding Providers
# =============================================================================

@pytest.fixture
def orthogonal_provider() -> FakeEmbeddingProvider:
    """Provider whose two vectors are orthogonal (cosine 0)."""
    return FakeEmbeddingProvider(EmbeddingSuccess(vectors=[[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]]))


@pytest.fixture
def identical_provider() -> FakeEmbeddingProvider:
    """Provider whose two vectors are identical (cosine 1)."""
    return FakeEmbeddingProvider(EmbeddingSuccess(vectors=[[0.3, 0.4, 0.5], [0.3, 0.4, 0.5]]))


@pytest.fixture
def failing_provider() -> FakeEmbeddingProvider:
    """Provider reporting a failure result."""
    return FakeEmbeddingProvider(EmbeddingFailure(reason="HTTP 401 Unauthorized"))


@pytest.fixture
def raising_provider() -> FakeEmbeddingProvider:
    """Provider that raises instead of returning a result."""
    return FakeEmbeddingProvider(error=ConnectionError("connection refused"))


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def embedding_config() -> EmbeddingConfig:
    """Embedding config that never touches the environment defaults."""
    return EmbeddingConfig(
        api_base="http://embeddings.test/v1",
        api_key="test-key",
        model_name="test-embedding-model",
        timeout=2.0,
    )


@pytest.fixture
def gate_config() -> GateConfig:
    """Default thresholds."""
    return GateConfig()


# =============================================================================
# Gate Factory
# =============================================================================

@pytest.fixture
def make_gate(embedding_config: EmbeddingConfig, gate_config: GateConfig) -> Callable[..., OriginalityGate]:
    """Factory building a gate around a given provider."""
    def _create(provider, config: Optional[GateConfig] = None) -> OriginalityGate:
        scorer = SemanticScorer(provider, embedding_config)
        return OriginalityGate(scorer, config or gate_config)
    return _create
