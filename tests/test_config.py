"""Tests for copymind/config.py - Configuration system."""

from pathlib import Path

import pytest

import copymind.config as config_mod
from copymind.config import (
    AppConfig,
    EmbeddingConfig,
    GateConfig,
    ServerConfig,
    get_config,
    load_config,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from variables set in the developer's shell."""
    for name in (
        "EMBED_API_BASE", "BASE_URL", "EMBED_API_KEY", "OPENROUTER_API_KEY",
        "EMBED_MODEL_NAME", "EMBEDDING_MODEL", "EMBED_TIMEOUT",
        "GATE_NGRAM_SIZE", "GATE_CHAR_OVERLAP_THRESHOLD", "GATE_JACCARD_THRESHOLD",
        "GATE_SEMANTIC_THRESHOLD", "SERVER_PORT", "PORT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_mod, "_config", None)


# ============================================================================
# EmbeddingConfig Tests
# ============================================================================


class TestEmbeddingConfig:
    """Tests for embedding provider configuration."""

    def test_default_values(self):
        config = EmbeddingConfig()

        assert config.api_base == "https://openrouter.ai/api/v1"
        assert config.api_key == ""
        assert config.model_name == "text-embedding-3-large"
        assert config.timeout == 30.0

    def test_prefixed_env_vars(self, monkeypatch):
        monkeypatch.setenv("EMBED_API_BASE", "http://localhost:8080/v1")
        monkeypatch.setenv("EMBED_MODEL_NAME", "bge-m3")
        monkeypatch.setenv("EMBED_TIMEOUT", "5")

        config = EmbeddingConfig()

        assert config.api_base == "http://localhost:8080/v1"
        assert config.model_name == "bge-m3"
        assert config.timeout == 5.0

    def test_legacy_env_vars(self, monkeypatch):
        monkeypatch.setenv("BASE_URL", "https://proxy.example/v1")
        monkeypatch.setenv("OPENROUTER_API_KEY", "sk-or-123")
        monkeypatch.setenv("EMBEDDING_MODEL", "text-embedding-3-small")

        config = EmbeddingConfig()

        assert config.api_base == "https://proxy.example/v1"
        assert config.api_key == "sk-or-123"
        assert config.model_name == "text-embedding-3-small"

    def test_custom_values(self):
        config = EmbeddingConfig(model_name="custom", timeout=1.5)

        assert config.model_name == "custom"
        assert config.timeout == 1.5

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValueError):
            EmbeddingConfig(timeout=0)


# ============================================================================
# GateConfig Tests
# ============================================================================


class TestGateConfig:
    """Tests for threshold configuration."""

    def test_default_values(self):
        config = GateConfig()

        assert config.ngram_size == 3
        assert config.char_overlap_threshold == 0.20
        assert config.jaccard_threshold == 0.25
        assert config.semantic_threshold == 0.75

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("GATE_SEMANTIC_THRESHOLD", "0.8")
        monkeypatch.setenv("GATE_NGRAM_SIZE", "4")

        config = GateConfig()

        assert config.semantic_threshold == 0.8
        assert config.ngram_size == 4

    @pytest.mark.parametrize(
        "kwargs",
        [{"ngram_size": 0}, {"jaccard_threshold": 1.5}, {"char_overlap_threshold": -0.1}],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            GateConfig(**kwargs)


# ============================================================================
# ServerConfig Tests
# ============================================================================


class TestServerConfig:
    """Tests for server configuration."""

    def test_default_values(self):
        config = ServerConfig()

        assert config.port == 4000
        assert config.cors_origins == ["*"]

    def test_legacy_port(self, monkeypatch):
        monkeypatch.setenv("PORT", "5050")

        assert ServerConfig().port == 5050


# ============================================================================
# AppConfig Tests
# ============================================================================


class TestAppConfig:
    """Tests for the root configuration."""

    def test_yaml_round_trip(self, tmp_path: Path):
        path = tmp_path / "copymind.yaml"
        original = AppConfig(
            embedding=EmbeddingConfig(model_name="bge-m3"),
            gate=GateConfig(semantic_threshold=0.8),
            log_level="DEBUG",
        )

        original.to_yaml(path)
        loaded = AppConfig.from_yaml(path)

        assert loaded.embedding.model_name == "bge-m3"
        assert loaded.gate.semantic_threshold == 0.8
        assert loaded.log_level == "DEBUG"

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_load_config_from_file(self, tmp_path: Path):
        path = tmp_path / "copymind.yaml"
        path.write_text("gate:\n  jaccard_threshold: 0.3\n", encoding="utf-8")

        config = load_config(path)

        assert config.gate.jaccard_threshold == 0.3
        assert get_config() is config

    def test_load_config_missing_file(self, tmp_path: Path):
        config = load_config(tmp_path / "missing.yaml")

        assert config.gate.jaccard_threshold == 0.25
