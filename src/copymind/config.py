"""Configuration system for CopyMind using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmbeddingConfig(BaseSettings):
    """Embedding provider configuration.

    The legacy variable names (``BASE_URL``, ``OPENROUTER_API_KEY``,
    ``EMBEDDING_MODEL``) are accepted alongside the ``EMBED_`` ones.
    """

    model_config = SettingsConfigDict(env_prefix="EMBED_", populate_by_name=True)

    api_base: str = Field(
        default="https://openrouter.ai/api/v1",
        validation_alias=AliasChoices("EMBED_API_BASE", "BASE_URL"),
        description="OpenAI-compatible API base URL",
    )
    api_key: str = Field(
        default="",
        validation_alias=AliasChoices("EMBED_API_KEY", "OPENROUTER_API_KEY"),
        description="Bearer token for the embedding API",
    )
    model_name: str = Field(
        default="text-embedding-3-large",
        validation_alias=AliasChoices("EMBED_MODEL_NAME", "EMBEDDING_MODEL"),
        description="Embedding model identifier",
    )
    timeout: float = Field(
        default=30.0,
        gt=0.0,
        description="Seconds before an embedding request is abandoned",
    )


class GateConfig(BaseSettings):
    """Originality gate thresholds.

    A rewrite passes only when every score is strictly below its threshold.
    """

    model_config = SettingsConfigDict(env_prefix="GATE_")

    ngram_size: int = Field(default=3, ge=1, description="Character n-gram window")
    char_overlap_threshold: float = Field(default=0.20, ge=0.0, le=1.0)
    jaccard_threshold: float = Field(default=0.25, ge=0.0, le=1.0)
    semantic_threshold: float = Field(default=0.75, ge=-1.0, le=1.0)


class ServerConfig(BaseSettings):
    """HTTP server configuration."""

    model_config = SettingsConfigDict(env_prefix="SERVER_", populate_by_name=True)

    host: str = Field(default="0.0.0.0")
    port: int = Field(
        default=4000,
        validation_alias=AliasChoices("SERVER_PORT", "PORT"),
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed by the CORS middleware",
    )


class AppConfig(BaseSettings):
    """Main application configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Sub-configurations
    embedding: EmbeddingConfig = Field(default_factory=EmbeddingConfig)
    gate: GateConfig = Field(default_factory=GateConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    log_file: Path | None = Field(default=None)

    @classmethod
    def from_yaml(cls, path: Path) -> "AppConfig":
        """Load configuration from YAML file."""
        import yaml

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self, path: Path) -> None:
        """Save configuration to YAML file."""
        import yaml

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(
                self.model_dump(mode="json"),
                f,
                default_flow_style=False,
                allow_unicode=True,
            )


# Global config instance (lazy-loaded)
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from file or create default."""
    global _config
    if path and path.exists():
        _config = AppConfig.from_yaml(path)
    else:
        _config = AppConfig()
    return _config
