"""Client for OpenAI-compatible embedding APIs."""

from typing import Any

import httpx

from ..config import EmbeddingConfig, get_config
from ..utils.logging import get_logger
from .models import EmbeddingFailure, EmbeddingResult, EmbeddingSuccess

logger = get_logger("embeddings")


class EmbeddingClient:
    """Client for the ``/embeddings`` endpoint of an OpenAI-compatible API.

    Errors never escape ``embed``: transport failures, error statuses and
    malformed bodies are returned as ``EmbeddingFailure``.
    """

    def __init__(
        self,
        config: EmbeddingConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or get_config().embedding
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client."""
        if self._client is None:
            headers = {}
            if self.config.api_key:
                headers["Authorization"] = f"Bearer {self.config.api_key}"
            self._client = httpx.AsyncClient(
                base_url=self.config.api_base,
                timeout=httpx.Timeout(self.config.timeout),
                headers=headers,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def embed(self, model: str, inputs: list[str]) -> EmbeddingResult:
        """Embed a batch of texts in a single request.

        Args:
            model: Embedding model identifier
            inputs: Texts to embed

        Returns:
            EmbeddingSuccess with one vector per input, or EmbeddingFailure
        """
        client = await self._get_client()
        try:
            response = await client.post(
                "/embeddings",
                json={"model": model, "input": inputs},
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            return EmbeddingFailure(
                reason=f"Embedding API returned HTTP {e.response.status_code}"
            )
        except httpx.HTTPError as e:
            return EmbeddingFailure(reason=f"{type(e).__name__}: {e}")
        except ValueError as e:
            return EmbeddingFailure(reason=f"Embedding API returned invalid JSON: {e}")

        logger.debug("Received embeddings for %d inputs from %s", len(inputs), model)
        return self._parse_response(data, expected=len(inputs))

    @staticmethod
    def _parse_response(data: Any, expected: int) -> EmbeddingResult:
        """Extract vectors from an ``{"data": [{"index", "embedding"}]}`` body."""
        try:
            items = data["data"]
            if any("index" in item for item in items):
                items = sorted(items, key=lambda item: item["index"])
            vectors = [[float(x) for x in item["embedding"]] for item in items]
        except (KeyError, TypeError, ValueError) as e:
            return EmbeddingFailure(reason=f"Malformed embedding response: {e!r}")

        if len(vectors) != expected:
            return EmbeddingFailure(
                reason=f"Expected {expected} embeddings, got {len(vectors)}"
            )
        return EmbeddingSuccess(vectors=vectors)
