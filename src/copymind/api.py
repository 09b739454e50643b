"""REST API for the CopyMind originality gate.

Run: uvicorn copymind.api:app --port 4000
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .config import AppConfig, get_config
from .embeddings import EmbeddingClient
from .similarity import OriginalityGate, SimilarityReport, TextPairValidationError, create_gate
from .utils.logging import get_logger, setup_logging

logger = get_logger("api")

SERVICE_NAME = "CopyMind API"


# ── Models ────────────────────────────────────────────

class CheckSimilarityRequest(BaseModel):
    """Texts to compare."""

    original: Optional[str] = Field(default=None, description="Source text")
    rewritten: Optional[str] = Field(default=None, description="Candidate rewrite")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "original": "深圳打工人下班写作不易",
                    "rewritten": "白天上班的人晚上还要抽空码字，确实辛苦",
                }
            ]
        }
    }


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


# ── Routes ────────────────────────────────────────────

def get_gate(request: Request) -> OriginalityGate:
    """Gate built by the application lifespan."""
    return request.app.state.gate


router = APIRouter()


@router.get("/health", response_model=HealthResponse, tags=["system"])
async def health_check():
    """Liveness check."""
    return HealthResponse(status="ok", service=SERVICE_NAME)


@router.post("/check_similarity", response_model=SimilarityReport, tags=["originality"])
async def check_similarity(
    body: CheckSimilarityRequest,
    gate: OriginalityGate = Depends(get_gate),
):
    """Compare a rewrite against its source.

    Returns character n-gram overlap, word Jaccard, embedding cosine
    similarity and whether the rewrite passes the originality gate.
    """
    try:
        return await gate.evaluate(body.original, body.rewritten)
    except TextPairValidationError:
        raise
    except Exception:
        logger.exception("Error checking similarity")
        return _error_response(500, "Internal server error")


# ── App ───────────────────────────────────────────────

def create_app(
    config: AppConfig | None = None,
    gate: OriginalityGate | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        config: Application config (defaults to the global one)
        gate: Prebuilt gate; when omitted one is created at startup with an
            EmbeddingClient that is closed on shutdown

    Returns:
        Configured FastAPI app
    """
    config = config or get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(config.log_level, config.log_file)
        client: EmbeddingClient | None = None
        if gate is None:
            client = EmbeddingClient(config.embedding)
            app.state.gate = create_gate(config, provider=client)
            logger.info(
                "Embedding client initialized (model=%s, base=%s)",
                config.embedding.model_name,
                config.embedding.api_base,
            )
        else:
            app.state.gate = gate
        yield
        if client is not None:
            await client.close()
        app.state.gate = None

    app = FastAPI(
        title=SERVICE_NAME,
        description="Originality gate for rewritten articles",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(TextPairValidationError)
    async def text_pair_error_handler(_: Request, exc: TextPairValidationError):
        return _error_response(400, str(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(_: Request, exc: RequestValidationError):
        errors = exc.errors()
        first_error = errors[0].get("msg") if errors else "Invalid request payload"
        return _error_response(400, first_error)

    app.include_router(router)
    # Path used by the original web front-end
    app.include_router(router, prefix="/api", include_in_schema=False)

    return app


app = create_app()


def run_server(host: str | None = None, port: int | None = None):
    """Run the API server."""
    import uvicorn

    server = get_config().server
    uvicorn.run(app, host=host or server.host, port=port or server.port)


if __name__ == "__main__":
    run_server()
