"""FastAPI application exposing store / compare / clear."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from embedstore import __version__
from embedstore.api.schemas import (
    CompareRequest,
    CompareResponse,
    ErrorResponse,
    HealthResponse,
    StoreRequest,
)
from embedstore.config import Settings, get_settings
from embedstore.exceptions import (
    DimensionalityMismatchError,
    ProviderError,
    ValidationError,
)
from embedstore.models.embedding import ClearResult, StoreResult
from embedstore.models.enums import ProviderErrorType
from embedstore.service import EmbeddingService


logger = logging.getLogger(__name__)

PROVIDER_STATUS = {
    ProviderErrorType.AUTH: 502,
    ProviderErrorType.TRANSIENT: 503,
    ProviderErrorType.RESPONSE: 502,
}


def create_app(
    settings: Settings | None = None,
    service: EmbeddingService | None = None,
) -> FastAPI:
    """
    Build the API application.
    
    Args:
        settings: Settings to build the service from, loaded from the
            environment when omitted.
        service: Prebuilt service, used as-is (tests inject fakes here).
    """
    if service is None:
        service = EmbeddingService.from_settings(settings or get_settings())
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await service.aclose()
    
    app = FastAPI(
        title="Embeddings API",
        version=__version__,
        description="API for managing and comparing text embeddings",
        lifespan=lifespan,
    )
    app.state.service = service
    
    @app.exception_handler(ValidationError)
    async def _validation_error(request: Request, exc: ValidationError):
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error=str(exc)).model_dump(),
        )
    
    @app.exception_handler(ProviderError)
    async def _provider_error(request: Request, exc: ProviderError):
        logger.warning("Embedding generation failed (%s): %s", exc.error_type.value, exc)
        return JSONResponse(
            status_code=PROVIDER_STATUS[exc.error_type],
            content=ErrorResponse(
                error="embedding generation failed",
                kind=exc.error_type.value,
                details={"message": str(exc)},
            ).model_dump(),
        )
    
    @app.exception_handler(DimensionalityMismatchError)
    async def _dimension_error(request: Request, exc: DimensionalityMismatchError):
        return JSONResponse(
            status_code=409,
            content=ErrorResponse(
                error=str(exc),
                kind="dimensionality_mismatch",
                details={"model": exc.model, "expected": exc.expected, "actual": exc.actual},
            ).model_dump(),
        )
    
    @app.post(
        "/store",
        response_model=StoreResult,
        response_model_exclude_none=True,
        tags=["embeddings"],
    )
    async def store_embedding(payload: StoreRequest) -> StoreResult:
        """Store a new text embedding."""
        return await service.store(
            payload.text,
            embedding_type=payload.embedding_type,
            model=payload.model,
            include_embedding=payload.include_embedding,
        )
    
    @app.post(
        "/compare",
        response_model=CompareResponse,
        response_model_exclude_none=True,
        tags=["embeddings"],
    )
    async def compare_embedding(payload: CompareRequest) -> CompareResponse:
        """Compare text with stored embeddings."""
        results = await service.compare(
            payload.text,
            embedding_type=payload.embedding_type,
            model=payload.model,
            top_k=payload.top_k,
            include_embeddings=payload.include_embeddings,
            exclude_self=payload.exclude_self,
        )
        return CompareResponse(results=results)
    
    @app.post("/clear", response_model=ClearResult, tags=["embeddings"])
    async def clear_embeddings() -> ClearResult:
        """Clear all stored embeddings."""
        return service.clear()
    
    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        stats = service.stats()
        return HealthResponse(total=stats.total, by_type=stats.by_type)
    
    return app
