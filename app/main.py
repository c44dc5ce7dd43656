"""Guest Message Analyzer — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.adapters.persistence.database import engine
from app.config import settings
from app.domain.errors import AnalyzerError
from app.infrastructure.api.routes_analysis import router as analysis_router
from app.infrastructure.api.routes_health import router as health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    try:
        async with engine.begin():
            pass  # Connection pool warmed up
        logger.info("Database connection established")
    except Exception as e:
        logger.warning("Database not available on startup: %s", e)
    yield
    await engine.dispose()


async def analyzer_error_handler(request: Request, exc: AnalyzerError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.error, "details": exc.details},
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "details": str(exc.errors())},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "details": str(exc)},
    )


def create_app() -> FastAPI:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Guest Message Analyzer",
        description="Sentiment, urgency, topic, translation and Q&A for hotel guest messages",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Browser callers send preflight OPTIONS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials="*" not in settings.cors_allow_origins,
        allow_methods=["POST", "GET", "OPTIONS"],
        allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
    )

    app.add_exception_handler(AnalyzerError, analyzer_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(analysis_router, prefix="/api")

    return app


app = create_app()
