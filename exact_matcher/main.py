"""Main FastAPI application for the Exact Matcher."""

import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
import structlog

from .api import (
    search_router,
    health_router,
    metrics_router,
)
from .config import Settings, get_settings
from .core.errors import ConfigurationError
from .core.strategy import Strategy
from .engine_instance import match_engine
from .models.response import ErrorResponse

settings = get_settings()

DESCRIPTION = "Exact single-pattern string matching with interchangeable algorithms"


def configure_logging(config: Settings) -> None:
    """Route structlog through stdlib logging at the configured level."""
    logging.basicConfig(format="%(message)s", level=config.log_level.upper())

    renderer = (
        structlog.processors.JSONRenderer()
        if config.log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


configure_logging(settings)
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log the matching configuration on startup and the totals on shutdown."""
    logger.info(
        "Starting Exact Matcher service",
        version=settings.app_version,
        default_strategy=match_engine.default_strategy.value,
        table_cache=settings.enable_table_cache,
        table_cache_max_size=settings.table_cache_max_size,
    )
    yield
    stats = match_engine.get_stats()
    logger.info(
        "Shutting down Exact Matcher service",
        total_searches=stats["total_searches"],
        table_builds=stats["table_builds"],
        disagreements=stats["disagreements"],
    )


app = FastAPI(
    title=settings.app_name,
    description=DESCRIPTION,
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
# Batch and all-occurrence responses can carry long index lists
app.add_middleware(GZipMiddleware, minimum_size=1000)


@app.middleware("http")
async def bind_request_context(request: Request, call_next) -> Response:
    """Tag every log event of a request with its id and report the elapsed time."""
    request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        request_id=request_id, method=request.method, path=request.url.path
    )

    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = round((time.perf_counter() - start) * 1000, 2)

    response.headers["X-Request-ID"] = request_id
    logger.info("Request completed", status_code=response.status_code, process_time_ms=elapsed_ms)
    return response


def _error(status_code: int, error: str, message: str, details=None) -> JSONResponse:
    request_id = structlog.contextvars.get_contextvars().get("request_id")
    body = ErrorResponse(error=error, message=message, details=details, request_id=request_id)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    """Bad strategy parameters are the caller's fault."""
    logger.warning("Invalid matcher configuration", error=str(exc))
    return _error(400, "Configuration Error", str(exc))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception", error=str(exc), exc_info=True)
    details = {"exception": str(exc)} if settings.debug else None
    return _error(500, "Internal Server Error", "An unexpected error occurred", details)


app.include_router(search_router)
app.include_router(health_router)
app.include_router(metrics_router)


@app.get("/", summary="Root endpoint")
async def root() -> dict:
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": DESCRIPTION,
        "docs_url": "/docs",
        "health_url": "/api/v1/health",
        "status": "running",
    }


@app.get("/api", summary="API information")
async def api_info() -> dict:
    """Endpoints, available strategies and request size limits."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "endpoints": {
            "search": "/api/v1/search",
            "batch_search": "/api/v1/search/batch",
            "compare": "/api/v1/compare",
            "strategies": "/api/v1/strategies",
            "health": "/api/v1/health",
            "metrics": "/api/v1/metrics",
        },
        "strategies": [strategy.value for strategy in Strategy],
        "default_strategy": match_engine.default_strategy.value,
        "limits": {
            "max_text_length": settings.max_text_length,
            "max_pattern_length": settings.max_pattern_length,
            "max_batch_patterns": settings.max_batch_patterns,
        },
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "exact_matcher.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.workers,
        log_level=settings.log_level.lower(),
    )
