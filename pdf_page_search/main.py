"""Main FastAPI application for PDF Page Search."""

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
import structlog

from .api import search_router, health_router
from .config import Settings, get_settings
from .core.exceptions import PageSearchError
from .engine_instance import document_store
from .models.response import ErrorResponse


def configure_logging(settings: Settings) -> None:
    """Configure stdlib logging and structlog from settings."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper(), logging.INFO)
    )

    if settings.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


settings = get_settings()
configure_logging(settings)
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    logger.info("Starting PDF Page Search service", version=settings.app_version)

    if settings.documents_path:
        try:
            loaded = document_store.load_json(settings.documents_path)
            logger.info("Documents loaded", path=settings.documents_path, total_documents=loaded)
        except FileNotFoundError:
            logger.warning("Documents file not found, starting empty", path=settings.documents_path)
        except Exception as e:
            logger.error("Failed to load documents", path=settings.documents_path, error=str(e))
            raise

    yield

    # Shutdown
    logger.info("Shutting down PDF Page Search service")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Exact, whole-word and fuzzy search over the pages of extracted document text",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Add middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    """Log all HTTP requests."""
    start_time = time.time()

    logger.info(
        "Request started",
        method=request.method,
        url=str(request.url),
        client_ip=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent")
    )

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        "Request completed",
        method=request.method,
        url=str(request.url),
        status_code=response.status_code,
        process_time_ms=round(process_time * 1000, 2)
    )

    return response


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return malformed requests in the search error envelope."""
    logger.warning("Invalid request", method=request.method, url=str(request.url))

    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            error="Invalid request",
            details={"errors": [
                {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
                for error in exc.errors()
            ]}
        ).model_dump(mode="json", exclude_none=True)
    )


@app.exception_handler(PageSearchError)
async def search_exception_handler(request: Request, exc: PageSearchError) -> JSONResponse:
    """Handle search errors raised outside the search routes."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message).model_dump(mode="json", exclude_none=True)
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle global exceptions."""
    logger.error(
        "Unhandled exception",
        method=request.method,
        url=str(request.url),
        error=str(exc),
        exc_info=True
    )

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Error searching document",
            details={"exception": str(exc)} if settings.debug else None
        ).model_dump(mode="json", exclude_none=True)
    )


# Include API routers
app.include_router(search_router)
app.include_router(health_router)


# Root endpoint
@app.get("/", summary="Root endpoint", description="Get basic information about the API")
async def root() -> dict:
    """Root endpoint with basic API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Exact, whole-word and fuzzy search over the pages of extracted document text",
        "docs_url": "/docs",
        "health_url": "/api/v1/health",
        "status": "running"
    }


# API info endpoint
@app.get("/api", summary="API information", description="Get detailed API information")
async def api_info() -> dict:
    """Get detailed API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "endpoints": {
            "search": "/api/v1/search",
            "search_by_query": "/api/v1/documents/{document_id}/search?q=text",
            "health": "/api/v1/health"
        },
        "features": [
            "Exact substring matching, overlapping occurrences included",
            "Fuzzy matching by normalized Levenshtein similarity",
            "Whole-word filtering",
            "Case-insensitive searches",
            "Bounded context windows around each match"
        ],
        "limits": {
            "fuzzy_threshold": settings.fuzzy_threshold,
            "max_query_length": settings.max_query_length,
            "max_page_length": settings.max_page_length
        }
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "pdf_page_search.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.workers,
        log_level=settings.log_level.lower()
    )
