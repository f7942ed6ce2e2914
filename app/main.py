# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Fibonacci API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload
#   poetry run fibonacci-api
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app import __version__
from app.config import settings
from app.exceptions import (
    domain_error_handler,
    unexpected_exception_handler,
    validation_exception_handler,
)
from app.routers import fibonacci, health
from core.errors import DomainError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Logs the effective configuration on startup and the shutdown.
    """
    logger.info(f"Starting Fibonacci API in {settings.ENVIRONMENT} mode")
    logger.info(f"Sequence storage: {settings.STORAGE_DIR}/{settings.SEQUENCE_FILENAME}")

    yield

    logger.info("Shutting down Fibonacci API")


# Create FastAPI application
app = FastAPI(
    title="Fibonacci API",
    description="""
## Fibonacci numbers, sequences and error handling

Each operation comes in two flavours: a plain endpoint that lets failures
escape, and a variant that classifies them into distinct status codes.

| Failure | Status |
|---------|--------|
| Non-numeric input | 400 |
| Position too large | 400 |
| Ratio dividing by fib(0) | 400 |
| Sequence file missing | 404 |
| Simulated unchecked fault (`n=npe`) | 418 |
| Sequence file not writable | 500 |
| Anything else | 500 (generic message) |
""",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Fibonacci",
            "description": "Numbers, ratios and stored sequences",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(DomainError)
async def handle_domain_error(request: Request, exc: DomainError):
    """Handle classified Fibonacci errors."""
    return await domain_error_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError):
    """Handle missing or malformed query parameters."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    return await unexpected_exception_handler(request, exc)


# =============================================================================
# Routers
# =============================================================================

app.include_router(
    fibonacci.router,
    prefix="/fibonacci",
    tags=["Fibonacci"]
)

app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Fibonacci API",
        "version": __version__,
        "docs": "/docs",
        "health": "/api/v1/health",
    }


# =============================================================================
# Entry Point
# =============================================================================

def run():
    """
    Serve the API with uvicorn on the configured host and port.

    Auto-reload is enabled in development.
    """
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
