"""UCS Predictor: soil-mixture form validation and UCS prediction service.

Main FastAPI application with lifespan management, CORS, and global error handling.
"""

import logging
from contextlib import asynccontextmanager

import httpx
import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ucs_predictor.config import get_settings
from ucs_predictor.api.router import api_router
from ucs_predictor.services.prediction_client import PredictionClient

# Configure structured logging
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer() if get_settings().DEBUG else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(get_settings().LOG_LEVEL.upper())
    ),
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    settings = get_settings()

    # ── Startup ──
    logger.info("app_starting", debug=settings.DEBUG)

    app.state.http_client = httpx.AsyncClient(timeout=settings.PREDICTION_TIMEOUT_SECONDS)
    app.state.prediction_client = PredictionClient(app.state.http_client)
    logger.info("prediction_client_ready", url=settings.PREDICTION_URL, require_pi=settings.REQUIRE_PI)

    logger.info("app_started")

    yield

    # ── Shutdown ──
    logger.info("app_shutting_down")

    await app.state.http_client.aclose()

    logger.info("app_stopped")


# ── Create Application ──

app = FastAPI(
    title="UCS Predictor",
    description=(
        "Data-entry and validation service for geotechnical soil-mixture measurements. "
        "Derives the Plasticity Index, enforces cross-field constraints, and forwards "
        "validated records to a remote Unconfined Compressive Strength model."
    ),
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ── Middleware ──

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Global Exception Handlers ──

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all error handler for unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again.",
        },
    )


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    """Handle validation errors."""
    return JSONResponse(
        status_code=422,
        content={"error": "validation_error", "message": str(exc)},
    )


# ── Routes ──

app.include_router(api_router, prefix="/api/v1")


# ── Root endpoint ──

@app.get("/")
async def root():
    """Root endpoint: API info."""
    return {
        "name": "UCS Predictor",
        "version": "1.0.0",
        "description": "Soil-mixture form validation and UCS prediction",
        "docs": "/docs",
        "health": "/api/v1/health",
        "fields": "/api/v1/form/fields",
    }


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "ucs_predictor.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL,
    )
