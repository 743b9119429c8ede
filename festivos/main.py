# festivos/main.py
"""
FastAPI application entry point.
"""

import os
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from festivos.core.config import COUNTRY_CODE, IS_PRODUCTION, SERVICE_NAME, SERVICE_VERSION
from festivos.core.logging_config import get_logger, setup_logging
from festivos.core.request_logging import RequestLoggingMiddleware
from festivos.core.sentry_config import init_sentry
from festivos.core.validators import InvalidArgumentError
from festivos.routes.holidays import router as holidays_router

# Setup logging FIRST (before any other imports that might log)
setup_logging()
logger = get_logger(__name__)

# Initialize Sentry for error tracking (production only)
sentry_enabled = init_sentry()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Application starting up",
        extra={
            "extra_fields": {
                "production": IS_PRODUCTION,
                "country": COUNTRY_CODE,
                "python_version": sys.version,
            }
        },
    )

    yield

    logger.info("Application shutting down")


app = FastAPI(
    title="Festivos",
    description="Colombian public holidays (Law 51 of 1983)",
    version=SERVICE_VERSION,
    lifespan=lifespan,
)

# CORS Configuration
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "").split(",") if origin.strip()]

if IS_PRODUCTION:
    # Production: only the configured origins, read-only API
    if not CORS_ORIGINS:
        logger.warning(
            "Production mode but no CORS_ORIGINS set. CORS will block all cross-origin requests. "
            "Set CORS_ORIGINS environment variable if you need to allow specific origins."
        )
    allowed_origins = CORS_ORIGINS
    logger.info(f"CORS configured for production with origins: {allowed_origins}")
else:
    allowed_origins = ["*"]
    logger.info("CORS configured for development (permissive)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(holidays_router)


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    """Argument errors from the holiday engine are client errors."""
    logger.warning(f"Invalid argument on {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "sentry": sentry_enabled,
    }
