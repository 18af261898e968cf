"""CodeLint — heuristic code review service.

Main FastAPI application with lifespan management, CORS, and global error handling.
"""

from contextlib import asynccontextmanager
import logging

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.api.router import api_router
from app.services.code_review import code_review_service
from app.validators.profiles import list_profiles

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
    """Log the rule profiles and enrichment status on startup."""
    settings = get_settings()

    # Profiles are built at import; report what loaded and whether enrichment can run
    logger.info("app_starting", debug=settings.DEBUG)

    logger.info(
        "rule_profiles_loaded",
        languages=[profile.id for profile in list_profiles()],
    )
    logger.info(
        "enrichment_status",
        configured=code_review_service.enrichment.configured,
        model=settings.ENRICHMENT_MODEL,
    )

    logger.info("app_started")

    yield

    # Nothing to release: no connections or caches are held
    logger.info("app_stopped")


# FastAPI app serving the validate, languages and health routes

app = FastAPI(
    title="CodeLint",
    description=(
        "Rule-based code review for short snippets. "
        "Detects likely syntax and typo defects, suggests a corrected version, "
        "and optionally defers to an LLM review."
    ),
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# The editor calls from its own origin

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# /validate converts its own failures to the degraded result; this covers the other routes

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


# Versioned API

app.include_router(api_router, prefix="/api/v1")


# Service discovery for the editor

@app.get("/")
async def root():
    """Service name, version, and where the review endpoints live."""
    return {
        "name": "CodeLint",
        "version": "1.0.0",
        "description": "Heuristic code review service",
        "docs": "/docs",
        "validate": "/api/v1/validate",
        "health": "/api/v1/health",
    }
