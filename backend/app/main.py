"""
JSON Validator Backend — FastAPI Application Factory
=====================================================

What:  Creates and configures the FastAPI application instance and runs it.
How:   create_app() returns a configured FastAPI instance; run() starts
       uvicorn with the configured host, port and worker count.
Who:   uvicorn imports `app.main:app`; `python -m app` calls run().

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────┐ ┌─────────┐ ┌─────────┐  │
    │  │  Req ID  │→│ Metrics  │→│ Logging │→│GZip/CORS│  │
    │  └──────────┘ └──────────┘ └─────────┘ └─────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  GET /   POST /api/format   POST /api/minify        │
    │  GET /health   GET /metrics                         │
    │                                                     │
    │  Exception Handlers:                                │
    │  Exception → 500 (request ID, counted as error)     │
    └─────────────────────────────────────────────────────┘

State:
    app.state.metrics holds the RequestMetrics counter set. It is created by
    the factory, so every app instance (and every worker process) owns its own.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import Settings, settings
from app.exceptions import ConfigurationError
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.metrics import MetricsMiddleware
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.routes import health, index, json_tools, metrics
from app.schemas.json_document import ErrorResponse
from app.services.metrics import RequestMetrics

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger once for the whole process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, level or settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # RequestLoggingMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("%s %s starting up", settings.service_name, __version__)
    logger.info("Default indent: %d spaces", settings.default_indent)

    yield

    logger.info("%s shutting down; final counters: %s", settings.service_name, app.state.metrics.snapshot())


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register the catch-all handler for unexpected errors.

    Malformed JSON input never reaches here: JsonService reports it inside the
    response envelope with HTTP 200. Request-body schema errors keep FastAPI's
    default 422 handler.
    """

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        request.app.state.metrics.record_error()
        body = ErrorResponse(
            error="internal_server_error",
            message="An unexpected error occurred. Please try again.",
            request_id=rid,
        )
        return JSONResponse(status_code=500, content=body.model_dump())


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(request_metrics: Optional[RequestMetrics] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        request_metrics: Counter set to inject; a fresh one is created if omitted.
    """
    app = FastAPI(
        title="JSON Validator API",
        description="Validate, pretty-print and minify JSON documents.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.metrics = request_metrics or RequestMetrics()

    # ── Register Middleware ───────────────────────────────────────────────
    # Execution order is the reverse of addition: last added runs first.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(index.router)
    app.include_router(json_tools.router)
    app.include_router(health.router)
    app.include_router(metrics.router)

    return app


app = create_app()


# ══════════════════════════════════════════════════════════════════════════
# Process Entry Point
# ══════════════════════════════════════════════════════════════════════════

def check_startup(config: Settings) -> None:
    """
    Validate settings that only matter when starting a listener.

    Raises:
        ConfigurationError: worker count below 1
    """
    if config.workers < 1:
        raise ConfigurationError(
            message=f"WORKERS must be at least 1, got {config.workers}",
            context={"workers": config.workers},
        )


def run(config: Optional[Settings] = None) -> int:
    """
    Start uvicorn and block until it exits.

    Returns the process exit status: 0 on clean shutdown, 1 when the
    configuration is rejected or the listener cannot bind.
    """
    config = config or settings
    setup_logging(config.log_level)

    try:
        check_startup(config)
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e.message)
        return 1

    logger.info(
        "Starting %s on http://%s:%d with %d worker(s)",
        config.service_name,
        config.host,
        config.port,
        config.workers,
    )
    try:
        # An import string is required for workers > 1
        uvicorn.run(
            "app.main:app",
            host=config.host,
            port=config.port,
            workers=config.workers,
            log_level=config.log_level.lower(),
        )
    except OSError as e:
        logger.error("Could not bind %s:%d: %s", config.host, config.port, e)
        return 1
    except SystemExit as e:
        # uvicorn exits with status 1 after logging its own bind failure
        if e.code:
            logger.error("Server on %s:%d exited with status %s", config.host, config.port, e.code)
            return 1
    return 0
