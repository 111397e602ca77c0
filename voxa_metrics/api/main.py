"""FastAPI application factory"""

import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from voxa_metrics.api.middleware import RequestIDMiddleware, MetricsMiddleware
from voxa_metrics.api.dependencies import get_request_id
from voxa_metrics.api.v1 import usage, metrics, analytics, webhooks
from voxa_metrics.infrastructure.observability.logging import setup_logging
from voxa_metrics.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Voxa Metrics",
        description="Usage, billing and call analytics for the voice-calling dashboard",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception):
        logging.error(f"Unexpected error: {exc}", exc_info=exc, extra={"request_id": get_request_id(request)})
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def prometheus_metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(usage.router, prefix="/v1", tags=["usage"])
    app.include_router(metrics.router, prefix="/v1", tags=["metrics"])
    app.include_router(analytics.router, prefix="/v1", tags=["analytics"])
    app.include_router(webhooks.router, prefix="/v1", tags=["webhooks"])

    return app


app = create_app()
