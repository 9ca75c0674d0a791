"""FastAPI application factory"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from impact_gateway.api.dependencies import get_request_id
from impact_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from impact_gateway.api.v1 import impact, accounts
from impact_gateway.domain.exceptions import ReportFormatError
from impact_gateway.infrastructure.observability.logging import setup_logging
from impact_gateway.infrastructure.observability.metrics import report_parse_failures_counter
from impact_gateway.config import settings

setup_logging(settings.log_level)


async def report_format_error_handler(request: Request, exc: ReportFormatError) -> JSONResponse:
    """Malformed report documents are client errors on every endpoint"""
    report_parse_failures_counter.inc()
    logging.warning(f"Malformed credit report: {exc}", extra={"request_id": get_request_id(request)})
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Credit Impact Gateway",
        description="Derogatory-impact analysis for bureau credit reports",
        version="0.1.0",
    )

    # Last added runs first: request ID is set before latency is measured
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(ReportFormatError, report_format_error_handler)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    for router, tag in ((impact.router, "impact"), (accounts.router, "accounts")):
        app.include_router(router, prefix="/v1", tags=[tag])

    return app


app = create_app()
