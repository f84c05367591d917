"""FastAPI application factory"""

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from loan_calculator.api.middleware import RequestIDMiddleware, MetricsMiddleware
from loan_calculator.api.v1 import credit, offers
from loan_calculator.api.v1.schemas import ErrorResponse
from loan_calculator.infrastructure.observability.logging import setup_logging
from loan_calculator.config import settings

# Setup structured logging
setup_logging(settings.log_level, settings.service_name)


def first_validation_message(exc: RequestValidationError) -> str:
    """Render the first violated field as 'field.path: message'"""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    error = errors[0]
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    return f"{location}: {error.get('msg')}" if location else str(error.get("msg"))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = first_validation_message(exc)
    logging.warning(
        f"Validation failed: {message}",
        extra={"request_id": getattr(request.state, "request_id", "unknown")},
    )
    return JSONResponse(status_code=400, content=ErrorResponse(message=message).model_dump())


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Loan Calculator API",
        description="Preliminary loan offers and full credit calculation",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(offers.router, prefix="/calculator", tags=["offers"])
    app.include_router(credit.router, prefix="/calculator", tags=["credit"])

    return app


app = create_app()
