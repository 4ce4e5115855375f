"""FastAPI application factory"""

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from debt_coach.api.middleware import RequestContextMiddleware
from debt_coach.api.v1 import coach, debts
from debt_coach.domain.exceptions import EmptyStoreError, ValidationError
from debt_coach.domain.store import DebtStore
from debt_coach.infrastructure.clients.coach import CoachGateway
from debt_coach.infrastructure.clients.gemini import GeminiProvider
from debt_coach.infrastructure.observability.logging import setup_logging
from debt_coach.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Debt Coach",
        description="Debt tracking and Snowball/Avalanche repayment coaching",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # One store and one gateway per app instance
    app.state.debt_store = DebtStore()
    app.state.coach_gateway = CoachGateway(GeminiProvider())

    if not settings.gemini_api_key:
        logging.warning("GEMINI_API_KEY is not set; coach requests will fail until it is configured")

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logging.warning(f"Validation failed: {exc}", extra={"fields": exc.fields})
        return JSONResponse(status_code=400, content={"error": str(exc), "fields": exc.fields})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return await validation_error_handler(request, ValidationError.from_errors(exc.errors(), skip=("body", "query")))

    @app.exception_handler(EmptyStoreError)
    async def empty_store_handler(request: Request, exc: EmptyStoreError):
        return JSONResponse(status_code=400, content={"error": str(exc)})

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(debts.router, prefix="/api", tags=["debts"])
    app.include_router(coach.router, prefix="/api", tags=["coach"])

    return app


app = create_app()


def run() -> None:
    """Console entry point"""
    import uvicorn

    uvicorn.run(
        "debt_coach.api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
