"""FastAPI application factory"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from approu_calculators.api.middleware import RequestIDMiddleware, MetricsMiddleware
from approu_calculators.api.v1 import calculators, rates
from approu_calculators.infrastructure.database.session import init_db
from approu_calculators.infrastructure.observability.logging import setup_logging
from approu_calculators.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Approu Mortgage Calculators",
        description="Canadian mortgage payment, affordability, down payment, rent-vs-buy, "
        "refinance and land transfer tax calculators, plus posted rates",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(calculators.router, prefix="/v1", tags=["calculators"])
    app.include_router(rates.router, prefix="/v1", tags=["rates"])

    return app


app = create_app()
