"""FastAPI application factory"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from nbfc_console.api.middleware import RequestIDMiddleware, MetricsMiddleware
from nbfc_console.api.v1 import access, credit_score, disbursements
from nbfc_console.infrastructure.database.models import Base
from nbfc_console.infrastructure.database.seed import seed_sample_disbursements
from nbfc_console.infrastructure.database.session import SessionLocal, engine
from nbfc_console.infrastructure.observability.logging import setup_logging
from nbfc_console.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and load sample disbursements on a fresh database"""
    Base.metadata.create_all(bind=engine)
    if settings.seed_sample_data:
        db = SessionLocal()
        try:
            seed_sample_disbursements(db)
        finally:
            db.close()
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="NBFC Console",
        description="Access control, credit scoring and disbursement rules for the lending dashboard",
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
    app.include_router(access.router, prefix="/v1", tags=["access"])
    app.include_router(credit_score.router, prefix="/v1", tags=["scoring"])
    app.include_router(disbursements.router, prefix="/v1", tags=["disbursements"])

    return app


app = create_app()
