"""FastAPI application factory for the loan decision gateway"""

from fastapi import APIRouter, FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from loan_gateway.api.errors import register_exception_handlers
from loan_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from loan_gateway.api.v1 import decision
from loan_gateway.infrastructure.observability.logging import setup_logging
from loan_gateway.config import settings

ops_router = APIRouter()


@ops_router.get("/health")
def health_check():
    return {"status": "ok", "service": settings.service_name}


@ops_router.get("/metrics")
def metrics():
    """Prometheus exposition of decision and latency collectors"""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


def create_app() -> FastAPI:
    """Build the app: JSON logging, tracing/metrics middleware, error translation, routes"""
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Loan Decision Gateway",
        description="Approves the largest loan amount and earliest period for an applicant",
        version="0.1.0",
    )

    # RequestIDMiddleware is added last so it runs first and metrics see the ID
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(ops_router, tags=["operations"])
    app.include_router(decision.router, prefix="/loan", tags=["decisions"])

    return app


app = create_app()
